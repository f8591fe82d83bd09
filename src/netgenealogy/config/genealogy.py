"""Genealogy resolution defaults."""

from __future__ import annotations

from dataclasses import dataclass

from .env import positive_int_env_var

DEFAULT_CANDIDATE_LIMIT = 5
DEFAULT_NETWORK_NAME = "development"


@dataclass(frozen=True, slots=True)
class GenealogyConfig:
    candidate_limit: int = DEFAULT_CANDIDATE_LIMIT
    network_name: str = DEFAULT_NETWORK_NAME


def get_genealogy_config() -> GenealogyConfig:
    return GenealogyConfig(
        candidate_limit=positive_int_env_var(
            "NETGENEALOGY_CANDIDATE_LIMIT", DEFAULT_CANDIDATE_LIMIT
        )
    )
