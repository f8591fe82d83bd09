"""Application configuration helpers."""

from __future__ import annotations

from .chain import ChainConfig, get_chain_config
from .env import positive_int_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .genealogy import GenealogyConfig, get_genealogy_config
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "ChainConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "GenealogyConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "configure_logging",
    "get_chain_config",
    "get_database_config",
    "get_genealogy_config",
    "get_storage_config",
    "positive_int_env_var",
    "require_env_var",
    "require_env_vars",
]
