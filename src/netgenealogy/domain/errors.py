"""Domain error hierarchy for genealogy resolution."""

from __future__ import annotations


class GenealogyError(RuntimeError):
    """Base class for errors raised while resolving network genealogies."""


class StoreQueryError(GenealogyError):
    """Raised when the store cannot answer a possible-relation query."""


class StorePersistError(GenealogyError):
    """Raised when the store fails to persist networks or genealogy links."""


class ChainLookupError(GenealogyError):
    """Raised when the chain cannot be asked for a block."""

    def __init__(self, message: str, *, height: int | None = None) -> None:
        super().__init__(message)
        self.height = height


class ResolutionAborted(GenealogyError):
    """Raised by a driver that declines to resume a suspended routine."""
