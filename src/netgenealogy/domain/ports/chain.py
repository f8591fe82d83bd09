"""Port for reading blocks from the connected chain."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from netgenealogy.domain.model import Block


@runtime_checkable
class ChainClient(Protocol):
    """Read-only view of the chain the artifacts were deployed to."""

    def get_block_by_number(
        self, height: int, *, full_transactions: bool = False
    ) -> Block | None:
        """Return the block at ``height`` or ``None`` if the chain does not know it.

        Transport failures are raised as ``ChainLookupError``.
        """
        ...


__all__ = ["ChainClient"]
