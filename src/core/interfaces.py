"""Core protocol definitions.

Defines the SupportsCleanup protocol the sweeper drives, satisfied by both
ExpiringStore and RefreshTokenCache.
"""

from __future__ import annotations

from typing import Protocol


class SupportsCleanup(Protocol):
    """Contract for anything that can drop its expired entries on demand."""
    def cleanup(self) -> None:
        ...
