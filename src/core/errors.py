from __future__ import annotations


class TokenStoreError(Exception):
    """Base error for the token store."""


class ValidationError(TokenStoreError):
    """Raised when a constructor argument or caller input is invalid."""


class KeyAlreadyExistsError(TokenStoreError):
    """Raised by add() when the key is already stored, expired or not."""

    def __init__(self, key: str) -> None:
        super().__init__(f"key already exists: {key!r}")
        self.key = key


class KeyNotFoundError(TokenStoreError):
    """Raised by update() when the key is not stored."""

    def __init__(self, key: str) -> None:
        super().__init__(f"key does not exist: {key!r}")
        self.key = key
