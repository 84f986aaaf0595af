from core.errors import KeyAlreadyExistsError, KeyNotFoundError, TokenStoreError, ValidationError
from core.store import DEFAULT_TTL_SECONDS, ExpiringStore

__all__ = [
    "DEFAULT_TTL_SECONDS",
    "ExpiringStore",
    "KeyAlreadyExistsError",
    "KeyNotFoundError",
    "TokenStoreError",
    "ValidationError",
]
