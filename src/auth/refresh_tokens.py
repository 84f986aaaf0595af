"""Refresh token bookkeeping on top of ExpiringStore.

Covers the login / renewal / logout cycle: a token is remembered under a
user-scoped key at login, checked and rotated when the access token runs out,
and revoked at logout. The store ttl is the refresh token lifetime.
"""

from __future__ import annotations

import hmac
from typing import Literal, Optional

from loguru import logger

from config import CLEANUP_INTERVAL_SECONDS, REFRESH_KEY_PREFIX, TOKEN_TTL_SECONDS
from core.errors import ValidationError
from core.store import ExpiringStore
from core.sweeper import Sweeper

SessionStatus = Literal["missing", "stale", "live"]


class RefreshTokenCache:
    """User-scoped refresh tokens with a shared lifetime.

    Purpose:
      - remember(user_id, token) at login
      - status(user_id) / lookup(user_id) when an access token expires
      - renew(user_id, presented, new_token) to rotate a live token
      - revoke(user_id) at logout
    """

    def __init__(self, store: ExpiringStore[str], *, prefix: str = "refresh") -> None:
        self._store = store
        self._prefix = (prefix or "").strip() or "refresh"

    @property
    def store(self) -> ExpiringStore[str]:
        return self._store

    def key_for(self, user_id: str) -> str:
        uid = (user_id or "").strip()
        if not uid:
            raise ValidationError("Missing user id")
        return f"{self._prefix}:{uid}"

    def remember(self, user_id: str, token: str) -> None:
        # A fresh login replaces whatever session the user had before
        self._store.upsert(self.key_for(user_id), token)

    def lookup(self, user_id: str) -> Optional[str]:
        token, found = self._store.get(self.key_for(user_id))
        return token if found else None

    def status(self, user_id: str) -> SessionStatus:
        """Tell a user who never logged in apart from one whose session went stale."""
        key = self.key_for(user_id)
        if not self._store.check(key):
            return "missing"
        _, found = self._store.get(key)
        return "live" if found else "stale"

    def renew(self, user_id: str, presented: str, new_token: str) -> bool:
        """Swap a live token for a new one.

        Returns False and changes nothing when the stored token is missing,
        expired, or does not match `presented`.
        """
        key = self.key_for(user_id)
        expected = (presented or "").encode("utf-8")

        def matches(current: str) -> bool:
            return current is not None and hmac.compare_digest(current.encode("utf-8"), expected)

        renewed = self._store.update_if(key, matches, new_token)
        if not renewed:
            logger.debug("Refresh token for key {} not renewed", key)
        return renewed

    def revoke(self, user_id: str) -> None:
        self._store.delete(self.key_for(user_id))

    def cleanup(self) -> None:
        self._store.cleanup()


def build_refresh_token_cache() -> RefreshTokenCache:
    store: ExpiringStore[str] = ExpiringStore(TOKEN_TTL_SECONDS)
    return RefreshTokenCache(store, prefix=REFRESH_KEY_PREFIX)


def build_sweeper(cache: RefreshTokenCache) -> Sweeper:
    return Sweeper(cache, interval_seconds=CLEANUP_INTERVAL_SECONDS)
