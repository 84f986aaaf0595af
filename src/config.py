"""Runtime settings for the refresh token store.

Every value comes from an environment variable and is read once at import.
Unset, blank or unparsable variables keep the built-in default; durations
must also be finite and non-negative.
"""

from __future__ import annotations

import math
import os


def _env_seconds(name: str, default: float) -> float:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        seconds = float(raw)
    except ValueError:
        return default
    # "nan" and "inf" parse as floats but would stop entries from expiring
    if not math.isfinite(seconds) or seconds < 0:
        return default
    return seconds


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


# Refresh token lifetime; 0 lets the store apply its one-week default
TOKEN_TTL_SECONDS = _env_seconds("TOKEN_TTL_SECONDS", 0.0)

# Interval for callers that run a Sweeper
CLEANUP_INTERVAL_SECONDS = _env_seconds("CLEANUP_INTERVAL_SECONDS", 3600.0)

# Namespace for user-scoped refresh token keys
REFRESH_KEY_PREFIX = _env_str("REFRESH_KEY_PREFIX", "refresh")
