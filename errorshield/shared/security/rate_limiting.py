"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-client rate limits.
Exceeded limits are reported through the central error handlers as 429.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

DEFAULT_RATE_LIMIT = "60/minute"


def build_limiter(default_limit: str = DEFAULT_RATE_LIMIT) -> Limiter:
    """Create a limiter keyed by client address.

    Args:
        default_limit: Limit applied to every route, e.g. "60/minute".
    """
    return Limiter(key_func=get_remote_address, default_limits=[default_limit])
