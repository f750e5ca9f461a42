"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Single source of truth for rate limit strings and decorators.
CLEANUP_LIMIT = "3/minute"
PREVIEW_LIMIT = "30/minute"

limit_cleanup = limiter.limit(CLEANUP_LIMIT)
limit_preview = limiter.limit(PREVIEW_LIMIT)
