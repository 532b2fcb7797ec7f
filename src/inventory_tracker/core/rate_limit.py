from slowapi import Limiter
from slowapi.util import get_remote_address

from inventory_tracker.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def api_rate_limit() -> str:
    """Per-client limit for API routes, evaluated on every request."""
    settings = get_settings()
    return f"{settings.rate_limit_requests}/{settings.rate_limit_window_seconds} seconds"
