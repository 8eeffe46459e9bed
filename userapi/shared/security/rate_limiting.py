"""
Rate limiting configuration and setup.

Uses slowapi to limit the user lookup routes per client address.
The health route is never limited so liveness probes always succeed.
Limiting is off unless ``rate_limit_enabled`` is set.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from userapi.core.config import Settings, settings

_rate_limit = settings.rate_limit_default

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def current_rate_limit() -> str:
    """Return the limit applied to decorated routes, read on every request."""
    return _rate_limit


def configure_limiter(app_settings: Settings) -> Limiter:
    """Apply settings to the shared limiter and clear its counters.

    Args:
        app_settings: Settings providing the limit and the on/off switch.

    Returns:
        The configured limiter, to attach as ``app.state.limiter``.
    """
    global _rate_limit
    _rate_limit = app_settings.rate_limit_default
    limiter.enabled = app_settings.rate_limit_enabled
    limiter.reset()
    return limiter
