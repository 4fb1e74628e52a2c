"""
Rate limiting configuration and enforcement.

Uses slowapi to enforce a default per-client rate limit on every endpoint.
Protects against denial-of-service and resource abuse.

The limit is checked by an application-level dependency, so it runs for
every matched route no matter how routers are nested.
"""

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from catalog.core.config import Settings


def build_limiter(settings: Settings) -> Limiter:
    """Build a limiter with the configured default limit.

    One limiter per application, so counters never leak between apps.
    Counters are keyed on client address and request path.

    Args:
        settings: Application settings.

    Returns:
        A slowapi Limiter keyed on the client address.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def enforce_rate_limit(request: Request) -> None:
    """Count this request against the application's default limits.

    Raises:
        RateLimitExceeded: If the client is over its limit for this path.
    """
    limiter: Limiter = request.app.state.limiter
    if not limiter.enabled:
        return
    limiter._check_request_limit(request, request.scope.get("endpoint"), True)
