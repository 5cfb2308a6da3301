"""Shared dependencies for API routes."""

from fastapi import Depends, Header, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from services.container import Services
from services.errors import AuthenticationError

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit],
    enabled=settings.rate_limit_enabled,
)


def get_services(request: Request) -> Services:
    return request.app.state.services


async def get_current_user(
    authorization: str | None = Header(default=None),
    services: Services = Depends(get_services),
) -> str:
    """Resolve ``Authorization: Bearer <id token>`` to a user id."""
    if not authorization:
        raise AuthenticationError("No token provided")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Malformed authorization header")
    return await services.identity.verify(token.strip())
