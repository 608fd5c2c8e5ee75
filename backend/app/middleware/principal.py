"""
Principal middleware - reads the authenticated caller into request.state.

Credentials are verified upstream; this layer only trusts the identity headers
that the authentication proxy sets.
"""
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from app.config import settings
from app.logging import get_logger
from app.models import Principal

logger = get_logger('middleware.principal')


class PrincipalMiddleware(BaseHTTPMiddleware):
    """Attach the calling principal (or None) to every request."""

    async def dispatch(self, request: Request, call_next):
        principal_id = request.headers.get(settings.PRINCIPAL_ID_HEADER)

        if principal_id:
            request.state.principal = Principal(
                id=principal_id,
                username=request.headers.get(settings.PRINCIPAL_NAME_HEADER, ""),
            )
        else:
            request.state.principal = None

        return await call_next(request)
