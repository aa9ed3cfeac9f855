# pizzeria/api/v1/deps.py
import logging
from fastapi import Header, Request
from pizzeria.core.errors import Forbidden, Unauthenticated
from pizzeria.core.security import TokenError, TokenService
from pizzeria.schemas.auth import TokenClaims

logger = logging.getLogger("uvicorn.error")

def get_token_service(request: Request) -> TokenService:
    """Token service configured for this application (see create_app)."""
    return request.app.state.tokens

async def require_token(
    request: Request,
    authorization: str | None = Header(default=None),
) -> TokenClaims:
    """
    FastAPI dependency guarding protected routes with a Bearer token.

    The token is verified on its own: claims are self-contained, so no
    database lookup happens per request.

    Returns:
        TokenClaims: The decoded identity, also stored on request.state.user

    Raises:
        Unauthenticated (401): If no Authorization header is sent
        Forbidden (403): If the header is not "Bearer <token>", or the token
            is malformed, tampered with or expired

    Usage:
        @router.get("/protected", dependencies=[Depends(require_token)])
    """
    # An empty header carries no credential, same as a missing one
    if not authorization or not authorization.strip():
        raise Unauthenticated()

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        logger.info("[auth] rejected %s %s: malformed Authorization header", request.method, request.url.path)
        raise Forbidden(reason="malformed Authorization header")

    try:
        claims = get_token_service(request).verify(token)
    except TokenError as exc:
        logger.info("[auth] rejected %s %s: %s (%s)", request.method, request.url.path, type(exc).__name__, exc)
        raise Forbidden(reason=f"{type(exc).__name__}: {exc}") from exc

    request.state.user = claims
    return claims
