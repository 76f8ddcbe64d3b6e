"""Authentication context provider for FastAPI."""

from __future__ import annotations

from fastapi import Header

from ..database.connection import get_async_session
from ..logging import bind_auth_context, get_logger
from ..repository.users import get_user
from .adapters.base import AuthenticationError, Principal
from .context import AuthContext, ContextUser
from .factory import get_auth_adapter

logger = get_logger(__name__)


async def get_auth_context(authorization: str | None = Header(None)) -> AuthContext:
    """
    Build the authentication context from the Authorization header.

    This function:
    1. Extracts the Bearer token from the Authorization header
    2. Verifies it with the configured auth adapter
    3. Loads the user named by the token subject to learn its company

    Any failure along the way yields an anonymous context; operations that
    need a user reject it themselves.

    A missing header is always anonymous, in no-auth mode too: that mode only
    maps tokens that are actually sent.
    """
    if not authorization:
        return AuthContext.anonymous()

    if not authorization.startswith("Bearer "):
        logger.warning("Invalid authorization format received")
        return AuthContext.anonymous()

    token = authorization[7:].strip()
    if not token:
        logger.warning("Empty token provided")
        return AuthContext.anonymous()

    adapter = get_auth_adapter()

    try:
        principal = await adapter.verify_token(token)
    except AuthenticationError as e:
        logger.warning("Authentication failed", error=str(e))
        return AuthContext.anonymous()
    except Exception as e:
        logger.error("Unexpected authentication error", error=str(e))
        return AuthContext.anonymous()

    user = await resolve_context_user(principal)
    if user is None:
        return AuthContext(user=None, principal=principal, token=token)

    context = AuthContext(user=user, principal=principal, token=token)
    bind_auth_context(context)
    return context


async def resolve_context_user(principal: Principal) -> ContextUser | None:
    """Look up the local user for a verified principal."""
    async with get_async_session() as db:
        row = await get_user(db, principal["subject"])
        if row is None:
            logger.warning(
                "Token subject does not match any user",
                provider=principal.get("provider"),
                subject=principal.get("subject"),
            )
            return None

        logger.debug("User resolved for authenticated request", user_id=row.id)
        return ContextUser(id=row.id, company_id=row.company_id, email=row.email)
