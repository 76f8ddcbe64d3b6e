"""
Shared access control logic for GraphQL resolvers
"""

import strawberry

from ..auth.context import AuthContext, ContextUser
from ..logging import get_logger
from .errors import NotAuthorizedError

logger = get_logger(__name__)


def get_auth_context_from_info(info: strawberry.Info) -> AuthContext:
    """
    Extract the auth context that the router's context getter attached.

    Falls back to an anonymous context when none is present.
    """
    context = info.context
    auth = context.get("auth") if isinstance(context, dict) else None
    if auth is None:
        logger.error("Auth context not found in GraphQL context")
        return AuthContext.anonymous()
    return auth


def require_user(auth_context: AuthContext, action: str) -> ContextUser:
    """
    Return the authenticated user or raise NotAuthorizedError.

    Args:
        auth_context: The request's authentication context
        action: Short description of the attempted operation, for logging
    """
    if auth_context.user is None:
        logger.info("Unauthenticated mutation rejected", action=action)
        raise NotAuthorizedError("Missing authentication")
    return auth_context.user
