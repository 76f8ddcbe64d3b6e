"""Authentication: bearer-token verification and the per-request auth context."""

from .adapters.base import AuthAdapter, AuthenticationError, Principal
from .context import AuthContext, ContextUser
from .factory import get_auth_adapter
from .middleware import get_auth_context

__all__ = [
    "AuthAdapter",
    "AuthenticationError",
    "Principal",
    "AuthContext",
    "ContextUser",
    "get_auth_context",
    "get_auth_adapter",
]
