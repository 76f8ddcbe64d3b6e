"""Authentication context for request handling."""

from __future__ import annotations

from dataclasses import dataclass

from .adapters.base import Principal


@dataclass(frozen=True)
class ContextUser:
    """The authenticated caller as seen by resolvers."""

    id: str
    company_id: str
    email: str | None = None


@dataclass
class AuthContext:
    """Runtime authentication context for a request.

    ``user`` is None for anonymous requests and for any request whose
    credential could not be resolved to a known user.
    """

    user: ContextUser | None = None
    principal: Principal | None = None
    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def company_id(self) -> str | None:
        return self.user.company_id if self.user else None

    @classmethod
    def anonymous(cls) -> AuthContext:
        return cls()
