"""No-auth adapter for local development without authentication."""

from __future__ import annotations

import os

from ...logging import get_logger
from .base import AuthenticationError, Principal

logger = get_logger(__name__)


class NoAuthAdapter:
    """
    No-auth adapter that bypasses token verification for local development.

    Any non-empty token maps to ``default_user_id``, which must still exist
    in the users table to carry a company.
    WARNING: Only use this in development environments!
    """

    def __init__(self, default_user_id: str = "AcMJpL7b413Z"):
        self.default_user_id = default_user_id

        environment = os.getenv("JOBBOARD_ENVIRONMENT", "").lower()
        if environment in ("production", "prod"):
            logger.error(
                "NoAuthAdapter detected in production environment! "
                "This is a security risk and should never be used in production.",
                environment=environment,
            )
            raise RuntimeError(
                "NoAuthAdapter cannot be used in production environments. "
                "Please configure a proper authentication provider."
            )

        logger.warning(
            "NoAuthAdapter is active - ALL tokens are accepted! "
            "This should ONLY be used in development.",
            user_id=default_user_id,
        )

    async def verify_token(self, token: str) -> Principal:
        """Accept any non-empty token as the default development user."""
        if not token:
            raise AuthenticationError("Token required (even in no-auth mode)")

        return Principal(
            provider="none",
            subject=self.default_user_id,
            claims={
                "mode": "development",
                "token": token[:20] + "..." if len(token) > 20 else token,
            },
        )
