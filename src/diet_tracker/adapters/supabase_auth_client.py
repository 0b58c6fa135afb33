"""Supabase Auth access-token verification."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from supabase import AuthError, Client

_logger = logging.getLogger(__name__)


class AuthClient(Protocol):
    """Interface for resolving access tokens to user ids."""

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a valid access token."""


@dataclass
class SupabaseAuthClient(AuthClient):
    """Resolve Supabase Auth JWTs through the Auth API."""

    client: Client

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for the token, or None when it is rejected."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            _logger.warning("Rejected access token: %s", exc)
            return None
        if response is None or response.user is None:
            return None
        return UUID(str(response.user.id))
