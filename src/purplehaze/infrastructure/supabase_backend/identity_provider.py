"""Supabase-backed implementation of IdentityProvider.

The signed-in user and their tokens are kept in session storage so a
later invocation in the same session can restore the auth session on
the Supabase client.
"""

from __future__ import annotations

from supabase import AuthError, Client

from purplehaze.domain.exceptions import AuthenticationError
from purplehaze.domain.model.identity import Identity
from purplehaze.domain.model.value_objects import Credentials
from purplehaze.domain.ports.identity_provider import IdentityProvider
from purplehaze.domain.ports.session_storage import SessionStorage
from purplehaze.infrastructure.logging import get_logger

logger = get_logger(__name__)

AUTH_STORAGE_KEY = "purple-haze-auth"

INVALID_CREDENTIALS = "Invalid login credentials"


class SupabaseIdentityProvider(IdentityProvider):

    def __init__(self, client: Client, storage: SessionStorage) -> None:
        self.client = client
        self._storage = storage

    # --- IdentityProvider interface -------------------------------------------

    def current_identity(self) -> Identity | None:
        raw = self._storage.get(AUTH_STORAGE_KEY)
        if not raw:
            return None
        return Identity(id=raw["id"], email=raw["email"])

    def sign_in(self, credentials: Credentials) -> Identity:
        try:
            response = self.client.auth.sign_in_with_password(
                {"email": credentials.email, "password": credentials.password}
            )
        except AuthError as exc:
            raise AuthenticationError(self._sign_in_message(exc.message)) from exc
        return self._remember(response)

    def sign_up(self, credentials: Credentials) -> Identity:
        try:
            response = self.client.auth.sign_up(
                {"email": credentials.email, "password": credentials.password}
            )
        except AuthError as exc:
            raise AuthenticationError(self._sign_up_message(exc.message)) from exc
        return self._remember(response)

    def sign_out(self) -> None:
        try:
            self.client.auth.sign_out()
        except AuthError as exc:
            # The local session is dropped regardless
            logger.warning("Remote sign-out failed: %s", exc.message)
        self._storage.remove(AUTH_STORAGE_KEY)

    # --- Session restore ------------------------------------------------------

    def restore(self) -> None:
        """Re-attach stored tokens to the client for authenticated requests."""
        raw = self._storage.get(AUTH_STORAGE_KEY)
        if not raw or not raw.get("access_token"):
            return
        try:
            self.client.auth.set_session(raw["access_token"], raw["refresh_token"])
        except AuthError as exc:
            logger.warning("Stored session could not be restored: %s", exc.message)
            self._storage.remove(AUTH_STORAGE_KEY)

    # --- Internal helpers -----------------------------------------------------

    def _remember(self, response) -> Identity:
        user = response.user
        if user is None:
            raise AuthenticationError("No account was returned. Please try again.")
        identity = Identity(id=str(user.id), email=user.email or "")
        session = response.session
        self._storage.set(
            AUTH_STORAGE_KEY,
            {
                "id": identity.id,
                "email": identity.email,
                "access_token": session.access_token if session else None,
                "refresh_token": session.refresh_token if session else None,
            },
        )
        return identity

    @staticmethod
    def _sign_in_message(message: str) -> str:
        if message == INVALID_CREDENTIALS:
            return "Invalid email or password. Please try again."
        return message

    @staticmethod
    def _sign_up_message(message: str) -> str:
        if "already registered" in message:
            return "This email is already registered. Please sign in instead."
        return message
