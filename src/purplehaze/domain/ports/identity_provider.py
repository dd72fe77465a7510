"""Abstract identity collaborator (sign-in, sign-up, session)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from purplehaze.domain.model.identity import Identity
from purplehaze.domain.model.value_objects import Credentials


class IdentityProvider(ABC):

    @abstractmethod
    def current_identity(self) -> Identity | None:
        """Return the signed-in identity for this session, or None."""

    @abstractmethod
    def sign_in(self, credentials: Credentials) -> Identity:
        """Sign in; raises AuthenticationError when rejected."""

    @abstractmethod
    def sign_up(self, credentials: Credentials) -> Identity:
        """Register a new account; raises AuthenticationError when rejected."""

    @abstractmethod
    def sign_out(self) -> None:
        """End the signed-in session."""
