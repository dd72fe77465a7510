"""Application services: Sign In, Sign Up, Sign Out.

Credentials are validated before any call reaches the identity
provider, so a malformed email never costs a round-trip.
"""

from __future__ import annotations

import logging

from purplehaze.domain.model.identity import Identity
from purplehaze.domain.model.value_objects import Credentials
from purplehaze.domain.ports.identity_provider import IdentityProvider

logger = logging.getLogger(__name__)


class SignInHandler:

    def __init__(self, identity_provider: IdentityProvider) -> None:
        self._identity_provider = identity_provider

    def handle(self, email: str, password: str) -> Identity:
        credentials = Credentials(email=email, password=password)
        identity = self._identity_provider.sign_in(credentials)
        logger.info("User %s signed in", identity.id)
        return identity


class SignUpHandler:

    def __init__(self, identity_provider: IdentityProvider) -> None:
        self._identity_provider = identity_provider

    def handle(self, email: str, password: str) -> Identity:
        credentials = Credentials(email=email, password=password)
        identity = self._identity_provider.sign_up(credentials)
        logger.info("User %s signed up", identity.id)
        return identity


class SignOutHandler:

    def __init__(self, identity_provider: IdentityProvider) -> None:
        self._identity_provider = identity_provider

    def handle(self) -> None:
        self._identity_provider.sign_out()
