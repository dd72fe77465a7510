"""Application service: End Session use case.

Signs the shopper out and wipes everything the session stored: cart,
age-gate flag and auth tokens.  The next visit starts from scratch.
"""

from __future__ import annotations

from purplehaze.domain.ports.identity_provider import IdentityProvider
from purplehaze.domain.ports.session_storage import SessionStorage


class EndSessionHandler:

    def __init__(
        self,
        identity_provider: IdentityProvider,
        storage: SessionStorage,
    ) -> None:
        self._identity_provider = identity_provider
        self._storage = storage

    def handle(self) -> None:
        if self._identity_provider.current_identity() is not None:
            self._identity_provider.sign_out()
        self._storage.clear()
