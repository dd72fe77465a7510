"""Domain service: Age Gate.

A one-way latch.  Once the shopper confirms their age the flag stays set
for the rest of the browsing session; a new session starts unverified.
"""

from __future__ import annotations

from purplehaze.domain.ports.session_storage import SessionStorage

AGE_VERIFIED_KEY = "purple-haze-age-verified"
DEFAULT_EXIT_URL = "https://www.google.com"


class AgeGate:

    def __init__(self, storage: SessionStorage, exit_url: str = DEFAULT_EXIT_URL) -> None:
        self._storage = storage
        self._exit_url = exit_url
        self._verified = storage.get(AGE_VERIFIED_KEY) is True

    @property
    def is_verified(self) -> bool:
        return self._verified

    def verify(self) -> None:
        self._verified = True
        self._storage.set(AGE_VERIFIED_KEY, True)

    def deny(self) -> str:
        """Leave state untouched and return where the shopper is sent."""
        return self._exit_url
