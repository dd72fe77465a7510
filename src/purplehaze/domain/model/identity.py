"""Signed-in shopper as seen by the storefront."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    id: str
    email: str
