"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  Each factory is
cached so one CLI invocation shares one store, one client and one
session file.
"""

from __future__ import annotations

from functools import cache

from supabase import Client, create_client

from purplehaze.domain.service.age_gate import AgeGate
from purplehaze.domain.service.cart_store import CartStore
from purplehaze.infrastructure.config import settings
from purplehaze.infrastructure.persistence.json_session_storage import (
    JsonSessionStorage,
)
from purplehaze.infrastructure.supabase_backend.catalog_provider import (
    SupabaseCatalogProvider,
)
from purplehaze.infrastructure.supabase_backend.identity_provider import (
    SupabaseIdentityProvider,
)
from purplehaze.infrastructure.supabase_backend.order_sink import SupabaseOrderSink


@cache
def session_storage() -> JsonSessionStorage:
    return JsonSessionStorage(settings.session_file)


@cache
def cart_store() -> CartStore:
    return CartStore(session_storage(), currency=settings.currency)


@cache
def age_gate() -> AgeGate:
    return AgeGate(session_storage(), exit_url=settings.exit_url)


@cache
def supabase_client() -> Client:
    settings.require_supabase()
    return create_client(settings.supabase_url, settings.supabase_key)


@cache
def identity_provider() -> SupabaseIdentityProvider:
    provider = SupabaseIdentityProvider(supabase_client(), session_storage())
    provider.restore()
    return provider


def catalog_provider() -> SupabaseCatalogProvider:
    return SupabaseCatalogProvider(supabase_client(), currency=settings.currency)


def order_sink() -> SupabaseOrderSink:
    # Order writes need the shopper's auth session on the shared client
    identity_provider()
    return SupabaseOrderSink(supabase_client())
