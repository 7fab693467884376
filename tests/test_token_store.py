"""Bearer Token Store - tests for namespaced token storage."""

import pytest

from promise_queue.tokens.store import BearerTokenStore


@pytest.mark.asyncio
async def test_empty_store_returns_none():
    store = BearerTokenStore()

    assert store.store_name == "bearer.global"
    assert await store.get_access_token() is None
    assert await store.get_refresh_token() is None


@pytest.mark.asyncio
async def test_set_and_get_tokens():
    store = BearerTokenStore("tao")

    assert await store.set_tokens("access", "refresh") is True
    assert await store.get_access_token() == "access"
    assert await store.get_refresh_token() == "refresh"


@pytest.mark.asyncio
async def test_clear_single_token():
    store = BearerTokenStore("tao")
    await store.set_tokens("access", "refresh")

    assert await store.clear_access_token() is True
    assert await store.get_access_token() is None
    assert await store.get_refresh_token() == "refresh"

    assert await store.clear_refresh_token() is True
    assert await store.get_refresh_token() is None


@pytest.mark.asyncio
async def test_clear_both_tokens():
    store = BearerTokenStore("tao")
    await store.set_tokens("access", "refresh")

    assert await store.clear() is True
    assert await store.get_access_token() is None
    assert await store.get_refresh_token() is None


@pytest.mark.asyncio
async def test_namespaces_are_shared_by_name_only():
    await BearerTokenStore("tao").set_access_token("shared")

    assert await BearerTokenStore("tao").get_access_token() == "shared"
    assert await BearerTokenStore("other").get_access_token() is None
