"""Unit tests for RouteBinding state transitions."""

import pytest

from easylog.application.services import EntityRegistryService, RouteBinding
from easylog.domain.entities import EntityCategory, RouteState


@pytest.mark.asyncio
async def test_starts_idle(registry: EntityRegistryService):
    binding = RouteBinding(registry, EntityCategory.CLIENT)
    assert binding.state is RouteState.IDLE
    assert binding.current is None


@pytest.mark.asyncio
async def test_absent_name_stays_idle(registry: EntityRegistryService):
    binding = RouteBinding(registry, EntityCategory.CLIENT)
    resolution = await binding.bind(None)
    assert resolution.state is RouteState.IDLE
    assert not resolution.is_ready


@pytest.mark.asyncio
async def test_known_name_is_ready(registry: EntityRegistryService):
    await registry.add(EntityCategory.CLIENT, "Acme")
    binding = RouteBinding(registry, EntityCategory.CLIENT)

    resolution = await binding.bind("Acme")

    assert resolution.is_ready
    assert binding.current == "Acme"
    assert resolution.redirect_to is None


@pytest.mark.asyncio
async def test_unknown_client_redirects_to_default(registry: EntityRegistryService):
    binding = RouteBinding(registry, EntityCategory.CLIENT)

    resolution = await binding.bind("Ghost")

    assert resolution.state is RouteState.REDIRECTING
    assert resolution.redirect_to == "/journal/Default"
    assert resolution.current is None

    followed = await binding.follow_redirect()
    assert followed.is_ready
    assert followed.current == "Default"


@pytest.mark.asyncio
async def test_unknown_customer_redirects_to_default(registry: EntityRegistryService):
    binding = RouteBinding(registry, EntityCategory.CUSTOMER)
    resolution = await binding.bind("Ghost")
    assert resolution.redirect_to == "/journal/customer/DefaultCustomer"


@pytest.mark.asyncio
async def test_client_name_is_not_valid_for_customers(registry: EntityRegistryService):
    await registry.add(EntityCategory.CLIENT, "Acme")
    binding = RouteBinding(registry, EntityCategory.CUSTOMER)
    resolution = await binding.bind("Acme")
    assert resolution.state is RouteState.REDIRECTING


@pytest.mark.asyncio
async def test_rebinding_follows_navigation(registry: EntityRegistryService):
    await registry.add(EntityCategory.CLIENT, "Acme")
    binding = RouteBinding(registry, EntityCategory.CLIENT)

    await binding.bind("Acme")
    await binding.bind("Default")
    assert binding.current == "Default"

    await binding.bind("Ghost")
    assert binding.current is None


@pytest.mark.asyncio
async def test_follow_redirect_without_pending_redirect(registry: EntityRegistryService):
    binding = RouteBinding(registry, EntityCategory.CLIENT)
    await binding.bind("Default")
    assert (await binding.follow_redirect()).current == "Default"
