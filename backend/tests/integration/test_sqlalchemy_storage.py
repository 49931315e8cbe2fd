"""Tests for the SQLAlchemy-backed storage scope on a throwaway SQLite file."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from easylog.application.services import EntityRegistryService, EntryLogService
from easylog.domain.entities import EntityCategory
from easylog.infrastructure.database import Base
from easylog.infrastructure.database.repositories import SQLAlchemyKeyValueStorage


async def _session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'easylog.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return engine, async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.mark.asyncio
async def test_get_set_remove(tmp_path):
    engine, factory = await _session_factory(tmp_path)
    try:
        async with factory() as session:
            storage = SQLAlchemyKeyValueStorage(session)
            assert await storage.get("token") is None

            await storage.set("token", "dummy-jwt-token-1")
            await storage.set("token", "dummy-jwt-token-2")
            assert await storage.get("token") == "dummy-jwt-token-2"

            await storage.remove("token")
            await storage.remove("token")
            assert await storage.get("token") is None
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_state_survives_across_sessions(tmp_path):
    engine, factory = await _session_factory(tmp_path)
    try:
        async with factory() as session:
            storage = SQLAlchemyKeyValueStorage(session)
            registry = EntityRegistryService(storage, EntryLogService(storage))
            await registry.add(EntityCategory.CLIENT, "Acme")
            await session.commit()

        async with factory() as session:
            storage = SQLAlchemyKeyValueStorage(session)
            registry = EntityRegistryService(storage, EntryLogService(storage))
            assert await registry.list_names(EntityCategory.CLIENT) == ["Default", "Acme"]
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_long_entity_name_keys(tmp_path):
    name = "Kunde " + "x" * 600
    engine, factory = await _session_factory(tmp_path)
    try:
        async with factory() as session:
            storage = SQLAlchemyKeyValueStorage(session)
            entry_log = EntryLogService(storage)
            registry = EntityRegistryService(storage, entry_log)
            await registry.add(EntityCategory.CUSTOMER, name)
            await entry_log.append(EntityCategory.CUSTOMER, name, "Rückruf vereinbart", "admin")
            await session.commit()

        async with factory() as session:
            entries = await EntryLogService(SQLAlchemyKeyValueStorage(session)).load(
                EntityCategory.CUSTOMER, name
            )
        assert [e.content for e in entries] == ["Rückruf vereinbart"]
    finally:
        await engine.dispose()
