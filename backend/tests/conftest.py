"""Shared fixtures — in-memory storage scope and an app wired to it."""

import pytest

from easylog.application.services import EntityRegistryService, EntryLogService, SessionService
from easylog.infrastructure.database.session import get_db_session
from easylog.infrastructure.dependencies import get_key_value_storage
from easylog.infrastructure.storage.in_memory_storage import InMemoryKeyValueStorage
from easylog.main import app


class FakeDbSession:
    """Stands in for the request-scoped AsyncSession when storage is in memory."""

    def __init__(self):
        self.commits = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass


@pytest.fixture
def storage() -> InMemoryKeyValueStorage:
    return InMemoryKeyValueStorage()


@pytest.fixture
def entry_log(storage: InMemoryKeyValueStorage) -> EntryLogService:
    return EntryLogService(storage)


@pytest.fixture
def registry(storage: InMemoryKeyValueStorage, entry_log: EntryLogService) -> EntityRegistryService:
    return EntityRegistryService(storage, entry_log)


@pytest.fixture
def session_service(storage: InMemoryKeyValueStorage) -> SessionService:
    return SessionService(storage, clock=lambda: 1700000000000)


@pytest.fixture
def api(storage: InMemoryKeyValueStorage):
    """The FastAPI app with every request bound to the test's storage scope."""

    async def _fake_db_session():
        yield FakeDbSession()

    app.dependency_overrides[get_key_value_storage] = lambda: storage
    app.dependency_overrides[get_db_session] = _fake_db_session
    yield app
    app.dependency_overrides.clear()
