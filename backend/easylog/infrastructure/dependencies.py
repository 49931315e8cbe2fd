"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from easylog.config import get_settings
from easylog.application.interfaces import KeyValueStorage
from easylog.application.services import (
    EntityRegistryService,
    EntryLogService,
    JournalViewService,
    SessionService,
)
from easylog.infrastructure.database.session import get_db_session
from easylog.infrastructure.database.repositories import SQLAlchemyKeyValueStorage
from easylog.domain.entities import User
from easylog.domain.exceptions import CorruptStateError, NotAuthenticatedError
from easylog.infrastructure.storage.in_memory_storage import InMemoryKeyValueStorage


@lru_cache
def get_memory_storage() -> InMemoryKeyValueStorage:
    """Process-wide storage scope for the "memory" backend."""
    return InMemoryKeyValueStorage()


async def get_key_value_storage(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[KeyValueStorage, None]:
    """Provides the configured storage scope for this request."""
    if get_settings().storage_backend == "memory":
        yield get_memory_storage()
    else:
        yield SQLAlchemyKeyValueStorage(session)


async def get_entry_log_service(
    storage: KeyValueStorage = Depends(get_key_value_storage),
) -> AsyncGenerator[EntryLogService, None]:
    """Provides an EntryLogService bound to the request's storage."""
    yield EntryLogService(storage)


async def get_entity_registry_service(
    storage: KeyValueStorage = Depends(get_key_value_storage),
    entry_log: EntryLogService = Depends(get_entry_log_service),
) -> AsyncGenerator[EntityRegistryService, None]:
    """Provides an EntityRegistryService that cascades removals to the entry log."""
    yield EntityRegistryService(storage, entry_log)


async def get_session_service(
    storage: KeyValueStorage = Depends(get_key_value_storage),
) -> AsyncGenerator[SessionService, None]:
    """Provides the SessionService for login, logout, and access checks."""
    yield SessionService(storage)


async def get_journal_view_service(
    session: SessionService = Depends(get_session_service),
    registry: EntityRegistryService = Depends(get_entity_registry_service),
    entry_log: EntryLogService = Depends(get_entry_log_service),
) -> AsyncGenerator[JournalViewService, None]:
    """Provides the JournalViewService composing both registries and the entry log."""
    settings = get_settings()
    yield JournalViewService(
        session,
        registry,
        entry_log,
        login_path=settings.login_path,
        dictation_available=settings.speech_dictation_enabled,
    )


async def get_current_user(
    session: SessionService = Depends(get_session_service),
    db_session: AsyncSession = Depends(get_db_session),
) -> User:
    """Gate for journal API routes — 401 without a readable session."""
    try:
        return await session.require_user()
    except CorruptStateError as e:
        # keep the cleared session; raising below rolls the request back
        await db_session.commit()
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except NotAuthenticatedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
