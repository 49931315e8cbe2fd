"""Concrete KeyValueStorage implementation backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from easylog.application.interfaces import KeyValueStorage
from easylog.infrastructure.database.models import StorageItemModel


class SQLAlchemyKeyValueStorage(KeyValueStorage):
    """Implements the KeyValueStorage port on the 'storage_items' table.

    Writes are flushed immediately; the request-scoped session commits them.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get(self, key: str) -> str | None:
        model = await self._session.get(StorageItemModel, key)
        return model.value if model else None

    async def set(self, key: str, value: str) -> None:
        model = await self._session.get(StorageItemModel, key)
        if model is None:
            self._session.add(StorageItemModel(key=key, value=value))
        else:
            model.value = value
            model.updated_at = datetime.now(timezone.utc)
        await self._session.flush()

    async def remove(self, key: str) -> None:
        model = await self._session.get(StorageItemModel, key)
        if model is None:
            return
        await self._session.delete(model)
        await self._session.flush()
