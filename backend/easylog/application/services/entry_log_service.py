"""Application service for per-entity entry logs (newest entry first)."""

import json
import logging
from collections.abc import Callable
from datetime import datetime

from easylog.application.interfaces import KeyValueStorage
from easylog.domain.entities import (
    DEFAULT_AUTHOR,
    EntityCategory,
    JournalEntry,
    format_entry_date,
)

logger = logging.getLogger(__name__)


class EntryLogService:
    """Reads and prepends journal entries. Depends on the storage port (DI).

    Logs have no size cap and no edit operation; they are only grown by
    ``append`` and dropped as a whole by ``delete_all``.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        clock: Callable[[], datetime] | None = None,
    ):
        self._storage = storage
        self._clock = clock or datetime.now

    async def load(self, category: EntityCategory, entity_name: str) -> list[JournalEntry]:
        """Return the entity's entries, newest first. Malformed data reads as empty."""
        key = category.entry_log_key(entity_name)
        raw = await self._storage.get(key)
        if raw is None:
            return []
        try:
            items = json.loads(raw)
            if not isinstance(items, list):
                raise ValueError(f"expected a list, got {type(items).__name__}")
            return [JournalEntry.from_dict(item) for item in items]
        except ValueError as exc:
            logger.warning("Ignoring malformed entry log '%s': %s", key, exc)
            return []

    async def append(
        self,
        category: EntityCategory,
        entity_name: str,
        content: str,
        author: str | None,
    ) -> JournalEntry | None:
        """Prepend a new entry and persist the log.

        Returns None without touching storage when ``content`` is blank.
        """
        if not content.strip():
            return None

        entries = await self.load(category, entity_name)
        now = self._clock()
        entry_id = int(now.timestamp() * 1000)
        if entries:
            entry_id = max(entry_id, max(e.id for e in entries) + 1)

        entry = JournalEntry(
            id=entry_id,
            date=format_entry_date(now),
            author=author or DEFAULT_AUTHOR,
            content=content,
        )
        entries.insert(0, entry)
        await self._save(category, entity_name, entries)
        logger.debug(
            "Appended entry %d to %s '%s' (%d total)",
            entry.id, category.value, entity_name, len(entries),
        )
        return entry

    async def delete_all(self, category: EntityCategory, entity_name: str) -> None:
        """Drop the whole log of an entity."""
        await self._storage.remove(category.entry_log_key(entity_name))

    async def _save(
        self, category: EntityCategory, entity_name: str, entries: list[JournalEntry]
    ) -> None:
        payload = json.dumps([e.to_dict() for e in entries], ensure_ascii=False)
        await self._storage.set(category.entry_log_key(entity_name), payload)
