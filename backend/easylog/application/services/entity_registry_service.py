"""Application service (use case) for the client and customer registries."""

import json
import logging
from collections.abc import Callable

from easylog.application.interfaces import KeyValueStorage
from easylog.application.services.entry_log_service import EntryLogService
from easylog.domain.entities import EntityCategory, RemovalOutcome, RemovalResult

logger = logging.getLogger(__name__)

# Accusative forms used in the user-facing confirmation prompt
_OBJECT_NOUNS = {
    EntityCategory.CLIENT: "Klienten",
    EntityCategory.CUSTOMER: "Kunden",
}


class EntityRegistryService:
    """Maintains the ordered, de-duplicated entity names of each category.

    The category's default entity is always present and cannot be removed.
    Removing any other entity cascades to its entry log.
    """

    def __init__(self, storage: KeyValueStorage, entry_log: EntryLogService):
        self._storage = storage
        self._entry_log = entry_log

    async def list_names(self, category: EntityCategory) -> list[str]:
        """Return the names in display order, initialising the registry if absent."""
        raw = await self._storage.get(category.registry_key)
        names = self._parse(category, raw)
        if names is None:
            names = [category.default_name]
            await self._save(category, names)
            return names

        repaired = self._repair(category, names)
        if repaired != names:
            logger.warning(
                "Repaired %s registry (default entity or duplicates): %s",
                category.value, repaired,
            )
            await self._save(category, repaired)
        return repaired

    async def contains(self, category: EntityCategory, name: str) -> bool:
        return name in await self.list_names(category)

    async def add(self, category: EntityCategory, name: str) -> list[str]:
        """Append ``name`` unless it is blank or already registered."""
        names = await self.list_names(category)
        if not name.strip() or name in names:
            return names
        names.append(name)
        await self._save(category, names)
        logger.info("Added %s '%s'", category.value, name)
        return names

    async def remove(
        self,
        category: EntityCategory,
        name: str,
        confirm: Callable[[str], bool],
        current: str | None = None,
    ) -> RemovalResult:
        """Remove an entity and its entry log after ``confirm`` approves.

        The default entity is refused before ``confirm`` is consulted. When the
        removed entity is ``current`` the result asks the caller to navigate to
        the category default.
        """
        names = await self.list_names(category)

        if name == category.default_name:
            message = f"Der Default-{category.label} kann nicht gelöscht werden."
            logger.warning("Refused to remove default %s '%s'", category.value, name)
            return RemovalResult(RemovalOutcome.PROTECTED, names, message)

        if name not in names:
            return RemovalResult(
                RemovalOutcome.NOT_FOUND, names, f"{category.label} '{name}' nicht gefunden."
            )

        prompt = (
            f'Möchten Sie den {_OBJECT_NOUNS[category]} "{name}" wirklich löschen? '
            "Alle zugehörigen Journal-Einträge gehen dabei verloren."
        )
        if not confirm(prompt):
            return RemovalResult(RemovalOutcome.CANCELLED, names)

        remaining = [n for n in names if n != name]
        await self._save(category, remaining)
        await self._entry_log.delete_all(category, name)
        logger.info("Removed %s '%s' and its entries", category.value, name)

        redirect_to = category.default_path if current == name else None
        return RemovalResult(RemovalOutcome.REMOVED, remaining, redirect_to=redirect_to)

    def _parse(self, category: EntityCategory, raw: str | None) -> list[str] | None:
        """Decode the stored registry; anything unreadable counts as absent."""
        if raw is None:
            return None
        try:
            names = json.loads(raw)
        except ValueError as exc:
            logger.warning("Ignoring malformed %s registry: %s", category.value, exc)
            return None
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            logger.warning("Ignoring %s registry that is not a list of names", category.value)
            return None
        return names

    @staticmethod
    def _repair(category: EntityCategory, names: list[str]) -> list[str]:
        unique = list(dict.fromkeys(names))
        if category.default_name not in unique:
            unique.insert(0, category.default_name)
        return unique

    async def _save(self, category: EntityCategory, names: list[str]) -> None:
        await self._storage.set(category.registry_key, json.dumps(names, ensure_ascii=False))
