"""Process-local KeyValueStorage — used by the "memory" backend and by tests."""

from easylog.application.interfaces import KeyValueStorage


class InMemoryKeyValueStorage(KeyValueStorage):
    """Dictionary-backed storage; contents are lost when the process exits."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._items.get(key)

    async def set(self, key: str, value: str) -> None:
        self._items[key] = value

    async def remove(self, key: str) -> None:
        self._items.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        """Copy of the current contents."""
        return dict(self._items)
