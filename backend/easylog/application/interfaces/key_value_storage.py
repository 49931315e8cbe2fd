"""Abstract storage interface (port) for the journal's key/value state."""

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """Port for string-keyed, string-valued storage — implemented in the infrastructure layer.

    Values are JSON documents or raw strings; interpreting them is up to the caller.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""
        ...

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        ...

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete a key. Removing an absent key is a no-op."""
        ...
