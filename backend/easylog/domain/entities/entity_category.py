"""Domain entity for journal categories — clients and customers."""

from enum import Enum
from urllib.parse import quote


class EntityCategory(str, Enum):
    """The two kinds of entity a journal can be kept for.

    Both categories behave identically; they differ only in their default
    entity, storage keys, and navigation paths, which never overlap.
    """

    CLIENT = "client"
    CUSTOMER = "customer"

    @property
    def default_name(self) -> str:
        """The protected fallback entity that can never be removed."""
        return "Default" if self is EntityCategory.CLIENT else "DefaultCustomer"

    @property
    def label(self) -> str:
        return "Klient" if self is EntityCategory.CLIENT else "Kunde"

    @property
    def registry_key(self) -> str:
        """Storage key holding the JSON array of entity names."""
        return "journalClients" if self is EntityCategory.CLIENT else "journalCustomers"

    def entry_log_key(self, entity_name: str) -> str:
        """Storage key holding the JSON array of entries for one entity."""
        if self is EntityCategory.CLIENT:
            return f"journalEntries_{entity_name}"
        return f"journalEntries_customer_{entity_name}"

    def journal_path(self, entity_name: str) -> str:
        """Navigation path of an entity's journal page."""
        quoted = quote(entity_name, safe="")
        if self is EntityCategory.CLIENT:
            return f"/journal/{quoted}"
        return f"/journal/customer/{quoted}"

    @property
    def default_path(self) -> str:
        return self.journal_path(self.default_name)
