"""Domain entities describing a rendered journal page."""

from dataclasses import dataclass, field

from .entity_category import EntityCategory
from .journal_entry import JournalEntry
from .route import RouteState
from .user import User


@dataclass(frozen=True)
class SidebarItem:
    """One entity link in a sidebar section."""

    name: str
    href: str
    active: bool
    deletable: bool


@dataclass
class JournalPage:
    """Everything a journal page shows for the current entity.

    Both sidebar sections are always present, whichever category is active.
    """

    category: EntityCategory
    state: RouteState
    user: User
    entity: str | None
    clients: list[SidebarItem] = field(default_factory=list)
    customers: list[SidebarItem] = field(default_factory=list)
    entries: list[JournalEntry] = field(default_factory=list)
    placeholder: str = ""
    dictation_available: bool = False


@dataclass(frozen=True)
class PageRedirect:
    """Navigation the caller must perform instead of rendering."""

    location: str
    reason: str
