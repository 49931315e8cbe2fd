from .entity_category import EntityCategory
from .journal_entry import JournalEntry, DEFAULT_AUTHOR, format_entry_date
from .user import User, LoginResult
from .route import RouteState, RouteResolution, RemovalOutcome, RemovalResult
from .journal_page import JournalPage, SidebarItem, PageRedirect

__all__ = [
    "EntityCategory",
    "JournalEntry",
    "DEFAULT_AUTHOR",
    "format_entry_date",
    "User",
    "LoginResult",
    "RouteState",
    "RouteResolution",
    "RemovalOutcome",
    "RemovalResult",
    "JournalPage",
    "SidebarItem",
    "PageRedirect",
]
