from .entry_log_service import EntryLogService
from .entity_registry_service import EntityRegistryService
from .session_service import SessionService
from .route_binding import RouteBinding
from .journal_view_service import JournalViewService
from .entry_composer import EntryComposer
from .suggestion_service import suggest

__all__ = [
    "EntryLogService",
    "EntityRegistryService",
    "SessionService",
    "RouteBinding",
    "JournalViewService",
    "EntryComposer",
    "suggest",
]
