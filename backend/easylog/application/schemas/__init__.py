from .auth import LoginRequest, LoginResponse, MessageResponse, UserResponse
from .journal import (
    EntityCreate,
    EntityListResponse,
    RemovalResponse,
    EntryCreate,
    JournalEntryResponse,
    SuggestionRequest,
    SuggestionResponse,
    SidebarItemResponse,
    JournalPageResponse,
)

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "UserResponse",
    "EntityCreate",
    "EntityListResponse",
    "RemovalResponse",
    "EntryCreate",
    "JournalEntryResponse",
    "SuggestionRequest",
    "SuggestionResponse",
    "SidebarItemResponse",
    "JournalPageResponse",
]
