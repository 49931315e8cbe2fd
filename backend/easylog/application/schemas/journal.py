"""Pydantic DTOs for registries, entries, suggestions, and journal pages."""

from pydantic import BaseModel, Field

from easylog.application.schemas.auth import UserResponse
from easylog.domain.entities import EntityCategory, RemovalOutcome, RouteState


class EntityCreate(BaseModel):
    """Schema for adding a client or customer. Blank names are rejected by the endpoint."""

    name: str = Field(..., examples=["Acme"])


class EntityListResponse(BaseModel):
    """Registry contents in display order."""

    category: EntityCategory
    names: list[str]


class RemovalResponse(BaseModel):
    """Outcome of a removal request."""

    outcome: RemovalOutcome
    names: list[str]
    message: str | None = None
    redirect_to: str | None = None

    model_config = {"from_attributes": True}


class EntryCreate(BaseModel):
    """Schema for submitting a journal entry."""

    content: str = Field(..., examples=["Called client about the server migration"])


class JournalEntryResponse(BaseModel):
    """A stored journal entry."""

    id: int
    date: str
    author: str
    content: str

    model_config = {"from_attributes": True}


class SuggestionRequest(BaseModel):
    text: str = ""


class SuggestionResponse(BaseModel):
    suggestion: str | None = None


class SidebarItemResponse(BaseModel):
    name: str
    href: str
    active: bool
    deletable: bool

    model_config = {"from_attributes": True}


class JournalPageResponse(BaseModel):
    """Payload of a journal navigation route."""

    category: EntityCategory
    state: RouteState
    user: UserResponse
    entity: str | None
    clients: list[SidebarItemResponse]
    customers: list[SidebarItemResponse]
    entries: list[JournalEntryResponse]
    placeholder: str
    dictation_available: bool

    model_config = {"from_attributes": True}
