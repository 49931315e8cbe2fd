"""Domain entities for route resolution and entity removal outcomes."""

from dataclasses import dataclass, field
from enum import Enum

from .entity_category import EntityCategory


class RouteState(str, Enum):
    """Lifecycle of a journal route.

    IDLE -> LOADING -> REDIRECTING -> LOADING(default) -> READY, or
    IDLE -> LOADING -> READY when the requested entity exists.
    """

    IDLE = "idle"
    LOADING = "loading"
    REDIRECTING = "redirecting"
    READY = "ready"


@dataclass(frozen=True)
class RouteResolution:
    """Snapshot of a route binding after a request has been resolved."""

    category: EntityCategory
    state: RouteState
    requested: str | None = None
    current: str | None = None
    redirect_to: str | None = None

    @property
    def is_ready(self) -> bool:
        return self.state is RouteState.READY


class RemovalOutcome(str, Enum):
    """What happened to a registry removal request."""

    REMOVED = "removed"
    PROTECTED = "protected"
    CANCELLED = "cancelled"
    NOT_FOUND = "not_found"


@dataclass
class RemovalResult:
    """Result of ``EntityRegistryService.remove``.

    ``redirect_to`` is set only when the removed entity was the one being viewed.
    """

    outcome: RemovalOutcome
    names: list[str] = field(default_factory=list)
    message: str | None = None
    redirect_to: str | None = None
