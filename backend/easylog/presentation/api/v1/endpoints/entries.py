"""Journal entry endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from easylog.application.schemas import EntryCreate, JournalEntryResponse
from easylog.application.services import EntityRegistryService, EntryLogService
from easylog.domain.entities import EntityCategory, User
from easylog.domain.exceptions import EntityNotFoundError
from easylog.infrastructure.dependencies import (
    get_current_user,
    get_entity_registry_service,
    get_entry_log_service,
)

router = APIRouter(prefix="/entries", tags=["Entries"])


async def _ensure_registered(
    registry: EntityRegistryService, category: EntityCategory, name: str
) -> None:
    if not await registry.contains(category, name):
        raise EntityNotFoundError(category.label, name)


@router.get("/{category}/{name:path}", response_model=list[JournalEntryResponse])
async def list_entries(
    category: EntityCategory,
    name: str,
    _: User = Depends(get_current_user),
    registry: EntityRegistryService = Depends(get_entity_registry_service),
    service: EntryLogService = Depends(get_entry_log_service),
) -> list[JournalEntryResponse]:
    """Return an entity's entries, newest first."""
    try:
        await _ensure_registered(registry, category, name)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    entries = await service.load(category, name)
    return [JournalEntryResponse.model_validate(e, from_attributes=True) for e in entries]


@router.post(
    "/{category}/{name:path}",
    response_model=JournalEntryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_entry(
    category: EntityCategory,
    name: str,
    data: EntryCreate,
    user: User = Depends(get_current_user),
    registry: EntityRegistryService = Depends(get_entity_registry_service),
    service: EntryLogService = Depends(get_entry_log_service),
) -> JournalEntryResponse:
    """Add an entry authored by the acting user."""
    try:
        await _ensure_registered(registry, category, name)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    entry = await service.append(category, name, data.content, author=user.name)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Eintrag darf nicht leer sein.",
        )
    return JournalEntryResponse.model_validate(entry, from_attributes=True)
