"""Client and customer registry endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from easylog.application.schemas import EntityCreate, EntityListResponse, RemovalResponse
from easylog.application.services import EntityRegistryService
from easylog.domain.entities import EntityCategory, User
from easylog.infrastructure.dependencies import get_current_user, get_entity_registry_service

router = APIRouter(prefix="/entities", tags=["Entities"])

_EMPTY_NAME_MESSAGES = {
    EntityCategory.CLIENT: "Klientenname darf nicht leer sein.",
    EntityCategory.CUSTOMER: "Kundenname darf nicht leer sein.",
}


@router.get("/{category}", response_model=EntityListResponse)
async def list_entities(
    category: EntityCategory,
    _: User = Depends(get_current_user),
    service: EntityRegistryService = Depends(get_entity_registry_service),
) -> EntityListResponse:
    """Return the category's entity names in display order."""
    names = await service.list_names(category)
    return EntityListResponse(category=category, names=names)


@router.post("/{category}", response_model=EntityListResponse)
async def add_entity(
    category: EntityCategory,
    data: EntityCreate,
    _: User = Depends(get_current_user),
    service: EntityRegistryService = Depends(get_entity_registry_service),
) -> EntityListResponse:
    """Add an entity; adding an existing name leaves the registry unchanged."""
    name = data.name.strip()
    if not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_EMPTY_NAME_MESSAGES[category],
        )
    names = await service.add(category, name)
    return EntityListResponse(category=category, names=names)


@router.delete("/{category}/{name:path}", response_model=RemovalResponse)
async def remove_entity(
    category: EntityCategory,
    name: str,
    confirmed: bool = Query(False, description="User confirmed the removal prompt"),
    current: str | None = Query(None, description="Entity currently being viewed"),
    _: User = Depends(get_current_user),
    service: EntityRegistryService = Depends(get_entity_registry_service),
) -> RemovalResponse:
    """Remove an entity and all of its entries.

    The default entity is never removed; an unconfirmed request is cancelled.
    """
    result = await service.remove(category, name, lambda _prompt: confirmed, current=current)
    return RemovalResponse.model_validate(result, from_attributes=True)
