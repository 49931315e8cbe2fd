"""Navigation routes — entry point and journal pages for clients and customers."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse

from easylog.application.schemas import JournalPageResponse
from easylog.application.services import JournalViewService, SessionService
from easylog.config import get_settings
from easylog.domain.entities import EntityCategory, PageRedirect
from easylog.infrastructure.dependencies import get_journal_view_service, get_session_service

router = APIRouter(tags=["Navigation"])


def _redirect(location: str) -> RedirectResponse:
    return RedirectResponse(location, status_code=status.HTTP_307_TEMPORARY_REDIRECT)


async def _render(
    service: JournalViewService, category: EntityCategory, name: str
) -> JournalPageResponse | RedirectResponse:
    page = await service.render(category, name)
    if isinstance(page, PageRedirect):
        return _redirect(page.location)
    return JournalPageResponse.model_validate(page, from_attributes=True)


@router.get("/", response_model=None)
async def index(
    session: SessionService = Depends(get_session_service),
) -> RedirectResponse:
    """Send visitors to the login page, or logged-in staff to the default journal."""
    if not await session.has_token():
        return _redirect(get_settings().login_path)
    return _redirect(EntityCategory.CLIENT.default_path)


# Registered before the client route. Names may contain "/", hence the path converters.
@router.get("/journal/customer/{customer_name:path}", response_model=None)
async def customer_journal(
    customer_name: str,
    service: JournalViewService = Depends(get_journal_view_service),
) -> JournalPageResponse | RedirectResponse:
    """Journal page of one customer."""
    return await _render(service, EntityCategory.CUSTOMER, customer_name)


@router.get("/journal/{client_name:path}", response_model=None)
async def client_journal(
    client_name: str,
    service: JournalViewService = Depends(get_journal_view_service),
) -> JournalPageResponse | RedirectResponse:
    """Journal page of one client."""
    return await _render(service, EntityCategory.CLIENT, client_name)
