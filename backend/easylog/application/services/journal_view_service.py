"""Application service composing a journal page for one client or customer."""

import logging

from easylog.application.services.entity_registry_service import EntityRegistryService
from easylog.application.services.entry_log_service import EntryLogService
from easylog.application.services.route_binding import RouteBinding
from easylog.application.services.session_service import SessionService
from easylog.domain.entities import (
    EntityCategory,
    JournalPage,
    PageRedirect,
    RouteState,
    SidebarItem,
)
from easylog.domain.exceptions import CorruptStateError, NotAuthenticatedError

logger = logging.getLogger(__name__)


class JournalViewService:
    """Builds the journal page: session gate, route binding, both sidebars, entries."""

    def __init__(
        self,
        session: SessionService,
        registry: EntityRegistryService,
        entry_log: EntryLogService,
        *,
        login_path: str,
        dictation_available: bool = False,
    ):
        self._session = session
        self._registry = registry
        self._entry_log = entry_log
        self._login_path = login_path
        self._dictation_available = dictation_available

    async def render(
        self, category: EntityCategory, requested: str | None
    ) -> JournalPage | PageRedirect:
        """Render the page for ``requested`` or say where to navigate instead."""
        try:
            user = await self._session.require_user()
        except CorruptStateError as e:
            logger.warning("Session reset: %s", e)
            return PageRedirect(self._login_path, reason="corrupt_session")
        except NotAuthenticatedError:
            return PageRedirect(self._login_path, reason="unauthenticated")

        binding = RouteBinding(self._registry, category)
        resolution = await binding.bind(requested)
        if resolution.state is RouteState.REDIRECTING:
            return PageRedirect(resolution.redirect_to, reason="unknown_entity")

        current = resolution.current
        clients = await self._registry.list_names(EntityCategory.CLIENT)
        customers = await self._registry.list_names(EntityCategory.CUSTOMER)
        entries = await self._entry_log.load(category, current) if resolution.is_ready else []

        return JournalPage(
            category=category,
            state=resolution.state,
            user=user,
            entity=current,
            clients=self._sidebar(EntityCategory.CLIENT, clients, category, current),
            customers=self._sidebar(EntityCategory.CUSTOMER, customers, category, current),
            entries=entries,
            placeholder=(
                f"Aktivitäten für {category.label} {current} beschreiben... "
                "(oder Spracheingabe nutzen)"
                if current else ""
            ),
            dictation_available=self._dictation_available,
        )

    @staticmethod
    def _sidebar(
        section: EntityCategory,
        names: list[str],
        active_category: EntityCategory,
        current: str | None,
    ) -> list[SidebarItem]:
        return [
            SidebarItem(
                name=name,
                href=section.journal_path(name),
                active=section is active_category and name == current,
                deletable=name != section.default_name,
            )
            for name in names
        ]
