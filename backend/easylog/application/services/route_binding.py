"""Resolves which entity a journal route refers to."""

import logging

from easylog.application.services.entity_registry_service import EntityRegistryService
from easylog.domain.entities import EntityCategory, RouteResolution, RouteState

logger = logging.getLogger(__name__)


class RouteBinding:
    """Binds a requested entity name to a category's registry.

    Only a READY binding exposes a current entity; an unknown name moves the
    binding to REDIRECTING with the category default as target, and the
    unknown name is never treated as current.
    """

    def __init__(self, registry: EntityRegistryService, category: EntityCategory):
        self._registry = registry
        self._category = category
        self._resolution = RouteResolution(category=category, state=RouteState.IDLE)

    @property
    def resolution(self) -> RouteResolution:
        return self._resolution

    @property
    def state(self) -> RouteState:
        return self._resolution.state

    @property
    def current(self) -> str | None:
        return self._resolution.current

    async def bind(self, requested: str | None) -> RouteResolution:
        """Resolve ``requested``; call again whenever the route changes."""
        if not requested:
            self._resolution = RouteResolution(category=self._category, state=RouteState.IDLE)
            return self._resolution

        self._resolution = RouteResolution(
            category=self._category, state=RouteState.LOADING, requested=requested
        )
        names = await self._registry.list_names(self._category)

        if requested not in names:
            logger.warning(
                "%s '%s' not found, redirecting to '%s'",
                self._category.label, requested, self._category.default_name,
            )
            self._resolution = RouteResolution(
                category=self._category,
                state=RouteState.REDIRECTING,
                requested=requested,
                redirect_to=self._category.default_path,
            )
            return self._resolution

        self._resolution = RouteResolution(
            category=self._category,
            state=RouteState.READY,
            requested=requested,
            current=requested,
        )
        return self._resolution

    async def follow_redirect(self) -> RouteResolution:
        """Complete a pending redirect by binding the category default."""
        if self._resolution.state is not RouteState.REDIRECTING:
            return self._resolution
        return await self.bind(self._category.default_name)
