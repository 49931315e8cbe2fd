"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from easylog.presentation.api.v1.endpoints.health import router as health_router
from easylog.presentation.api.v1.endpoints.auth import router as auth_router
from easylog.presentation.api.v1.endpoints.entities import router as entities_router
from easylog.presentation.api.v1.endpoints.entries import router as entries_router
from easylog.presentation.api.v1.endpoints.suggestions import router as suggestions_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(entities_router)
router.include_router(entries_router)
router.include_router(suggestions_router)
