"""Mock login and session endpoints."""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as SchemaValidationError

from easylog.application.schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    UserResponse,
)
from easylog.application.services import SessionService
from easylog.domain.entities import User
from easylog.domain.exceptions import ValidationError
from easylog.infrastructure.dependencies import get_current_user, get_session_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])

# The login endpoint answers any origin, mirroring a permissive mock backend.
LOGIN_CORS_HEADERS = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
        "Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}

_LOGIN_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def _read_credentials(request: Request) -> LoginRequest:
    """Parse the JSON body; anything unusable counts as missing credentials."""
    try:
        payload = await request.json()
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}
    try:
        return LoginRequest.model_validate(payload)
    except SchemaValidationError:
        return LoginRequest()


def _message(status_code: int, message: str, error: str | None = None) -> JSONResponse:
    body = MessageResponse(message=message, error=error).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body, headers=LOGIN_CORS_HEADERS)


@router.api_route(
    "/login",
    methods=_LOGIN_METHODS,
    response_model=None,
    responses={
        200: {"model": LoginResponse},
        400: {"model": MessageResponse},
        405: {"model": MessageResponse},
        500: {"model": MessageResponse},
    },
)
async def login(
    request: Request,
    service: SessionService = Depends(get_session_service),
) -> Response:
    """Mock login — accepts any non-empty email and password."""
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK, headers=LOGIN_CORS_HEADERS)

    if request.method != "POST":
        return _message(status.HTTP_405_METHOD_NOT_ALLOWED, "Methode nicht erlaubt")

    try:
        credentials = await _read_credentials(request)
        result = await service.login(credentials.email, credentials.password)
    except ValidationError as e:
        return _message(status.HTTP_400_BAD_REQUEST, e.message)
    except Exception as e:
        logger.exception("Mock login failed")
        return _message(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Serverfehler bei der Mock-Anmeldung",
            error=str(e),
        )

    body = LoginResponse(
        message="Anmeldung erfolgreich (Mock)",
        token=result.token,
        user=UserResponse.model_validate(result.user, from_attributes=True),
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=body.model_dump(),
        headers=LOGIN_CORS_HEADERS,
    )


@router.get("/session", response_model=UserResponse)
async def get_session(user: User = Depends(get_current_user)) -> UserResponse:
    """Return the acting user, or 401 when nobody is logged in."""
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(service: SessionService = Depends(get_session_service)) -> None:
    """Clear the stored session. Always succeeds."""
    await service.logout()
