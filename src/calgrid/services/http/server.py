from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ...bootstrap import configure_logging
from ...data import DocumentStoreError
from ..auth import AuthNotConfiguredError, InvalidCredentialsError, UsernameTakenError
from ..context import ServiceContext
from ..events import EventConflictError, EventNotFoundError
from .dependencies import ApiError, BackendState, get_backend, require_identity
from .models import Credentials, EventBody, EventsResponse, HealthResponse, MessageResponse, TokenResponse

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

router = APIRouter(prefix="/api/v1")


def _store_failure(exc: Exception) -> ApiError:
    logger.exception("Document store failure")
    return ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, f"some error occurred: {exc}")


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=API_VERSION)


# ---------------------------------------------------------------------- auth


@router.post("/signup", response_model=MessageResponse)
def signup(credentials: Credentials, backend: BackendState = Depends(get_backend)) -> MessageResponse:
    try:
        backend.auth.sign_up(credentials.username, credentials.password)
    except UsernameTakenError as exc:
        raise ApiError(status.HTTP_409_CONFLICT, str(exc)) from exc
    except DocumentStoreError as exc:
        raise _store_failure(exc) from exc
    return MessageResponse(message="user signed up successfully")


@router.post("/signin", response_model=TokenResponse)
def signin(credentials: Credentials, backend: BackendState = Depends(get_backend)) -> TokenResponse:
    try:
        token = backend.auth.sign_in(credentials.username, credentials.password)
    except InvalidCredentialsError as exc:
        raise ApiError(status.HTTP_401_UNAUTHORIZED, str(exc)) from exc
    except AuthNotConfiguredError as exc:
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc)) from exc
    except DocumentStoreError as exc:
        raise _store_failure(exc) from exc
    return TokenResponse(message="user signed in successfully", token=token)


# ---------------------------------------------------------------------- events


@router.get("/events", response_model=EventsResponse)
def list_events(
    identity: str = Depends(require_identity),
    backend: BackendState = Depends(get_backend),
) -> EventsResponse:
    try:
        return EventsResponse(events=backend.events.list_events(identity))
    except DocumentStoreError as exc:
        raise _store_failure(exc) from exc


@router.post("/event", response_model=MessageResponse)
def add_event(
    body: EventBody,
    identity: str = Depends(require_identity),
    backend: BackendState = Depends(get_backend),
) -> MessageResponse:
    try:
        backend.events.add_event(identity, body.fields())
    except EventConflictError as exc:
        raise ApiError(status.HTTP_409_CONFLICT, f"event {exc} already exists") from exc
    except DocumentStoreError as exc:
        raise _store_failure(exc) from exc
    return MessageResponse(message="Event added successfully")


@router.put("/event/{event_id}", response_model=MessageResponse)
def update_event(
    event_id: str,
    body: EventBody,
    _identity: str = Depends(require_identity),
    backend: BackendState = Depends(get_backend),
) -> MessageResponse:
    fields = body.fields()
    fields.pop("id", None)
    try:
        backend.events.update_event(event_id, fields)
    except EventNotFoundError as exc:
        raise ApiError(status.HTTP_404_NOT_FOUND, f"event {event_id} not found") from exc
    except DocumentStoreError as exc:
        raise _store_failure(exc) from exc
    return MessageResponse(message="Event updated successfully")


@router.delete("/event/{event_id}", response_model=MessageResponse)
def delete_event(
    event_id: str,
    _identity: str = Depends(require_identity),
    backend: BackendState = Depends(get_backend),
) -> MessageResponse:
    try:
        backend.events.delete_event(event_id)
    except EventNotFoundError as exc:
        raise ApiError(status.HTTP_404_NOT_FOUND, f"event {event_id} not found") from exc
    except DocumentStoreError as exc:
        raise _store_failure(exc) from exc
    return MessageResponse(message="Event deleted successfully")


# ---------------------------------------------------------------------- app


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s rejected (%s): %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "some error occurred"})


def create_app(context: Optional[ServiceContext] = None) -> FastAPI:
    app = FastAPI(title="Calgrid API", version=API_VERSION)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.backend = BackendState(context or ServiceContext())
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(Exception, _unexpected_error_handler)
    app.include_router(router)
    return app


def run_local_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    import asyncio

    from hypercorn.asyncio import serve
    from hypercorn.config import Config

    configure_logging()
    app = create_app()
    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Serving calendar API on %s:%s", host, port)
    asyncio.run(serve(app, config))
