"""
Uniform list/create/get/update/delete endpoints shared by every entity router.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Type

from fastapi import APIRouter, Depends, Path, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session

from reservas_api.database import get_db
from reservas_api.errors import error_message, store_errors
from reservas_api.schemas.common import ErrorResponse
from reservas_api.services.base import EntityService

ERROR_RESPONSES = {500: {"model": ErrorResponse, "description": "Store error"}}


@dataclass(frozen=True)
class ErrorMessages:
    """Fixed client-facing message per operation"""

    list: str
    create: str
    get: str
    update: str
    delete: str


def service_provider(service_cls: Type[EntityService]) -> Callable[..., EntityService]:
    """Dependency building `service_cls` over the request's session."""

    def provide(db: Session = Depends(get_db)) -> EntityService:
        return service_cls(db)

    return provide


def scheduled_service_provider(service_cls) -> Callable[..., EntityService]:
    """Like service_provider, passing the configured schedule offset."""

    def provide(request: Request, db: Session = Depends(get_db)) -> EntityService:
        offset_hours = request.app.state.settings.schedule_utc_offset_hours
        return service_cls(db, offset_hours=offset_hours)

    return provide


def register_crud_routes(
    router: APIRouter,
    *,
    provider: Callable[..., EntityService],
    schema: Type[BaseModel],
    input_schema: Type[BaseModel],
    key_type: type,
    key_description: str,
    messages: ErrorMessages,
    include_list: bool = True,
    include_create: bool = True,
) -> APIRouter:
    """
    Add list and create on the router root, plus get, update and delete
    on `/{key}`.

    Routes with fixed sub-paths must be registered on the router before
    calling this, so they are matched ahead of `/{key}`.
    """

    if include_list:

        @router.get("", response_model=List[schema], responses=ERROR_RESPONSES)
        @error_message(messages.list)
        def list_records(service: EntityService = Depends(provider)):
            with store_errors(messages.list):
                return service.list_all()

    if include_create:

        @router.post("", response_model=schema, responses=ERROR_RESPONSES)
        @error_message(messages.create)
        def create_record(
            payload: input_schema, service: EntityService = Depends(provider)
        ):
            with store_errors(messages.create):
                return service.create(payload.model_dump())

    @router.get(
        "/{key}",
        response_model=Optional[schema],
        responses=ERROR_RESPONSES,
        description="Returns null when no record matches the key",
    )
    @error_message(messages.get)
    def get_record(
        key: key_type = Path(..., description=key_description),
        service: EntityService = Depends(provider),
    ):
        with store_errors(messages.get):
            return service.get(key)

    @router.put("/{key}", response_model=schema, responses=ERROR_RESPONSES)
    @error_message(messages.update)
    def update_record(
        payload: input_schema,
        key: key_type = Path(..., description=key_description),
        service: EntityService = Depends(provider),
    ):
        with store_errors(messages.update):
            return service.update(key, payload.model_dump())

    @router.delete("/{key}", response_model=schema, responses=ERROR_RESPONSES)
    @error_message(messages.delete)
    def delete_record(
        key: key_type = Path(..., description=key_description),
        service: EntityService = Depends(provider),
    ):
        with store_errors(messages.delete):
            return service.delete(key)

    return router
