from fastapi import APIRouter, Body, Depends
from typing import List, Union

from reservas_api.errors import error_message, store_errors
from reservas_api.routes.crud import (
    ERROR_RESPONSES,
    ErrorMessages,
    register_crud_routes,
    scheduled_service_provider,
)
from reservas_api.schemas.common import BatchCreateResponse
from reservas_api.schemas.flight import Flight, FlightInput
from reservas_api.schemas.layover import Layover, LayoverInput
from reservas_api.services.flights import FlightService, LayoverService

router = APIRouter(prefix="/vuelos", tags=["Vuelos"])
layovers_router = APIRouter(prefix="/escalas", tags=["Escalas"])

provide_flights = scheduled_service_provider(FlightService)
provide_layovers = scheduled_service_provider(LayoverService)


@router.post(
    "",
    status_code=201,
    response_model=BatchCreateResponse,
    responses=ERROR_RESPONSES,
    description="Create one flight, or several when the body is an array",
)
@error_message("Error al crear el vuelo")
def create_flights(
    payload: Union[FlightInput, List[FlightInput]] = Body(...),
    service: FlightService = Depends(provide_flights),
):
    """
    Times are anchored on 1970-01-01 and shifted by the configured offset
    (UTC-6 by default) before being stored. `n_vuelo` is generated when
    omitted.
    """
    with store_errors("Error al crear el vuelo"):
        if isinstance(payload, list):
            return service.create_many([row.model_dump() for row in payload])
        service.create(payload.model_dump())
        return {"count": 1}


register_crud_routes(
    router,
    provider=provide_flights,
    schema=Flight,
    input_schema=FlightInput,
    key_type=str,
    key_description="Flight number",
    messages=ErrorMessages(
        list="Error al obtener los vuelos",
        create="Error al crear el vuelo",
        get="Error al obtener el vuelo",
        update="Error al actualizar el vuelo",
        delete="Error al eliminar el vuelo",
    ),
    include_create=False,
)


@layovers_router.get(
    "/vuelo/{n_vuelo}", response_model=List[Layover], responses=ERROR_RESPONSES
)
@error_message("Error al obtener las escalas")
def get_layovers_by_flight(
    n_vuelo: str, service: LayoverService = Depends(provide_layovers)
):
    """All layovers of a flight, possibly none"""
    with store_errors("Error al obtener las escalas"):
        return service.find_by_flight(n_vuelo)


register_crud_routes(
    layovers_router,
    provider=provide_layovers,
    schema=Layover,
    input_schema=LayoverInput,
    key_type=int,
    key_description="Layover id",
    messages=ErrorMessages(
        list="Error al obtener las escalas",
        create="Error al crear la escala",
        get="Error al obtener la escala",
        update="Error al actualizar la escala",
        delete="Error al eliminar la escala",
    ),
)
