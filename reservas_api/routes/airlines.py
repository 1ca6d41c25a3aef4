from fastapi import APIRouter

from reservas_api.routes.crud import ErrorMessages, register_crud_routes, service_provider
from reservas_api.schemas.airline import Airline, AirlineInput
from reservas_api.services.airlines import AirlineService

router = APIRouter(prefix="/aerolineas", tags=["Aerolineas"])

register_crud_routes(
    router,
    provider=service_provider(AirlineService),
    schema=Airline,
    input_schema=AirlineInput,
    key_type=str,
    key_description="IATA code of the airline",
    messages=ErrorMessages(
        list="Error al obtener las aerolíneas",
        create="Error al crear la aerolínea",
        get="Error al obtener la aerolínea",
        update="Error al actualizar la aerolínea",
        delete="Error al eliminar la aerolínea",
    ),
)
