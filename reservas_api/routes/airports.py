from fastapi import APIRouter

from reservas_api.routes.crud import ErrorMessages, register_crud_routes, service_provider
from reservas_api.schemas.airport import Airport, AirportInput
from reservas_api.services.airports import AirportService

router = APIRouter(prefix="/aeropuertos", tags=["Aeropuertos"])

register_crud_routes(
    router,
    provider=service_provider(AirportService),
    schema=Airport,
    input_schema=AirportInput,
    key_type=str,
    key_description="IATA code of the airport",
    messages=ErrorMessages(
        list="Error al obtener los aeropuertos",
        create="Error al crear el aeropuerto",
        get="Error al obtener el aeropuerto",
        update="Error al actualizar el aeropuerto",
        delete="Error al eliminar el aeropuerto",
    ),
)
