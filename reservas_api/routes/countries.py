from fastapi import APIRouter

from reservas_api.routes.crud import ErrorMessages, register_crud_routes, service_provider
from reservas_api.schemas.country import Country, CountryInput
from reservas_api.services.airports import CountryService

router = APIRouter(prefix="/paises", tags=["Paises"])

register_crud_routes(
    router,
    provider=service_provider(CountryService),
    schema=Country,
    input_schema=CountryInput,
    key_type=str,
    key_description="ISO code of the country",
    messages=ErrorMessages(
        list="Error al obtener los paises",
        create="Error al crear el pais",
        get="Error al obtener el pais",
        update="Error al actualizar el pais",
        delete="Error al eliminar el pais",
    ),
)
