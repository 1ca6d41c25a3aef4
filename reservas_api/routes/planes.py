from fastapi import APIRouter

from reservas_api.routes.crud import ErrorMessages, register_crud_routes, service_provider
from reservas_api.schemas.plane import Plane, PlaneInput
from reservas_api.services.planes import PlaneService

router = APIRouter(prefix="/aviones", tags=["Aviones"])

register_crud_routes(
    router,
    provider=service_provider(PlaneService),
    schema=Plane,
    input_schema=PlaneInput,
    key_type=int,
    key_description="Plane id",
    messages=ErrorMessages(
        list="Error al obtener los aviones",
        create="Error al crear el avión",
        get="Error al obtener el avión",
        update="Error al actualizar el avión",
        delete="Error al eliminar el avión",
    ),
)
