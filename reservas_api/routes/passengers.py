from fastapi import APIRouter

from reservas_api.routes.crud import ErrorMessages, register_crud_routes, service_provider
from reservas_api.schemas.email import Email, EmailInput
from reservas_api.schemas.passenger import Passenger, PassengerInput
from reservas_api.schemas.phone import Phone, PhoneInput
from reservas_api.services.passengers import EmailService, PassengerService, PhoneService

router = APIRouter(prefix="/pasajeros", tags=["Pasajeros"])
emails_router = APIRouter(prefix="/correos", tags=["Correos"])
phones_router = APIRouter(prefix="/telefonos", tags=["Telefonos"])

register_crud_routes(
    router,
    provider=service_provider(PassengerService),
    schema=Passenger,
    input_schema=PassengerInput,
    key_type=str,
    key_description="Passport number",
    messages=ErrorMessages(
        list="Error al obtener los pasajeros",
        create="Error al crear el pasajero",
        get="Error al obtener el pasajero",
        update="Error al actualizar el pasajero",
        delete="Error al eliminar el pasajero",
    ),
)

register_crud_routes(
    emails_router,
    provider=service_provider(EmailService),
    schema=Email,
    input_schema=EmailInput,
    key_type=int,
    key_description="Email id",
    messages=ErrorMessages(
        list="Error al obtener los correos",
        create="Error al crear el correo",
        get="Error al obtener el correo",
        update="Error al actualizar el correo",
        delete="Error al eliminar el correo",
    ),
)

register_crud_routes(
    phones_router,
    provider=service_provider(PhoneService),
    schema=Phone,
    input_schema=PhoneInput,
    key_type=int,
    key_description="Phone id",
    messages=ErrorMessages(
        list="Error al obtener los telefonos",
        create="Error al crear el telefono",
        get="Error al obtener el telefono",
        update="Error al actualizar el telefono",
        delete="Error al eliminar el telefono",
    ),
)
