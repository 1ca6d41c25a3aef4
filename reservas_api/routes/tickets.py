from fastapi import APIRouter, Depends
from typing import List

from reservas_api.errors import error_message, store_errors
from reservas_api.routes.crud import (
    ERROR_RESPONSES,
    ErrorMessages,
    register_crud_routes,
    scheduled_service_provider,
    service_provider,
)
from reservas_api.schemas.checkin import Checkin, CheckinInput
from reservas_api.schemas.delayed_passenger import (
    DelayedPassenger,
    DelayedPassengerInput,
    DelayedPassengerWithTicket,
)
from reservas_api.schemas.ticket import Ticket, TicketInput
from reservas_api.services.flights import CheckinService
from reservas_api.services.tickets import DelayedPassengerService, TicketService

router = APIRouter(prefix="/boletos", tags=["Boletos"])
checkins_router = APIRouter(prefix="/checkins", tags=["Checkins"])
delayed_router = APIRouter(prefix="/pasajeros_atrasados", tags=["Pasajeros atrasados"])

provide_tickets = service_provider(TicketService)
provide_checkins = scheduled_service_provider(CheckinService)
provide_delayed = service_provider(DelayedPassengerService)


@router.get("/n_vuelo/{n_vuelo}", response_model=List[Ticket], responses=ERROR_RESPONSES)
@error_message("Error al obtener el boleto")
def get_tickets_by_flight(n_vuelo: str, service: TicketService = Depends(provide_tickets)):
    with store_errors("Error al obtener el boleto"):
        return service.find_by_flight(n_vuelo)


register_crud_routes(
    router,
    provider=provide_tickets,
    schema=Ticket,
    input_schema=TicketInput,
    key_type=int,
    key_description="Ticket id",
    messages=ErrorMessages(
        list="Error al obtener los boletos",
        create="Error al crear el boleto",
        get="Error al obtener el boleto",
        update="Error al actualizar el boleto",
        delete="Error al eliminar el boleto",
    ),
)


@checkins_router.get(
    "/n_vuelo/{n_vuelo}", response_model=List[Checkin], responses=ERROR_RESPONSES
)
@error_message("Error al obtener el check-in")
def get_checkins_by_flight(
    n_vuelo: str, service: CheckinService = Depends(provide_checkins)
):
    with store_errors("Error al obtener el check-in"):
        return service.find_by_flight(n_vuelo)


register_crud_routes(
    checkins_router,
    provider=provide_checkins,
    schema=Checkin,
    input_schema=CheckinInput,
    key_type=int,
    key_description="Ticket id the check-in belongs to",
    messages=ErrorMessages(
        list="Error al obtener los check-ins",
        create="Error al crear el check-in",
        get="Error al obtener el check-in",
        update="Error al actualizar el check-in",
        delete="Error al eliminar el check-in",
    ),
)


# Must be registered ahead of /{key}
@delayed_router.get(
    "/boleto", response_model=List[DelayedPassengerWithTicket], responses=ERROR_RESPONSES
)
@error_message("Error al obtener los pasajeros atrasados")
def get_delayed_passengers_with_ticket(
    service: DelayedPassengerService = Depends(provide_delayed),
):
    """Delayed passengers joined with their ticket"""
    with store_errors("Error al obtener los pasajeros atrasados"):
        return service.list_with_tickets()


register_crud_routes(
    delayed_router,
    provider=provide_delayed,
    schema=DelayedPassenger,
    input_schema=DelayedPassengerInput,
    key_type=int,
    key_description="Delayed passenger id",
    messages=ErrorMessages(
        list="Error al obtener los pasajeros atrasados",
        create="Error al registrar el pasajero atrasado",
        get="Error al obtener el pasajero atrasado",
        update="Error al actualizar el pasajero atrasado",
        delete="Error al eliminar el pasajero atrasado",
    ),
)
