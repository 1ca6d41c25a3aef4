from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from reservas_api.models.delayed_passenger import DelayedPassenger
from reservas_api.models.ticket import Ticket
from reservas_api.services.base import EntityService
from reservas_api.services.temporal import parse_calendar_date

# Assigned to every new ticket until real ticket numbering exists
TICKET_NUMBER_PLACEHOLDER = "U1"


class TicketService(EntityService):
    """Service for ticket operations"""

    model = Ticket
    key_field = "id_boleto"

    def prepare(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data = dict(data)
        data["fecha_compra"] = parse_calendar_date(data.get("fecha_compra"))
        return data

    def create(self, data: Dict[str, Any]) -> Ticket:
        return super().create({**data, "n_boleto": TICKET_NUMBER_PLACEHOLDER})

    def find_by_flight(self, n_vuelo: str) -> List[Ticket]:
        return self.find_by(n_vuelo=n_vuelo)


class DelayedPassengerService(EntityService):
    """Service for passengers registered as late for their flight"""

    model = DelayedPassenger
    key_field = "id_atrasado"

    def list_with_tickets(self) -> List[DelayedPassenger]:
        """All delayed passengers joined with their ticket"""
        query = (
            select(DelayedPassenger)
            .join(DelayedPassenger.boleto)
            .options(selectinload(DelayedPassenger.boleto))
        )
        return list(self.db.scalars(query).all())
