from pydantic import BaseModel, Field
from datetime import date, time
from typing import Optional

from reservas_api.schemas.ticket import Ticket


class DelayedPassengerInput(BaseModel):
    pasaporte_pasajero: str = Field(..., examples=["ABC123"])
    id_boleto: int = Field(..., examples=[1])
    motivo: Optional[str] = Field(default=None, examples=["Llegó tarde a la puerta"])
    fecha_registro: date = Field(..., examples=["2023-06-20"])
    hora_registro: time = Field(..., examples=["10:30:00"])


class DelayedPassenger(DelayedPassengerInput):
    """Delayed passenger schema for responses"""

    id_atrasado: int

    class Config:
        from_attributes = True


class DelayedPassengerWithTicket(DelayedPassenger):
    """Delayed passenger joined with its ticket"""

    boleto: Optional[Ticket] = None
