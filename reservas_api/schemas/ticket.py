from pydantic import BaseModel, Field
from datetime import date
from typing import Optional


class TicketInput(BaseModel):
    pasaporte_pasajero: str = Field(..., examples=["ABC123"])
    n_vuelo: str = Field(..., examples=["FL-1"])
    fecha_compra: str = Field(..., description="YYYY-MM-DD", examples=["2023-06-20"])
    clase: str = Field(..., examples=["Económica"])
    precio: float = Field(..., examples=[100.5])


class Ticket(BaseModel):
    """Ticket schema for responses"""

    id_boleto: int
    pasaporte_pasajero: str
    n_vuelo: str
    fecha_compra: date
    clase: str
    precio: float
    n_boleto: Optional[str] = None

    class Config:
        from_attributes = True
