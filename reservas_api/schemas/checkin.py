from pydantic import BaseModel, Field
from datetime import date, datetime


class CheckinInput(BaseModel):
    id_boleto: int = Field(..., examples=[1])
    pasaporte_pasajero: str = Field(..., examples=["ABC123"])
    n_vuelo: str = Field(..., examples=["FL-1"])
    fecha: str = Field(..., description="YYYY-MM-DD", examples=["2023-06-20"])
    hora: str = Field(..., description="HH:MM:SS", examples=["10:30:00"])
    estado: str = Field(..., examples=["Pendiente"])


class Checkin(BaseModel):
    """Check-in schema for responses"""

    id_boleto: int
    pasaporte_pasajero: str
    n_vuelo: str
    fecha: date
    hora: datetime
    estado: str

    class Config:
        from_attributes = True
