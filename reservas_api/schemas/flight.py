from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional


class FlightInput(BaseModel):
    """
    Flight payload. Date and times are sent as plain strings and converted
    server side, see services.temporal.
    """

    n_vuelo: Optional[str] = Field(
        default=None,
        description="Flight number. Generated as FL-<n> when omitted",
        examples=["FL-0"],
    )
    codigo_aerolinea: str = Field(..., examples=["UA"])
    id_avion: int = Field(..., examples=[1])
    codigo_origen: str = Field(..., examples=["LAX"])
    codigo_destino: str = Field(..., examples=["JFK"])
    distancia: Optional[float] = Field(default=None, examples=[3000.50])
    fecha: str = Field(..., description="YYYY-MM-DD", examples=["2023-06-20"])
    hora_salida: str = Field(..., description="HH:MM:SS", examples=["10:30:00"])
    hora_llegada: str = Field(..., description="HH:MM:SS", examples=["11:30:00"])


class Flight(BaseModel):
    """Flight schema for responses"""

    n_vuelo: str
    codigo_aerolinea: str
    id_avion: int
    codigo_origen: str
    codigo_destino: str
    distancia: Optional[float] = None
    fecha: date
    hora_salida: datetime
    hora_llegada: datetime

    class Config:
        from_attributes = True
