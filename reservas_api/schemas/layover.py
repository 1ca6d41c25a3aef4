from pydantic import BaseModel, Field
from datetime import date, datetime


class LayoverInput(BaseModel):
    n_vuelo: str = Field(..., examples=["FL-0"])
    codigo_aeropuerto: str = Field(..., examples=["HND"])
    fecha: str = Field(..., description="YYYY-MM-DD", examples=["2023-06-20"])
    hora_llegada: str = Field(..., description="HH:MM:SS", examples=["10:30:00"])
    hora_salida: str = Field(..., description="HH:MM:SS", examples=["11:30:00"])
    orden: int = Field(..., description="Position of the stop in the itinerary", examples=[1])


class Layover(BaseModel):
    """Layover schema for responses"""

    id_escala: int
    n_vuelo: str
    codigo_aeropuerto: str
    fecha: date
    hora_llegada: datetime
    hora_salida: datetime
    orden: int

    class Config:
        from_attributes = True
