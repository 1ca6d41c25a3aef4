from pydantic import BaseModel, Field
from datetime import date
from typing import Optional


class PassengerInput(BaseModel):
    n_pasaporte: str = Field(..., examples=["ABC123"])
    nombres: str = Field(..., examples=["John"])
    apellidos: str = Field(..., examples=["Doe"])
    fecha_nacimiento: date = Field(..., examples=["1990-01-01"])
    genero: Optional[str] = Field(default=None, examples=["M"])
    pais: str = Field(..., description="ISO code of the country", examples=["US"])


class Passenger(PassengerInput):
    """Passenger schema for responses"""

    class Config:
        from_attributes = True
