from pydantic import BaseModel, Field
from typing import Optional


class AirportInput(BaseModel):
    codigo_iata: str = Field(..., examples=["APX"])
    nombre: str = Field(..., examples=["Aeropuerto de prueba"])
    pais: str = Field(..., description="ISO code of the country", examples=["MX"])
    ciudad: str = Field(..., examples=["Ciudad de prueba"])
    latitud: Optional[float] = Field(default=None, examples=[25.12345678])
    longitud: Optional[float] = Field(default=None, examples=[-100.98765432])


class Airport(AirportInput):
    """Airport schema for responses"""

    class Config:
        from_attributes = True
