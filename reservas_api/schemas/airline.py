from pydantic import BaseModel, Field


class AirlineInput(BaseModel):
    codigo_iata: str = Field(..., examples=["AP"])
    nombre: str = Field(..., examples=["Aerolínea de prueba"])


class Airline(AirlineInput):
    """Airline schema for responses"""

    class Config:
        from_attributes = True
