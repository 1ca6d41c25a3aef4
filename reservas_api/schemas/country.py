from pydantic import BaseModel, Field


class CountryInput(BaseModel):
    codigo_iso: str = Field(..., examples=["US"])
    nombre: str = Field(..., examples=["United States"])


class Country(CountryInput):
    """Country schema for responses"""

    class Config:
        from_attributes = True
