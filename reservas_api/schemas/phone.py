from pydantic import BaseModel, Field


class PhoneInput(BaseModel):
    pasaporte_pasajero: str = Field(..., examples=["ABC123"])
    telefono: str = Field(..., examples=["+52 555 123 4567"])


class Phone(PhoneInput):
    id_telefono: int

    class Config:
        from_attributes = True
