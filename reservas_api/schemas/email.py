from pydantic import BaseModel, Field


class EmailInput(BaseModel):
    pasaporte_pasajero: str = Field(..., examples=["ABC123"])
    correo: str = Field(..., examples=["example@example.com"])


class Email(EmailInput):
    id_correo: int

    class Config:
        from_attributes = True
