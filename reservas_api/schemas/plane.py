from pydantic import BaseModel, Field


class PlaneInput(BaseModel):
    nombre: str = Field(..., examples=["Avión de prueba"])
    asientos_economica: int = Field(..., description="Economy seats", examples=[200])
    asientos_negocios: int = Field(..., description="Business seats", examples=[50])


class Plane(PlaneInput):
    """Plane schema for responses"""

    id_avion: int

    class Config:
        from_attributes = True
