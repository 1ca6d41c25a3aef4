from sqlalchemy import Column, String
from reservas_api.database import Base


class Country(Base):
    __tablename__ = "paises"

    codigo_iso = Column(String(3), primary_key=True)
    nombre = Column(String(100), nullable=False)

    def __repr__(self):
        return f"<Country(iso='{self.codigo_iso}', name='{self.nombre}')>"
