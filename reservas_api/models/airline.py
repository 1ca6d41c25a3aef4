from sqlalchemy import Column, String
from reservas_api.database import Base


class Airline(Base):
    __tablename__ = "aerolineas"

    codigo_iata = Column(String(3), primary_key=True)
    nombre = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<Airline(iata='{self.codigo_iata}', name='{self.nombre}')>"
