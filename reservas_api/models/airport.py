from sqlalchemy import Column, String, Float, ForeignKey
from reservas_api.database import Base


class Airport(Base):
    __tablename__ = "aeropuertos"

    codigo_iata = Column(String(3), primary_key=True)
    nombre = Column(String(255), nullable=False)
    pais = Column(String(3), ForeignKey("paises.codigo_iso"), nullable=False, index=True)
    ciudad = Column(String(100), nullable=False)
    latitud = Column(Float, nullable=True)
    longitud = Column(Float, nullable=True)

    def __repr__(self):
        return f"<Airport(iata='{self.codigo_iata}', name='{self.nombre}')>"
