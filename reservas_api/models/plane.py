from sqlalchemy import Column, Integer, String
from reservas_api.database import Base


class Plane(Base):
    __tablename__ = "aviones"

    id_avion = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(100), nullable=False)
    asientos_economica = Column(Integer, nullable=False)
    asientos_negocios = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<Plane(id={self.id_avion}, name='{self.nombre}')>"
