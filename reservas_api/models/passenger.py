from sqlalchemy import Column, String, Date, ForeignKey
from reservas_api.database import Base


class Passenger(Base):
    __tablename__ = "pasajeros"

    n_pasaporte = Column(String(20), primary_key=True)
    nombres = Column(String(100), nullable=False)
    apellidos = Column(String(100), nullable=False)
    fecha_nacimiento = Column(Date, nullable=False)
    genero = Column(String(20), nullable=True)
    pais = Column(String(3), ForeignKey("paises.codigo_iso"), nullable=False, index=True)

    def __repr__(self):
        return f"<Passenger(passport='{self.n_pasaporte}', name='{self.nombres} {self.apellidos}')>"
