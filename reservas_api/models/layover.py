from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Index
from reservas_api.database import Base


class Layover(Base):
    __tablename__ = "escalas"

    id_escala = Column(Integer, primary_key=True, autoincrement=True)
    n_vuelo = Column(String(20), ForeignKey("vuelos.n_vuelo"), nullable=False)
    codigo_aeropuerto = Column(
        String(3), ForeignKey("aeropuertos.codigo_iata"), nullable=False
    )
    fecha = Column(Date, nullable=False)
    hora_llegada = Column(DateTime, nullable=False)
    hora_salida = Column(DateTime, nullable=False)
    orden = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<Layover(id={self.id_escala}, flight='{self.n_vuelo}', airport='{self.codigo_aeropuerto}', order={self.orden})>"


Index("idx_escala_vuelo_orden", Layover.n_vuelo, Layover.orden)
