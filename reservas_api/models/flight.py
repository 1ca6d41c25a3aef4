from sqlalchemy import Column, Integer, String, Float, Date, DateTime, ForeignKey
from reservas_api.database import Base


class Flight(Base):
    __tablename__ = "vuelos"

    n_vuelo = Column(String(20), primary_key=True)

    codigo_aerolinea = Column(
        String(3), ForeignKey("aerolineas.codigo_iata"), nullable=False, index=True
    )
    id_avion = Column(Integer, ForeignKey("aviones.id_avion"), nullable=False)

    # Airports
    codigo_origen = Column(
        String(3), ForeignKey("aeropuertos.codigo_iata"), nullable=False, index=True
    )
    codigo_destino = Column(
        String(3), ForeignKey("aeropuertos.codigo_iata"), nullable=False, index=True
    )
    distancia = Column(Float, nullable=True)

    # Schedule: times are anchored on 1970-01-01
    fecha = Column(Date, nullable=False, index=True)
    hora_salida = Column(DateTime, nullable=False)
    hora_llegada = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Flight({self.n_vuelo}, {self.codigo_origen}->{self.codigo_destino}, date={self.fecha})>"
