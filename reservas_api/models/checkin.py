from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey
from reservas_api.database import Base


class Checkin(Base):
    __tablename__ = "checkin"

    # One check-in per ticket
    id_boleto = Column(Integer, ForeignKey("boleto.id_boleto"), primary_key=True)
    pasaporte_pasajero = Column(
        String(20), ForeignKey("pasajeros.n_pasaporte"), nullable=False
    )
    n_vuelo = Column(String(20), ForeignKey("vuelos.n_vuelo"), nullable=False, index=True)
    fecha = Column(Date, nullable=False)
    hora = Column(DateTime, nullable=False)
    estado = Column(String(30), nullable=False)

    def __repr__(self):
        return f"<Checkin(ticket={self.id_boleto}, flight='{self.n_vuelo}', status='{self.estado}')>"
