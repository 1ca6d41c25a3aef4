from sqlalchemy import Column, Integer, String, Text, Date, Time, ForeignKey
from sqlalchemy.orm import relationship
from reservas_api.database import Base


class DelayedPassenger(Base):
    __tablename__ = "pasajeros_atrasados"

    id_atrasado = Column(Integer, primary_key=True, autoincrement=True)
    pasaporte_pasajero = Column(
        String(20), ForeignKey("pasajeros.n_pasaporte"), nullable=False, index=True
    )
    id_boleto = Column(Integer, ForeignKey("boleto.id_boleto"), nullable=False, index=True)
    motivo = Column(Text, nullable=True)
    fecha_registro = Column(Date, nullable=False)
    hora_registro = Column(Time, nullable=False)

    boleto = relationship("Ticket", lazy="select")

    def __repr__(self):
        return f"<DelayedPassenger(id={self.id_atrasado}, ticket={self.id_boleto})>"
