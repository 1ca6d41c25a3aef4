from sqlalchemy import Column, Integer, String, Float, Date, ForeignKey
from reservas_api.database import Base


class Ticket(Base):
    __tablename__ = "boleto"

    id_boleto = Column(Integer, primary_key=True, autoincrement=True)
    pasaporte_pasajero = Column(
        String(20), ForeignKey("pasajeros.n_pasaporte"), nullable=False, index=True
    )
    n_vuelo = Column(String(20), ForeignKey("vuelos.n_vuelo"), nullable=False, index=True)
    fecha_compra = Column(Date, nullable=False)
    clase = Column(String(30), nullable=False)
    precio = Column(Float, nullable=False)
    n_boleto = Column(String(10), nullable=True)

    def __repr__(self):
        return f"<Ticket(id={self.id_boleto}, flight='{self.n_vuelo}', passport='{self.pasaporte_pasajero}')>"
