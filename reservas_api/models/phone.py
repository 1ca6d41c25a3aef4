from sqlalchemy import Column, Integer, String, ForeignKey
from reservas_api.database import Base


class Phone(Base):
    __tablename__ = "telefonos"

    id_telefono = Column(Integer, primary_key=True, autoincrement=True)
    pasaporte_pasajero = Column(
        String(20), ForeignKey("pasajeros.n_pasaporte"), nullable=False, index=True
    )
    telefono = Column(String(30), nullable=False)

    def __repr__(self):
        return f"<Phone(id={self.id_telefono}, number='{self.telefono}')>"
