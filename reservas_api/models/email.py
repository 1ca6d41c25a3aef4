from sqlalchemy import Column, Integer, String, ForeignKey
from reservas_api.database import Base


class Email(Base):
    __tablename__ = "correos"

    id_correo = Column(Integer, primary_key=True, autoincrement=True)
    pasaporte_pasajero = Column(
        String(20), ForeignKey("pasajeros.n_pasaporte"), nullable=False, index=True
    )
    correo = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<Email(id={self.id_correo}, address='{self.correo}')>"
