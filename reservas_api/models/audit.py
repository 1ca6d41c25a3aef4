from sqlalchemy import Column, Integer, String, DateTime, Float, Text
from datetime import datetime, timezone
from reservas_api.database import Base


class AuditLog(Base):
    """One row per handled API request."""

    __tablename__ = "auditoria"

    id = Column(Integer, primary_key=True, autoincrement=True)

    method = Column(String(10), nullable=False)
    path = Column(String(500), nullable=False, index=True)
    status_code = Column(Integer, nullable=False, index=True)
    duration_ms = Column(Float, nullable=False)
    client_ip = Column(String(50), nullable=True)

    created_at = Column(
        DateTime, default=lambda: datetime.now(timezone.utc), nullable=False, index=True
    )

    error_detail = Column(Text, nullable=True)

    def __repr__(self):
        return f"<AuditLog({self.method} {self.path} -> {self.status_code}, {self.duration_ms}ms)>"
