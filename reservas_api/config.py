from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):

    postgres_db: str = "reservas"
    postgres_user: str = "reservas_usr"
    postgres_password: str = "eXaMpLe_pWd"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    database_url: Optional[str] = None
    sql_echo: bool = False
    create_tables_on_startup: bool = True

    api_title: str = "Reserva de vuelos API"
    api_version: str = "1.0.0"
    api_description: str = (
        "API para gestión de reservas de vuelos: aerolíneas, aeropuertos, "
        "vuelos, boletos, check-ins y pasajeros"
    )
    api_prefix: str = "/api"
    docs_url: str = "/api-docs"

    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: List[str] = ["*"]

    # Hours added to client-supplied wall-clock times before persisting.
    # Pending product confirmation of the business time zone.
    schedule_utc_offset_hours: int = -6

    log_level: str = "INFO"

    environment: str = "development"

    @property
    def db_url(self) -> str:
        if self.database_url:
            return self.database_url
        return f"postgresql://{self.postgres_user}:{self.postgres_password}@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
