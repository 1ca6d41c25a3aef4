import uvicorn

from reservas_api.config import settings


def main():
    uvicorn.run(
        "reservas_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
