import uvicorn

from user_service.services.config import settings


def main() -> None:
    uvicorn.run(
        "user_service.entrypoints.api:app",
        host=settings.USER_SERVICE_HOST,
        port=settings.USER_SERVICE_PORT,
        log_level=settings.USER_SERVICE_LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
