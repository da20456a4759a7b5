from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from user_service.adapters.repository import UserStore
from user_service.entrypoints.middleware import install_pipeline
from user_service.entrypoints.routers import users
from user_service.entrypoints.schemas.user import ErrorResponse
from user_service.services.config import Settings, settings as default_settings


def _describe_errors(error: RequestValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item.get('loc', ()))}: {item.get('msg', '')}"
        for item in error.errors()
    )


async def request_validation_handler(request: Request, error: RequestValidationError) -> JSONResponse:
    body = ErrorResponse(message="Invalid request.", details=_describe_errors(error))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


class API(FastAPI):
    def __init__(self, store: Optional[UserStore] = None, settings: Optional[Settings] = None) -> None:
        settings = settings or default_settings
        docs_enabled = bool(settings.DEBUG)
        super().__init__(
            title="User Management API",
            docs_url="/docs" if docs_enabled else None,
            redoc_url=None,
            openapi_url="/openapi.json" if docs_enabled else None,
        )
        self.state.settings = settings
        self.state.user_store = store if store is not None else UserStore()

        install_pipeline(self)
        self.add_exception_handler(RequestValidationError, request_validation_handler)
        self.include_router(users.router, prefix=settings.USER_SERVICE_URL_PREFIX, tags=["users"])


app = API()
