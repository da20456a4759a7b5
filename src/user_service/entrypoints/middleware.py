"""Request-processing stages wrapped around the users router.

Each stage is an ``async def stage(request, call_next)`` callable. A stage
either answers the request itself or awaits ``call_next(request)`` and
returns (or inspects) the downstream response. ``PIPELINE`` lists the
stages outermost first.
"""
import logging
from typing import Awaitable, Callable, Sequence

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from user_service.entrypoints.schemas.user import ErrorResponse
from user_service.services.auth import validate_token

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]
Stage = Callable[[Request, CallNext], Awaitable[Response]]

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


async def error_translator(request: Request, call_next: CallNext) -> Response:
    try:
        return await call_next(request)
    except Exception as error:
        logger.exception(f"unhandled error on {request.method} {request.url.path}")
        body = ErrorResponse(message=UNEXPECTED_ERROR_MESSAGE, details=str(error))
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body.model_dump())


async def token_gate(request: Request, call_next: CallNext) -> Response:
    settings = request.app.state.settings
    token = request.headers.get(settings.USER_SERVICE_AUTH_HEADER)
    if not validate_token(token, settings.USER_SERVICE_AUTH_TOKEN):
        return PlainTextResponse("Unauthorized", status_code=status.HTTP_401_UNAUTHORIZED)
    return await call_next(request)


async def access_logger(request: Request, call_next: CallNext) -> Response:
    logger.info(f"Request: {request.method} {request.url.path}")
    response = await call_next(request)
    logger.info(f"Response: {response.status_code}")
    return response


PIPELINE: Sequence[Stage] = (error_translator, token_gate, access_logger)


def install_pipeline(app: FastAPI, stages: Sequence[Stage] = PIPELINE) -> None:
    # Starlette runs the most recently added middleware first
    for stage in reversed(stages):
        app.add_middleware(BaseHTTPMiddleware, dispatch=stage)
