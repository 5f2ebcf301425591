import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import Depends
from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from userservice import __version__
from userservice.domain.exceptions import StorageError
from userservice.infrastructure.adapters.database.session import session_scope
from userservice.infrastructure.config.loggers import configure_loggers
from userservice.infrastructure.config.settings.app import app_settings
from userservice.infrastructure.entrypoints.api.dependencies import get_db
from userservice.infrastructure.entrypoints.api.endpoints.users import router as user_router
from userservice.infrastructure.entrypoints.api.schemas import HealthCheckResponse

logger = logging.getLogger(__name__)


async def check_database() -> None:
    try:
        async with session_scope() as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Cannot connect to database: %s", e)
    else:
        logger.info("Database connected")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    # Only load configuration loggers at bootstrap, not at import (testing conflicts).
    configure_loggers(
        level=app_settings.LOG_LEVEL_API,
        handlers=app_settings.LOG_HANDLERS_API,
        filename=app_settings.LOG_FILE,
    )
    # The service still starts without a database, requests then fail with a 500.
    await check_database()
    yield


app = FastAPI(
    title="User Service API",
    version=__version__,
    lifespan=lifespan,
    debug=app_settings.DEBUG,
)

app.include_router(user_router, prefix="/users", tags=["users"])


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        logger.warning("%s %s", HTTPStatus(exc.status_code).phrase, request.method)
    return await http_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def request_decode_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Unable to decode request on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("%s on %s %s", exc, request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": HTTPStatus.INTERNAL_SERVER_ERROR.phrase},
    )


@app.get("/health", name="health_check", tags=["health"])
async def health_check(db: AsyncSession = Depends(get_db)) -> HealthCheckResponse:
    """Health check endpoint to verify application and database status."""
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        # Driver messages may carry the host and role, keep them in the logs.
        logger.warning("Health check failed: %s", e)
        return HealthCheckResponse(status="unhealthy", database="error")
    else:
        return HealthCheckResponse(status="healthy", database="connected")
