import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable, Optional

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .. import __version__
from ..schema import HealthStatus
from ..search.config import SearchServiceConfig
from ..search.exceptions import BackendError, SerializationError
from ..search.search_service import SearchService
from ..utils.logging import get_logger, setup_logger
from .routers.search import router as search_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    owned: Optional[SearchService] = None

    # Startup
    if app.state.search_service is None:
        config = SearchServiceConfig.from_environment()
        setup_logger("corpus_search", level=config.log_level, json_logs=config.json_logs)
        owned = SearchService(config)
        try:
            await owned.start()
        except Exception:
            await owned.close()
            raise
        app.state.search_service = owned
        logger.info("search_service_initialized", endpoint=config.opensearch_config.endpoint)

    yield

    # Shutdown
    if owned is not None:
        await owned.close()
        app.state.search_service = None
        logger.info("search_service_shutdown_completed")


async def request_validation_handler(_: Request, exc: RequestValidationError) -> PlainTextResponse:
    return PlainTextResponse(str(exc), status_code=400)


async def backend_error_handler(request: Request, exc: BackendError) -> PlainTextResponse:
    logger.error("backend_error", path=request.url.path, error=str(exc))
    return PlainTextResponse(str(exc), status_code=500)


async def serialization_error_handler(request: Request, exc: SerializationError) -> PlainTextResponse:
    logger.error("serialization_error", path=request.url.path, error=str(exc))
    return PlainTextResponse(str(exc), status_code=500)


def create_app(service: Optional[SearchService] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        service: Search service to use; when omitted, one is built from the
            environment at startup and closed at shutdown.
    """
    app = FastAPI(title="corpus-search", version=__version__, lifespan=lifespan)
    app.state.search_service = service

    app.include_router(search_router)

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(BackendError, backend_error_handler)
    app.add_exception_handler(SerializationError, serialization_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response

    @app.get("/health")
    async def health_check(request: Request) -> HealthStatus:
        current: Optional[SearchService] = request.app.state.search_service
        if current is None:
            return HealthStatus(status="down", version=__version__, opensearch="down")

        opensearch_healthy = await current.health_check()
        return HealthStatus(
            status="ok" if opensearch_healthy else "degraded",
            version=__version__,
            opensearch="ok" if opensearch_healthy else "down",
        )

    return app
