"""FastAPI application entry point."""

import time
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mediashare import __version__
from mediashare.api.routes import (
    comments,
    health,
    likes,
    playlists,
    subscriptions,
    tweets,
    users,
    videos,
)
from mediashare.config import settings
from mediashare.errors import MediaShareError
from mediashare.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)

setup_logging()
logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Check the database on startup; a failure is left to /health/ready to report."""
    logger.info("application_starting", version=__version__)

    try:
        from mediashare.db.session import init_db

        init_db()
        logger.info("database_connected")
    except Exception as e:
        logger.error("database_connection_failed", error=str(e))

    yield

    logger.info("application_shutting_down")


app = FastAPI(
    title="MediaShare",
    description="Media-sharing backend: videos, comments, tweets, playlists, likes and subscriptions",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Tag every log event of a request with its id and acting user."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
    clear_request_context()
    bind_request_context(request_id=request_id)
    # Unvalidated here; get_current_subject rejects a malformed value
    if subject := request.headers.get("X-User-Id"):
        bind_request_context(subject=subject[:64])

    started = time.perf_counter()
    response = await call_next(request)
    logger.debug(
        "request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


@app.exception_handler(MediaShareError)
async def mediashare_error_handler(request: Request, exc: MediaShareError) -> JSONResponse:
    """Domain errors that escape a route without being converted."""
    logger.warning("unhandled_domain_error", error=exc.code, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.to_dict()})


app.include_router(health.router)
app.include_router(users.router, prefix="/api/v1")
app.include_router(videos.router, prefix="/api/v1")
app.include_router(comments.router, prefix="/api/v1")
app.include_router(tweets.router, prefix="/api/v1")
app.include_router(playlists.router, prefix="/api/v1")
app.include_router(likes.router, prefix="/api/v1")
app.include_router(subscriptions.router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root() -> dict[str, str]:
    """Service name, version and where the docs live."""
    return {
        "name": "MediaShare",
        "version": __version__,
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mediashare.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
