# Main application entry point
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api import auth_router, health_router, notes_router
from .config import Settings, get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .database import Database

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


def warn_if_default_secret(settings: Settings) -> bool:
    """Log a warning when tokens would be signed with the built-in secret."""
    if settings.uses_default_secret_key and not settings.debug:
        logger.warning(
            "SECRET_KEY is not set, tokens are signed with the public default key",
            extra={"environment": settings.environment},
        )
        return True
    return False


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logger.info(
        "Starting Notekeeper application",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )

    warn_if_default_secret(settings)

    db = Database.from_settings(settings)
    app.state.db = db

    if settings.create_tables_on_startup:
        try:
            await db.create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            await db.dispose()
            raise
    else:
        logger.info("Skipping DB table creation (create_tables_on_startup=False)")

    yield

    logger.info("Shutting down Notekeeper application")
    await db.dispose()


def _field_name(loc) -> str:
    # drop the "body"/"path"/"query" prefix
    parts = [str(p) for p in loc[1:]] or [str(p) for p in loc]
    return ".".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"msg": ...}``.

    Internal details are logged here and never sent to the client.
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"msg": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        errors = [
            {"field": _field_name(err.get("loc", ())), "message": err.get("msg", "")}
            for err in exc.errors()
        ]
        logger.debug("Request validation failed", extra={"path": request.url.path, "errors": errors})
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"msg": "Please fill all the input fields", "errors": errors},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.error(
            "Unhandled error",
            exc_info=exc,
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"msg": "Something went wrong"},
        )


app = FastAPI(
    title="Notekeeper",
    description="Notes with user accounts and bearer-token auth",
    version=__version__,
    lifespan=lifespan,
    docs_url="/apidocs",
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(auth_router)
app.include_router(notes_router)
app.include_router(health_router)


# Root endpoint
@app.get("/")
async def root():
    return {"msg": "Welcome to homePage"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("notekeeper.main:app", host=settings.host, port=settings.port, reload=settings.reload)
