import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from starlette.exceptions import HTTPException as StarletteHTTPException

from teamtasks import models  # noqa: F401  registers the tables on Base.metadata
from teamtasks.api.v1 import api_router
from teamtasks.config import Settings, settings
from teamtasks.database import Base, build_engine, build_session_factory
from teamtasks.logging import configure_logging

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = ("body", "path", "query", "header", "cookie")


def _format_issue(error: Dict[str, Any]) -> Dict[str, str]:
    loc = list(error.get("loc", ()))
    if loc and loc[0] in _LOCATION_PREFIXES:
        loc = loc[1:]
    # a bare offset (malformed JSON) names no field
    if all(isinstance(part, int) for part in loc):
        loc = []
    return {"field": ".".join(str(part) for part in loc), "message": error.get("msg", "Invalid value")}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report the first violation as the message and list all of them."""
    issues = [_format_issue(error) for error in exc.errors()]
    if issues:
        first = issues[0]
        message = f"{first['field']}: {first['message']}" if first["field"] else first["message"]
    else:
        message = "Validation error"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message, "issues": issues},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def create_app(app_settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Build the application around an explicitly constructed database engine."""
    app_settings = app_settings or settings
    engine = engine or build_engine(app_settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Base.metadata.create_all(bind=engine)
        logger.info("Application startup complete")
        yield
        engine.dispose()
        logger.info("Application shutdown complete")

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        debug=app_settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/health")
    def health_check():
        return {"status": "healthy", "service": app_settings.APP_NAME}

    app.include_router(api_router)
    return app


app = create_app()
