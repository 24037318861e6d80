# File: onboard/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from onboard.api.api import api_router
from onboard.core.config import Settings, get_settings
from onboard.core.errors import APIError
from onboard.db.init_db import init_db, seed_initial_data
from onboard.db.session import build_engine, build_session_factory
from onboard.schemas.responses import ErrorDetail, ErrorEnvelope
from onboard.services.llm import CompletionClient, OpenAICompletionClient

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorEnvelope(error=ErrorDetail(message=message)).model_dump(),
    )


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "missing":
        field = str(first["loc"][-1]).replace("_", " ").capitalize()
        return f"{field} is required"
    message = str(first.get("msg") or "Invalid request")
    # Messages from our own field validators arrive as "Value error, <text>".
    return message.removeprefix("Value error, ")


# ---------- EXCEPTION HANDLERS ----------

def api_error_handler(_request: Request, exc: APIError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message)


def validation_error_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(400, _validation_message(exc))


def http_error_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail))


def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s", request.url.path, exc_info=exc)
    return _error_response(500, "Internal server error")


def create_application(
    settings: Optional[Settings] = None,
    completion_client: Optional[CompletionClient] = None,
) -> FastAPI:
    settings = settings or get_settings()
    settings.validate_for_startup()

    engine = build_engine(settings.database_url)
    session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Initializing database at %s", engine.url.render_as_string(hide_password=True))
        init_db(engine)
        with session_factory() as db:
            seed_initial_data(db)
        logger.info("Onboard API ready (%s)", settings.environment)
        yield
        engine.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.completion_client = completion_client or OpenAICompletionClient.from_settings(settings)

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- ERRORS ----------
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)

    # ---------- ROUTERS ----------
    app.include_router(api_router, prefix=settings.api_prefix)

    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_application(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
