"""FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager

import uvicorn
from ddtrace import patch
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from lecture_notes.config import AppConfig, load_config
from lecture_notes.dependencies import configure_services
from lecture_notes.exceptions import AccessDeniedError, ConfigurationError
from lecture_notes.logging import setup_logging
from lecture_notes.response_models import AccessResponse
from lecture_notes.routes import summarize_router, transcribe_router

logger = setup_logging()


@asynccontextmanager
async def _lifespan(app: FastAPI):
    yield
    app.state.groq_client.close()
    logger.info("HTTP clients closed")


async def _access_denied_handler(request: Request, exc: AccessDeniedError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=AccessResponse(access=exc.access).model_dump(),
    )


def create_app(config: AppConfig) -> FastAPI:
    """Creates the application with provider clients built from ``config``."""
    app = FastAPI(title="Lecture Notes API", lifespan=_lifespan)
    configure_services(app, config)

    app.add_exception_handler(AccessDeniedError, _access_denied_handler)

    app.include_router(transcribe_router)
    app.include_router(summarize_router)
    return app


def main():
    """Loads configuration and serves the API, exiting if a key is missing."""
    try:
        config = load_config()
    except ConfigurationError as e:
        logger.error(str(e), extra={"variable": e.variable})
        sys.exit(1)

    patch(fastapi=True, httpx=True, logging=True)

    logger.info(
        "Starting server",
        extra={"host": config.server.host, "port": config.server.port},
    )
    uvicorn.run(
        create_app(config),
        host=config.server.host,
        port=config.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
