"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request
from pydantic import BaseModel

from public_api.core.config import Configuration, load_configuration, settings
from public_api.core.exceptions import AppException, app_exception_handler
from public_api.core.settings import BaseServerConfig, ServerConfig

logger = structlog.get_logger()


class HealthResponse(BaseModel):
    """Health check payload."""

    status: str


class InfoResponse(BaseModel):
    """Root endpoint payload."""

    app: str
    gitpod_service_url: str


def http_server_config(config: Configuration) -> ServerConfig:
    """HTTP listener settings, using defaults for any missing block."""
    server = config.server or BaseServerConfig()
    return server.http_or_default()


def create_app(config: Configuration) -> FastAPI:
    """Build the FastAPI application for a loaded configuration."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info(
            "Starting application",
            app_name=settings.app_name,
            gitpod_service_url=config.service_url,
        )
        yield
        logger.info("Shutting down application")

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.config = config

    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy")

    @app.get("/", response_model=InfoResponse)
    async def root(request: Request) -> InfoResponse:
        """Root endpoint."""
        current: Configuration = request.app.state.config
        return InfoResponse(
            app=settings.app_name,
            gitpod_service_url=current.service_url,
        )

    return app


def run() -> None:
    """Load the configuration file and serve the HTTP listener."""
    config = load_configuration(settings.config_path)
    http = http_server_config(config)

    options: dict[str, str] = {}
    if http.tls is not None:
        options = {
            "ssl_certfile": http.tls.cert_path,
            "ssl_keyfile": http.tls.key_path,
        }
        if http.tls.ca_path:
            options["ssl_ca_certs"] = http.tls.ca_path

    grpc = (config.server or BaseServerConfig()).grpc_or_default()
    logger.info("Skipping gRPC listener", address=grpc.address)
    logger.info("Serving HTTP", host=http.host, port=http.port, tls=bool(options))
    uvicorn.run(create_app(config), host=http.host, port=http.port, **options)


if __name__ == "__main__":
    run()
