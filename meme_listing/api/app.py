"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..core.config import APIConfig, get_config
from ..core.exceptions import DataSourceError, ValidationError
from ..service import TokenListingService
from .routes import router

logger = logging.getLogger(__name__)

# httpx logs full request URLs, and the listing URL carries the API key
logging.getLogger("httpx").setLevel(logging.WARNING)


def create_app(
    config: Optional[APIConfig] = None,
    service: Optional[TokenListingService] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Explicit configuration; loaded from the environment if omitted
        service: Prebuilt service, e.g. one wired to a fake transport

    Returns:
        FastAPI: Configured Meme Listing API application.

    Raises:
        ConfigurationError: If no service is given and the API key is missing
    """
    if config is None:
        config = get_config() if service is None else APIConfig()
    if service is None:
        config.require_coingecko_key()
        service = TokenListingService.from_config(config)

    app = FastAPI(title="Meme Listing API", version=__version__)
    app.state.service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DataSourceError)
    async def on_data_source_error(request: Request, exc: DataSourceError) -> JSONResponse:
        logger.warning(f"{request.url.path} failed: {exc.message}")
        return JSONResponse(
            status_code=502,
            content={"error": exc.message, **exc.details},
        )

    @app.exception_handler(ValidationError)
    async def on_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={"error": exc.message, **exc.details},
        )

    app.include_router(router)
    logger.info("Meme Listing API ready")
    return app
