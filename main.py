"""
Social connector service — application entry point.
"""

from __future__ import annotations

import logging
import sys

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.settings import config
from connectors.errors import ConnectorError, ConnectorErrorCode
from connectors.registry import ConnectorRegistry
from connectors.routes import router as connectors_router

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("httpcore", "httpx"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

_ERROR_STATUS = {
    ConnectorErrorCode.GENERAL: 500,
    ConnectorErrorCode.NOT_FOUND: 404,
    ConnectorErrorCode.INVALID_CONFIG: 400,
    ConnectorErrorCode.SOCIAL_AUTH_CODE_INVALID: 401,
    ConnectorErrorCode.SOCIAL_ACCESS_TOKEN_INVALID: 401,
}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ConnectorError)
    async def connector_error_handler(request: Request, exc: ConnectorError) -> JSONResponse:
        return JSONResponse(
            status_code=_ERROR_STATUS.get(exc.code, 500),
            content={"code": exc.code.value, "detail": exc.message},
        )

    @app.exception_handler(httpx.HTTPStatusError)
    async def upstream_status_handler(request: Request, exc: httpx.HTTPStatusError) -> JSONResponse:
        logger.warning(
            "Upstream %s %s returned %d",
            exc.request.method,
            exc.request.url,
            exc.response.status_code,
        )
        return JSONResponse(
            status_code=502,
            content={
                "code": "upstream_error",
                "detail": f"Provider returned HTTP {exc.response.status_code}",
            },
        )

    @app.exception_handler(httpx.RequestError)
    async def upstream_request_handler(request: Request, exc: httpx.RequestError) -> JSONResponse:
        logger.warning("Upstream request failed: %r", exc)
        return JSONResponse(
            status_code=504,
            content={"code": "upstream_unreachable", "detail": str(exc) or type(exc).__name__},
        )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Social Connector Service",
        version="1.0.0",
        description="Social sign-in connectors (GitHub OAuth).",
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Routes
    app.include_router(connectors_router, prefix="/api/v1/connectors")

    @app.on_event("startup")
    async def on_startup():
        logger.info("Discovering connectors…")
        ConnectorRegistry().discover()
        logger.info("Application ready to accept requests.")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
