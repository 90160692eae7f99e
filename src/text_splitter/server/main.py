"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from text_splitter import __version__

from ..errors import TextSplitterError
from .config import ServerRuntimeConfig
from .deps import server_state
from .middleware import add_middlewares
from .routers import health, transform
from .schemas import ErrorResponse

logger = logging.getLogger(__name__)


async def _text_splitter_error(request: Request, exc: TextSplitterError) -> JSONResponse:
    logger.info("Rejected transform request: %s", exc)
    body = ErrorResponse(error=type(exc).__name__, detail=str(exc))
    return JSONResponse(status_code=422, content=body.model_dump())


def create_app(*, config: ServerRuntimeConfig | None = None) -> FastAPI:
    cfg = config or ServerRuntimeConfig()
    server_state.config = cfg

    app = FastAPI(title="text-splitter", version=__version__)

    add_middlewares(app)
    app.add_exception_handler(TextSplitterError, _text_splitter_error)

    app.include_router(health.router)
    app.include_router(transform.router)

    return app


app = create_app()
