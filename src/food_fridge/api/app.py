"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from food_fridge.api.auth import router as auth_router
from food_fridge.api.foods import router as foods_router
from food_fridge.app_logging import configure_logging
from food_fridge.config import Settings
from food_fridge.containers import ContainerFactory, build_container


def create_app(
    settings: Settings, container_factory: ContainerFactory = build_container
) -> FastAPI:
    """Create a FastAPI app whose container is built during startup."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            app.state.container = await container_factory(settings)
            logger.info("Storage initialized")
        except Exception:
            logger.exception("Storage initialization failed, serving not-ready")
        yield
        if app.state.container is not None:
            await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings
    app.state.container = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Render HTTP errors as {"error": ...} unless a body was given."""
        if isinstance(exc.detail, dict):
            content = exc.detail
        else:
            content = {"error": exc.detail}
        return JSONResponse(
            content,
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Reject malformed bodies without echoing validation internals."""
        logger.info("Rejected request body: path=%s", request.url.path)
        return JSONResponse(
            {"error": "Invalid request body"},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    app.include_router(auth_router)
    app.include_router(foods_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root(request: Request) -> str:
        """Plain-text liveness message."""
        if request.app.state.container is None:
            return "Server is running, storage not initialized"
        return "Server is running with Supabase connected"

    @app.get("/health")
    async def health(request: Request) -> JSONResponse:
        """Report whether the container finished initializing."""
        if request.app.state.container is None:
            return JSONResponse({"status": "starting"}, status_code=503)
        return JSONResponse({"status": "ok"})

    return app
