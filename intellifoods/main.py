from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from intellifoods.clients.backend import BackendClient
from intellifoods.core import config
from intellifoods.core.logging import setup_logging
from intellifoods.core.middleware import RequestLoggingMiddleware
from intellifoods.routers import health, ingredients, recipes, session, storage
from intellifoods.services.exceptions import (
    AuthRequired,
    BackendError,
    InputValidationError,
    NonSuccessStatus,
)
from intellifoods.services.kitchen import KitchenRegistry


def _signin_response(detail: str) -> JSONResponse:
    return JSONResponse(status_code=401, content={"detail": detail, "redirect": config.SIGNIN_REDIRECT})


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(InputValidationError)
    async def _invalid(request: Request, exc: InputValidationError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(AuthRequired)
    async def _auth(request: Request, exc: AuthRequired):
        return _signin_response(str(exc))

    @app.exception_handler(BackendError)
    async def _backend(request: Request, exc: BackendError):
        if isinstance(exc, NonSuccessStatus):
            if exc.status_code == 401:
                return _signin_response(str(exc))
            return JSONResponse(status_code=502, content={"detail": str(exc), "upstream_status": exc.status_code})
        return JSONResponse(status_code=502, content={"detail": str(exc)})


def create_app(client: Optional[BackendClient] = None) -> FastAPI:
    app = FastAPI(title="Intelli Foods Bridge", version=config.APP_VERSION)
    app.state.kitchens = KitchenRegistry(client or BackendClient())

    app.include_router(session.router)
    app.include_router(storage.router)
    app.include_router(ingredients.router)
    app.include_router(recipes.router)
    app.include_router(health.router)

    _register_error_handlers(app)

    setup_logging()

    app.add_middleware(RequestLoggingMiddleware)

    return app

app = create_app()
