from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.system import router as system_router
from app.api.public import router as public_router
from app.core.config import get_settings
from app.core.logging import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # serve() records the level it was started with
    configure_logging(getattr(app.state, "log_level", None))
    yield


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Only GET is registered on each path; a method mismatch is reported as a missing route
    return JSONResponse({"detail": "Not Found"}, status_code=404)


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title=settings.app_name,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    # Routers
    application.include_router(system_router)
    application.include_router(public_router)

    application.add_exception_handler(404, not_found_handler)
    application.add_exception_handler(405, not_found_handler)

    return application


app = create_app()

__all__ = ["app", "create_app"]
