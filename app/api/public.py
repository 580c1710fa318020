import logging

from fastapi import APIRouter
from starlette.responses import PlainTextResponse

from app.core.config import SERVICE_NAME

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/", response_class=PlainTextResponse)
async def index() -> PlainTextResponse:
    logger.info("Handling request for /")
    return PlainTextResponse(f"{SERVICE_NAME} ok")


__all__ = ["router"]
