from fastapi import APIRouter

from app.models.common import Health

router = APIRouter()


@router.get("/healthz", response_model=Health)
async def healthz() -> Health:
    """Lightweight health check endpoint for container orchestration."""
    return Health(status="ok")


__all__ = ["router"]
