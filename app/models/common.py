from pydantic import BaseModel


class Health(BaseModel):
    """Liveness status returned by the health endpoint."""

    status: str


__all__ = ["Health"]
