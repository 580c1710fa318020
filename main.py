"""Entry module for `uvicorn main:app`.

Exposes the application built in app.main at the repository root.
"""


from app.main import app, create_app  # noqa: F401

__all__ = ["app", "create_app"]
