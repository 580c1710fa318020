import os
from functools import lru_cache


SERVICE_NAME = "user-management"
BIND_HOST = "0.0.0.0"
BIND_PORT = 8080


class Settings:
    """Settings loader for the service.

    The bind address is fixed in code; only the log level comes from the
    environment.
    """

    def __init__(self) -> None:
        self.app_name: str = SERVICE_NAME
        self.host: str = BIND_HOST
        self.port: int = BIND_PORT
        self.log_level: str = (os.getenv("LOG_LEVEL") or "INFO").strip().upper() or "INFO"

    @property
    def bind_address(self) -> str:
        return f"{self.host}:{self.port}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
