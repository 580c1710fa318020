import logging
from typing import Optional

from app.core.config import get_settings


def configure_logging(level: Optional[str] = None) -> None:
    """Configure basic logging if not already configured.

    - Level comes from LOG_LEVEL (via settings) unless given explicitly
    - Unknown level names fall back to INFO
    - Service lines under the "app" logger stay visible at INFO regardless
    """
    name = (level or get_settings().log_level).upper()
    resolved = getattr(logging, name, None)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=resolved,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    root_logger.setLevel(resolved)
    logging.getLogger("app").setLevel(min(resolved, logging.INFO))
