import logging
import os
from typing import Optional

from .settings import ENV_LOG_LEVEL, Settings


def configure_logging(default_level: int = logging.INFO, settings: Optional[Settings] = None) -> None:
    """Configure root logger with a sane default format.

    Respects JRNY_LOG_LEVEL env var if present, then ``settings.log_level``.
    Meant for host applications; the library itself only creates module loggers.
    """
    level_name = os.getenv(ENV_LOG_LEVEL) or (settings.log_level if settings else None)
    level = default_level
    if level_name:
        level = getattr(logging, level_name.upper(), default_level)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )
