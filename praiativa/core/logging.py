# praiativa/core/logging.py
import logging

from praiativa.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL or "INFO").upper(),
        format=LOG_FORMAT,
    )
    # httpx loga cada request em INFO; barulho demais para o dashboard
    logging.getLogger("httpx").setLevel(logging.WARNING)
