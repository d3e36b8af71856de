import logging

from nameseek.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s %(message)s"


def configure_logging(debug: bool | None = None) -> None:
    """Configure structured logging for scripts and embedding applications."""
    if debug is None:
        debug = settings.debug
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
    )
