import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Chatty third-party loggers kept at WARNING regardless of the app level
QUIET_LOGGERS = ("uvicorn.access", "multipart", "sqlalchemy.engine")


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        from careerbridge.config import settings
        level = settings.log_level
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def setup_logging(level: int | str | None = None) -> None:
    """Route every log record to stdout; safe to call more than once."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
