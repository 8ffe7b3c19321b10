import logging

from sentinel.core.config import settings

logger = logging.getLogger("sentinel")


def configure_logging() -> None:
    """Configure root logging once, using the level from settings."""
    if logger.handlers or logging.getLogger().handlers:
        return

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # SQL echo goes through this logger; keep it quiet unless asked for
    if not settings.DB_ECHO:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
