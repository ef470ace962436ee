import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "httpbridge"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Safe to call more than once; the handler is only installed the first time.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True), show_path=False, rich_tracebacks=True
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logger
