import logging
from typing import Optional
from rich.console import Console
from rich.logging import RichHandler
from scimv2.config import settings


console = Console(stderr=True)

PACKAGE_LOGGER = "scimv2"


def setup_logging(
    level: Optional[str] = None,
    format: str = "%(message)s",
    datefmt: str = "[%X]",
    propagate: bool = False,
) -> None:
    """Attach a rich handler to the package logger.

    Nothing is configured on import; records propagate to the host
    application's handlers until this is called.
    """
    log_level = level or settings.log_level

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    package_logger.propagate = propagate

    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)

    handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        tracebacks_show_locals=settings.debug,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    handler.setFormatter(logging.Formatter(fmt=format, datefmt=datefmt))
    package_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


# Export a default logger
logger = get_logger(PACKAGE_LOGGER)
