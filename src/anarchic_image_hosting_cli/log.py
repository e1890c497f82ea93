import logging
from logging import Logger

from rich.logging import RichHandler

from anarchic_image_hosting_cli.display import err_console, warn

LOGGER_NAME = "anarchic_image_hosting_cli"
OFF = logging.CRITICAL + 10

LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": OFF,
}


def parse_log_level(name: str) -> int:
    """Map a configured level name to a logging level, raising ValueError if unknown."""
    try:
        return LEVELS[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown log level: {name!r}") from None


def init_logger(log_level: str, name: str = LOGGER_NAME) -> Logger:
    """Configure and return the logger handed to every component that logs.

    Called once at startup; the level is not changed afterwards.
    """
    try:
        level = parse_log_level(log_level)
    except ValueError as e:
        warn(f"{e}, falling back to 'error'")
        level = logging.ERROR

    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = RichHandler(console=err_console, show_path=False, markup=False)
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False

    return logger
