import logging

from rich.logging import RichHandler

LOGGER_NAME = "dbaas"


def setup_logger(name: str = LOGGER_NAME, level: int = logging.ERROR) -> logging.Logger:
    """
    Returns the package logger, attaching a stderr RichHandler on first use.

    Calling it again only changes the level, so the CLI can turn on
    request tracing after the library has already logged.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        # Bodies may contain brackets, so rich markup stays off
        handler = RichHandler(rich_tracebacks=True, markup=False, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger


def set_verbose(verbose: bool) -> None:
    setup_logger(level=logging.DEBUG if verbose else logging.ERROR)


# Library default: only failures are reported
logger = setup_logger(level=logging.ERROR)
