"""Logging setup for entity_codegen.

Modules obtain loggers through :func:`get_logger`; the CLI calls
:func:`configure_logging` once to attach a rich console handler.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "entity_codegen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.WARNING, console: Console | None = None) -> None:
    """Attach a RichHandler to the package logger.

    Calling this again only updates the level.

    Args:
        level: Logging level name or number.
        console: Console to log to (defaults to stderr).
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root.setLevel(level)

    if _configured:
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)
    _configured = True
