"""Logging utilities for scalarconf.

The library logs through module loggers under the ``scalarconf`` namespace and
never installs handlers on import. Applications that want to see load and
save diagnostics call :func:`configure_logging`.
"""

from __future__ import annotations

import logging
from typing import Union

ROOT_LOGGER_NAME = "scalarconf"
_HANDLER_FLAG = "_scalarconf_handler"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a module logger by name (no prefixing).

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Attach a stream handler to the ``scalarconf`` logger.

    Calling this more than once only updates the level.

    Args:
        verbose: Log at DEBUG when True, WARNING otherwise.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(getattr(h, _HANDLER_FLAG, False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        setattr(handler, _HANDLER_FLAG, True)
        root.addHandler(handler)


def set_component_level(component: str, level: Union[str, int]) -> None:
    """Set log level for a specific component.

    Accepts either string levels (e.g., "INFO") or numeric constants. A bare
    component name such as ``"formats"`` is resolved under ``scalarconf``.
    """
    if isinstance(level, str):
        level_value = getattr(logging, level.upper(), logging.INFO)
    else:
        level_value = level
    if component != ROOT_LOGGER_NAME and not component.startswith(f"{ROOT_LOGGER_NAME}."):
        component = f"{ROOT_LOGGER_NAME}.{component}"
    logging.getLogger(component).setLevel(level_value)


__all__ = ["get_logger", "configure_logging", "set_component_level"]
