"""
Logging helpers

The SDK logs through standard ``logging`` loggers under the
``openai_sdk`` namespace and installs only a NullHandler. Applications
configure handlers themselves; ``set_log_level`` is a shortcut for the
common case of adjusting verbosity.
"""

import logging
from typing import Union


ROOT_LOGGER_NAME = "openai_sdk"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger inside the SDK namespace"""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_log_level(level: Union[int, str]) -> None:
    """
    Set the level of every SDK logger

    Args:
        level: A logging level number or name ("DEBUG", "info", ...)
    """
    if isinstance(level, str):
        level = level.upper()
    get_logger().setLevel(level)


def get_log_level() -> int:
    """Get the effective level of the SDK root logger"""
    return get_logger().getEffectiveLevel()
