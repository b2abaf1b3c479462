import logging
from typing import Optional

from .errors import UnhandledEffect
from .handler import EffectDescription
from .program import Program, suspend


class Log(EffectDescription):
    """
    Emit ``message`` at ``level`` (a `logging` level number)
    """
    level: int
    message: str


def log(level: int, message: str) -> Program[None]:
    """
    Get a program that emits a log record

    Example:
        >>> import logging
        >>> log(logging.INFO, 'hello!').run(LoggingHandler())
        INFO:pureio.app:hello!

    Args:
        level: `logging` level number
        message: The log message
    Return:
        Program that produces `None`
    """
    return suspend(Log(level, message))


def debug(message: str) -> Program[None]:
    return log(logging.DEBUG, message)


def info(message: str) -> Program[None]:
    return log(logging.INFO, message)


def warning(message: str) -> Program[None]:
    return log(logging.WARNING, message)


def error(message: str) -> Program[None]:
    return log(logging.ERROR, message)


class LoggingHandler:
    """
    Handler for `Log` that calls a built-in `logging.Logger`

    Args:
        logger: The logger to emit to. Defaults to ``pureio.app``
    """
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger('pureio.app')

    def perform(self, description: EffectDescription) -> None:
        if isinstance(description, Log):
            self.logger.log(description.level, description.message)
            return None
        raise UnhandledEffect(description)


__all__ = [
    'Log',
    'log',
    'debug',
    'info',
    'warning',
    'error',
    'LoggingHandler'
]
