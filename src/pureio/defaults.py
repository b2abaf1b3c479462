import logging
import sys
from typing import Optional, TextIO

from .console import ConsoleHandler, ReadLine, WriteLine
from .handler import Dispatcher
from .logging import Log, LoggingHandler
from .random import RandomHandler, RandomInt


class DefaultHandler(Dispatcher):
    """
    Handler that provides live implementations of the default
    pureio effects

    Example:
        >>> from pureio import DefaultHandler, random_int
        >>> random_int(1, 6).run(DefaultHandler())
        4
    Attributes:
        console: The console handler
        random: The random handler
        logging: The logging handler
    """
    def __init__(self,
                 stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None,
                 seed: Optional[int] = None,
                 logger: Optional[logging.Logger] = None):
        self.console = ConsoleHandler(stdin or sys.stdin, stdout or sys.stdout)
        self.random = RandomHandler(seed)
        self.logging = LoggingHandler(logger)
        super().__init__({
            ReadLine: self.console,
            WriteLine: self.console,
            RandomInt: self.random,
            Log: self.logging
        })


__all__ = ['DefaultHandler']
