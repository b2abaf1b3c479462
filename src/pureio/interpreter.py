import logging
from typing import Any, TypeVar

from .errors import UnreachableVariant
from .handler import EffectDescription, EffectHandler
from .program import Chain, Effect, Program, Pure

A = TypeVar('A')

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Trampoline that drives a `Program` to completion.

    Each iteration of the loop reduces the current program by exactly
    one step and performs at most one primitive effect, so the Python
    call stack does not grow with the length of the program. Left
    nested chains are re-associated one node at a time, which keeps
    the total number of reductions linear in the size of the program.

    Attributes:
        handler: The handler that performs primitive effects
        reductions: Number of reduction steps taken so far
        effects: Number of primitive effects performed so far
    """
    def __init__(self, handler: EffectHandler):
        self.handler = handler
        self.reductions = 0
        self.effects = 0

    def _perform(self, description: EffectDescription) -> Any:
        self.effects += 1
        return self.handler.perform(description)

    def run(self, program: 'Program[A]') -> A:
        """
        Interpret ``program``. Exceptions raised by the handler or by
        continuations propagate unchanged.

        Args:
            program: The program to interpret
        Return:
            The result of ``program``
        """
        logger.debug('interpreting %s', type(program).__name__)
        current: Any = program
        while True:
            self.reductions += 1
            if isinstance(current, Pure):
                logger.debug(
                    'done after %d reductions and %d effects',
                    self.reductions,
                    self.effects
                )
                return current.value
            elif isinstance(current, Effect):
                result = self._perform(current.description)
                current = current.continuation(result)
            elif isinstance(current, Chain):
                source = current.source
                if isinstance(source, Pure):
                    current = current.continuation(source.value)
                elif isinstance(source, Effect):
                    result = self._perform(source.description)
                    current = Chain(
                        source.continuation(result), current.continuation
                    )
                elif isinstance(source, Chain):
                    current = Chain(
                        source.source,
                        _reassociate(source.continuation, current.continuation)
                    )
                else:
                    raise UnreachableVariant(source)
            else:
                raise UnreachableVariant(current)


def _reassociate(inner, outer):
    return lambda x: Chain(inner(x), outer)


def run(program: 'Program[A]', handler: EffectHandler) -> A:
    """
    Interpret ``program`` with ``handler``

    Example:
        >>> run(write_line('Hello!'), ConsoleHandler())
        Hello!

    Args:
        program: The program to interpret
        handler: The handler that performs primitive effects
    Return:
        The result of ``program``
    """
    return Interpreter(handler).run(program)


__all__ = ['Interpreter', 'run']
