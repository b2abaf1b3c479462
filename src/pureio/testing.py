from collections import deque
from typing import Any, Iterable, List

from .console import ReadLine, WriteLine
from .errors import ScriptExhausted, UnhandledEffect
from .handler import EffectDescription
from .logging import Log
from .random import RandomInt


class ScriptedHandler:
    """
    In-memory handler for tests. Answers `ReadLine` from ``lines`` and
    `RandomInt` from ``numbers`` in order, and records everything.

    Example:
        >>> handler = ScriptedHandler(lines=['Ada'])
        >>> read_line().and_then(write_line).run(handler)
        >>> handler.output
        ['Ada']

    Attributes:
        performed: every description performed, in order
        output: every line written with `WriteLine`
        records: every `Log` performed
    """
    def __init__(self,
                 lines: Iterable[str] = (),
                 numbers: Iterable[int] = ()):
        self.lines = deque(lines)
        self.numbers = deque(numbers)
        self.performed: List[EffectDescription] = []
        self.output: List[str] = []
        self.records: List[Log] = []

    def perform(self, description: EffectDescription) -> Any:
        self.performed.append(description)
        if isinstance(description, WriteLine):
            self.output.append(description.line)
            return None
        if isinstance(description, ReadLine):
            if not self.lines:
                raise ScriptExhausted('no more scripted lines')
            return self.lines.popleft()
        if isinstance(description, RandomInt):
            if not self.numbers:
                raise ScriptExhausted('no more scripted numbers')
            return self.numbers.popleft()
        if isinstance(description, Log):
            self.records.append(description)
            return None
        raise UnhandledEffect(description)

    @property
    def reads(self) -> int:
        return sum(isinstance(d, ReadLine) for d in self.performed)


__all__ = ['ScriptedHandler']
