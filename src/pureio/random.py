import random as random_
from typing import Optional

from .errors import UnhandledEffect
from .handler import EffectDescription
from .program import Program, suspend


class RandomInt(EffectDescription):
    """
    Draw a random integer ``n`` with ``low <= n <= high``
    """
    low: int
    high: int


def random_int(low: int, high: int) -> Program[int]:
    """
    Get a program that produces a random integer `n` in the range \
    `low <= n <= high`.

    Example:
        >>> random_int(1, 20).run(RandomHandler(seed=1))
        5
    Args:
        low: lower bound
        high: upper bound
    Return:
        Program that produces a random integer
    """
    return suspend(RandomInt(low, high))


class RandomHandler:
    """
    Handler for `RandomInt` backed by `random.Random`
    """
    def __init__(self, seed: Optional[int] = None):
        self.generator = random_.Random(seed)

    def perform(self, description: EffectDescription) -> int:
        if isinstance(description, RandomInt):
            return self.generator.randint(description.low, description.high)
        raise UnhandledEffect(description)


__all__ = ['RandomInt', 'random_int', 'RandomHandler']
