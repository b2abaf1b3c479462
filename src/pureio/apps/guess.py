from .. import logging
from ..console import read_int_between, write_line
from ..functions import always
from ..program import Program, Programs, pure, with_effect
from ..random import random_int


def check_attempt(number: int, attempt: int, guess: int) -> Program[bool]:
    """
    Tell the player how ``guess`` compares to ``number``

    Return:
        Program that produces whether the guess was right
    """
    if guess < number:
        return write_line("It's too small.").map(always(False))
    if guess > number:
        return write_line("It's too large.").map(always(False))
    return write_line(f'You won after {attempt} attempt(s).').map(always(True))


def guess_loop(number: int, attempt: int, low: int,
               high: int) -> Program[None]:
    def next_attempt(won: bool) -> Program[None]:
        if won:
            return pure(None)
        return guess_loop(number, attempt + 1, low, high)

    return write_line(f'Attempt {attempt}>').and_then(
        lambda _: read_int_between(low, high)
    ).and_then(
        lambda guess: check_attempt(number, attempt, guess)
    ).and_then(next_attempt)  # yapf: disable


@with_effect
def guess(low: int = 1, high: int = 20) -> Programs[None]:
    """
    Let the player guess a random number between ``low`` and ``high``
    until they get it right
    """
    yield write_line(f'Guess a number between {low} and {high}.')
    number = yield random_int(low, high)
    yield logging.debug(f'secret number is {number}')
    yield guess_loop(number, 1, low, high)
