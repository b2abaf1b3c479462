from ..console import read_int_between, write_line
from ..program import Program

LOW = 10
HIGH = 100000


def countdown(n: int) -> Program[None]:
    """
    Write ``n``, ``n - 1``, ..., ``0`` and then ``BOOM!!!``, one per line

    Example:
        >>> countdown(2).run(ConsoleHandler())
        2
        1
        0
        BOOM!!!
    """
    def next_step(_: None) -> Program[None]:
        if n == 0:
            return write_line('BOOM!!!')
        return countdown(n - 1)

    return write_line(str(n)).and_then(next_step)


def countdown_app() -> Program[None]:
    prompt = f'Enter a number between {LOW} and {HIGH}'
    return read_int_between(LOW, HIGH, prompt).and_then(countdown)
