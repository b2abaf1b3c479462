import re
import sys
from typing import Optional, TextIO

from .errors import UnhandledEffect
from .handler import EffectDescription
from .program import Program, pure, suspend

_INT = re.compile(r'\s*[+-]?[0-9]+\s*')


class ReadLine(EffectDescription):
    """
    Read one line from the console, without its line terminator
    """
    prompt: str = ''


class WriteLine(EffectDescription):
    """
    Write ``line`` followed by a newline to the console
    """
    line: str = ''


def read_line(prompt: str = '') -> Program[str]:
    """
    Get a program that reads a line from the console

    Example:
        >>> read_line().map(str.upper).run(ConsoleHandler())
        ada  # input
        'ADA'

    Args:
        prompt: Text written before reading, without newline
    Return:
        Program that produces the line read
    """
    return suspend(ReadLine(prompt))


def write_line(line: str = '') -> Program[None]:
    """
    Get a program that writes a line to the console

    Example:
        >>> write_line('Hello!').run(ConsoleHandler())
        Hello!

    Args:
        line: The line to write
    Return:
        Program that produces `None`
    """
    return suspend(WriteLine(line))


class ConsoleHandler:
    """
    Handler for `ReadLine` and `WriteLine` backed by text streams.
    Defaults to the process standard input and output.
    """
    def __init__(self,
                 stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None):
        self.stdin = stdin
        self.stdout = stdout

    def perform(self, description: EffectDescription):
        stdin = self.stdin or sys.stdin
        stdout = self.stdout or sys.stdout
        if isinstance(description, WriteLine):
            print(description.line, file=stdout, flush=True)
            return None
        if isinstance(description, ReadLine):
            if description.prompt:
                print(description.prompt, end='', file=stdout, flush=True)
            line = stdin.readline()
            if not line:
                raise EOFError('end of input')
            return line.rstrip('\r\n')
        raise UnhandledEffect(description)


def parse_int(s: str) -> Optional[int]:
    """
    Parse ``s`` as a base 10 integer

    Example:
        >>> parse_int('42')
        42
        >>> parse_int('abc')
        >>> parse_int('1_0')

    Args:
        s: The string to parse
    Return:
        The parsed integer or `None` if ``s`` is not an integer
    """
    if _INT.fullmatch(s) is None:
        return None
    return int(s)


def read_int() -> Program[int]:
    """
    Get a program that reads lines until one can be parsed as an integer

    Return:
        Program that produces the first integer read
    """
    def check(maybe_int: Optional[int]) -> Program[int]:
        if maybe_int is None:
            return read_int()
        return pure(maybe_int)

    return read_line().map(parse_int).and_then(check)


def read_int_between(low: int,
                     high: int,
                     prompt: Optional[str] = None) -> Program[int]:
    """
    Get a program that reads integers until one is in the range
    ``low <= n <= high``

    Example:
        >>> read_int_between(1, 100).run(ConsoleHandler())
        abc  # input
        150  # input
        42  # input
        42

    Args:
        low: lower bound
        high: upper bound
        prompt: line written before each attempt
    Return:
        Program that produces the first integer read in range
    """
    def check(i: int) -> Program[int]:
        if low <= i <= high:
            return pure(i)
        return read_int_between(low, high, prompt)

    attempt = read_int().and_then(check)
    if prompt is None:
        return attempt
    return write_line(prompt).and_then(lambda _: attempt)


__all__ = [
    'ReadLine',
    'WriteLine',
    'read_line',
    'write_line',
    'ConsoleHandler',
    'parse_int',
    'read_int',
    'read_int_between'
]
