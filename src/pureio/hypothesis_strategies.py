from hypothesis.strategies import (SearchStrategy, booleans, builds,
                                   composite, floats, integers, one_of,
                                   text)

from .console import read_line, write_line
from .program import Chain, Program, Pure


def anything(allow_nan: bool = False) -> SearchStrategy:
    """
    Create a search strategy that produces equality comparable values

    Args:
        allow_nan: Allow NaN in floats
    Return:
        Search strategy that produces equality comparable values
    """
    return one_of(
        integers(), booleans(), text(), floats(allow_nan=allow_nan)
    )


def unaries(return_strategy: SearchStrategy = anything()
            ) -> SearchStrategy:
    """
    Create a search strategy that produces functions of one argument

    Example:
        >>> f = unaries(integers()).example()
        >>> f(None)
        2

    Args:
        return_strategy: Strategy used to draw return values
    Return:
        Search strategy that produces callables of one argument
    """
    @composite
    def f(draw):
        a = draw(return_strategy)
        return lambda _: a

    return f()


def programs(value_strategy: SearchStrategy = anything(),
             max_depth: int = 3) -> SearchStrategy:
    """
    Create a search strategy that produces `Program` values built from
    pure values, console effects and nested chains. Programs
    that read lines expect a handler that can answer `ReadLine`.

    Args:
        value_strategy: Strategy used to draw results
        max_depth: Maximum nesting of `Chain` nodes
    Return:
        Search strategy that produces programs
    """
    pures = builds(Pure, value_strategy)
    writes = builds(
        lambda line, v: write_line(line).map(lambda _: v),
        text(),
        value_strategy
    )
    reads = builds(
        lambda v: read_line().map(lambda line: (line, v)), value_strategy
    )
    if max_depth == 0:
        return one_of(pures, writes, reads)

    @composite
    def chains(draw) -> Program:
        source = draw(programs(value_strategy, max_depth - 1))
        next_ = draw(programs(value_strategy, max_depth - 1))
        return Chain(source, lambda _: next_)

    return one_of(pures, writes, reads, chains())


__all__ = ['anything', 'unaries', 'programs']
