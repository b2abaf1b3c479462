from __future__ import annotations

from functools import reduce, wraps
from typing import (TYPE_CHECKING, Any, Callable, Generator, Generic,
                    Iterable, Optional, Tuple, TypeVar)

from .handler import EffectDescription
from .immutable import Immutable

if TYPE_CHECKING:
    from .handler import EffectHandler

A = TypeVar('A')
B = TypeVar('B')


class Program(Immutable, Generic[A], eq=False):
    """
    Immutable description of a sequential, effectful computation that
    produces an `A` when interpreted.

    Building a program never performs any effect. Effects only happen
    when the program is given to `pureio.interpreter.run` together
    with an `EffectHandler`.

    A program is exactly one of `Pure`, `Effect` or `Chain`. Only `Pure`
    compares by value; other programs compare by identity.
    """
    def and_then(self, f: Callable[[A], Program[B]]) -> Program[B]:
        """
        Sequence this program with the program produced by ``f``

        Example:
            >>> read_line().and_then(
            ...     lambda name: write_line(f'Hello {name}!')
            ... ).run(ConsoleHandler())
            Ada  # input
            Hello Ada!

        Args:
            f: function from the result of this program to the next program
        Return:
            Program that runs this program and then the result of ``f``
        """
        return Chain(self, f)

    def map(self, f: Callable[[A], B]) -> Program[B]:
        """
        Map ``f`` over the result of this program

        Example:
            >>> pure(1).map(lambda v: v + 1).run(handler)
            2

        Args:
            f: function to apply to the result of this program
        Return:
            Program that produces the result of ``f``
        """
        return self.and_then(lambda a: Pure(f(a)))

    def run(self, handler: EffectHandler) -> A:
        """
        Interpret this program, performing its effects with ``handler``

        Args:
            handler: handler that performs the primitive effects
        Return:
            The result of interpreting this program
        """
        from .interpreter import run
        return run(self, handler)


class Pure(Program[A]):
    """
    A program that already has its result
    """
    value: A


class Effect(Program[A], repr=False, eq=False):
    """
    A program that performs one primitive effect and continues
    with its result
    """
    description: EffectDescription
    continuation: Callable[[Any], Program[A]]

    def __repr__(self) -> str:
        return f'Effect({self.description!r}, {self.continuation!r})'


class Chain(Generic[A, B], Program[B], repr=False, eq=False):
    """
    A program that runs ``source`` and passes its result
    to ``continuation`` to get the rest of the program.

    Nested chains are flattened by the interpreter, not when they
    are built, so constructing a `Chain` is O(1) regardless
    of the size of ``source``.
    """
    source: Program[A]
    continuation: Callable[[A], Program[B]]

    def __repr__(self) -> str:
        return f'Chain(<{type(self.source).__name__}>, {self.continuation!r})'


def pure(value: A) -> Program[A]:
    """
    Get a program that produces ``value`` without performing any effect

    Example:
        >>> pure(1).run(handler)
        1

    Args:
        value: The result of the program
    Return:
        `Pure` program of ``value``
    """
    return Pure(value)


def suspend(description: EffectDescription) -> Program[Any]:
    """
    Get a program that performs exactly the primitive effect
    given by ``description`` and produces its result

    Example:
        >>> suspend(WriteLine('Hello!')).run(ConsoleHandler())
        Hello!

    Args:
        description: The effect to perform
    Return:
        `Effect` program for ``description``
    """
    return Effect(description, Pure)


def chain(p: Program[A], f: Callable[[A], Program[B]]) -> Program[B]:
    """
    Function version of `Program.and_then`

    Args:
        p: The program to run first
        f: Function from the result of ``p`` to the next program
    Return:
        Program that runs ``p`` and then the result of ``f``
    """
    return Chain(p, f)


def map_(p: Program[A], f: Callable[[A], B]) -> Program[B]:
    """
    Function version of `Program.map`

    Args:
        p: The program to map over
        f: Function to apply to the result of ``p``
    Return:
        Program that produces the result of ``f``
    """
    return chain(p, lambda a: pure(f(a)))


Cons = Optional[Tuple[Any, Any]]


def _to_tuple(xs: Cons) -> Tuple[Any, ...]:
    collected = []
    while xs is not None:
        x, xs = xs
        collected.append(x)
    collected.reverse()
    return tuple(collected)


def sequence(iterable: Iterable[Program[A]]) -> Program[Tuple[A, ...]]:
    """
    Run each program in ``iterable`` from left to right
    and collect the results

    Example:
        >>> sequence([pure(v) for v in range(3)]).run(handler)
        (0, 1, 2)

    Args:
        iterable: The programs to run
    Return:
        Program of the collected results
    """
    def combine(ps: Program[Cons], p: Program[A]) -> Program[Cons]:
        return ps.and_then(lambda xs: p.map(lambda x: (x, xs)))

    return reduce(combine, iterable, pure(None)).map(_to_tuple)


def for_each(f: Callable[[A], Program[B]],
             iterable: Iterable[A]) -> Program[Tuple[B, ...]]:
    """
    Map each element in ``iterable`` to a program by applying ``f``,
    run the programs from left to right and collect the results

    Example:
        >>> for_each(write_line, ['a', 'b']).run(ConsoleHandler())
        a
        b
        (None, None)

    Args:
        f: Function to map over ``iterable``
        iterable: Iterable to map ``f`` over
    Return:
        Program of the collected results
    """
    return sequence(f(x) for x in iterable)


def filter_(f: Callable[[A], Program[bool]],
            iterable: Iterable[A]) -> Program[Tuple[A, ...]]:
    """
    Map each element in ``iterable`` to a program by applying ``f``
    and keep the elements for which the program produces ``True``

    Example:
        >>> filter_(lambda v: pure(v % 2 == 0), range(3)).run(handler)
        (0, 2)

    Args:
        f: Function to map ``iterable`` by
        iterable: Iterable to filter
    Return:
        Program of the kept elements
    """
    def combine(ps: Program[Cons], x: A) -> Program[Cons]:
        return ps.and_then(
            lambda xs: f(x).map(lambda keep: (x, xs) if keep else xs)
        )

    return reduce(combine, iterable, pure(None)).map(_to_tuple)


Programs = Generator[Program[Any], Any, A]


def with_effect(f: Callable[..., Programs[A]]) -> Callable[..., Program[A]]:
    """
    Decorator for generator functions that yield programs. The yielded
    programs are chained together with `Program.and_then` and the
    result of each is sent back into the generator.

    The generator is only resumed by the interpreter, so decorated
    functions may loop or recurse indefinitely.

    Example:
        >>> @with_effect
        ... def greet() -> Programs[None]:
        ...     name = yield read_line()
        ...     yield write_line(f'Hello {name}!')
        >>> greet().run(ConsoleHandler())
        Ada  # input
        Hello Ada!

    Args:
        f: generator function to decorate
    Return:
        function that returns a program instead of a generator
    """
    @wraps(f)
    def decorator(*args, **kwargs) -> Program[A]:
        def start(_: None) -> Program[A]:
            g = f(*args, **kwargs)

            def resume(v: Any) -> Program[A]:
                try:
                    return g.send(v).and_then(resume)
                except StopIteration as e:
                    return Pure(e.value)

            return resume(None)

        return Pure(None).and_then(start)

    return decorator


__all__ = [
    'Program',
    'Pure',
    'Effect',
    'Chain',
    'pure',
    'suspend',
    'chain',
    'map_',
    'sequence',
    'for_each',
    'filter_',
    'Programs',
    'with_effect'
]
