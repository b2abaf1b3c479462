from typing import Any, Callable, Generic, Tuple, TypeVar

from .immutable import Immutable

A = TypeVar('A')


def identity(v: A) -> A:
    """
    The identity function. Just gives back its argument

    Example:
        >>> identity('value')
        'value'

    Args:
        v: The value to get back

    Return:
        `v`
    """
    return v


class Always(Generic[A], Immutable):
    """
    A Callable that always returns the same value
    regardless of the arguments
    """
    value: A

    def __call__(self, *args, **kwargs) -> A:
        return self.value


def always(value: A) -> Callable[..., A]:
    """
    Get a function that always returns `value`. Handy as a continuation
    that ignores the result of the previous step

    Example:
        >>> write_line('Menu').map(always(False)).run(handler)
        Menu
        False

    Args:
        value: The value to return always

    Return:
        function that always returns `value`
    """
    return Always(value)


class Composition(Immutable):
    functions: Tuple[Callable, ...]

    def __call__(self, *args, **kwargs):
        first, *rest = reversed(self.functions)
        last_result = first(*args, **kwargs)
        for f in rest:
            last_result = f(last_result)
        return last_result


def compose(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    *functions: Callable[[Any], Any]
) -> Callable[[Any], Any]:
    """
    Compose functions from left to right

    Example:
        >>> f = lambda v: v * 2
        >>> g = compose(str, f)
        >>> g(3)
        "6"

    Args:
        f: the outermost function in the composition
        g: the function to be composed with f
        functions: functions to be composed with `f` \
        and `g` from left to right

    Return:
        `f` composed with `g` composed with `functions` from left to right
    """
    return Composition((f, g) + functions)


__all__ = ['identity', 'always', 'compose']
