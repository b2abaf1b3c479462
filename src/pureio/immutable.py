from dataclasses import dataclass, replace
from typing import TypeVar

T = TypeVar('T', bound='Immutable')


class Immutable:
    """
    Super class that makes subclasses immutable using dataclasses

    Example:
        >>> class Point(Immutable):
        ...     x: int
        ...     y: int
        >>> p = Point(1, 2)
        >>> p.x = 3
        dataclasses.FrozenInstanceError: cannot assign to field 'x'

    """
    def __init_subclass__(cls,
                          init: bool = True,
                          repr: bool = True,
                          eq: bool = True,
                          order: bool = False) -> None:
        super().__init_subclass__()
        dataclass(frozen=True, init=init, repr=repr, eq=eq, order=order)(cls)

    def clone(self: T, **changes) -> T:
        """
        Make a copy of this instance with the fields in ``changes``
        replaced

        Example:
            >>> Point(1, 2).clone(y=3)
            Point(x=1, y=3)

        Args:
            changes: fields to overwrite
        Return:
            New instance of the same type
        """
        return replace(self, **changes)  # type: ignore


__all__ = ['Immutable']
