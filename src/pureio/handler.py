from typing import Any, Mapping, Type

from typing_extensions import Protocol

from .errors import UnhandledEffect
from .immutable import Immutable


class EffectDescription(Immutable):
    """
    Base class for descriptions of primitive effects.

    A description only names an action and carries its arguments,
    e.g ``WriteLine('hello')``. Running the action is the job of an
    `EffectHandler`. Each description type must always be answered
    with a result of the same type.
    """


class EffectHandler(Protocol):
    """
    Performs the real action named by an `EffectDescription`
    """
    def perform(self, description: EffectDescription) -> Any:
        """
        Perform ``description`` synchronously

        Args:
            description: The effect to perform
        Return:
            The result of the effect
        """
        ...


class Dispatcher:
    """
    `EffectHandler` that routes each description to the handler
    registered for its type (or the nearest registered base class)

    Example:
        >>> dispatcher = Dispatcher({
        ...     ReadLine: ConsoleHandler(),
        ...     RandomInt: RandomHandler(seed=1)
        ... })
        >>> random_int(1, 6).run(dispatcher)
        2
    """
    def __init__(self, routes: Mapping[Type[EffectDescription],
                                       EffectHandler]):
        self.routes = dict(routes)

    def route(self, description_type: Type[EffectDescription],
              handler: EffectHandler) -> 'Dispatcher':
        """
        Get a new dispatcher that also sends ``description_type`` to
        ``handler``

        Args:
            description_type: The description type to route
            handler: The handler to route to
        Return:
            New `Dispatcher` with the extra route
        """
        return Dispatcher({**self.routes, description_type: handler})

    def perform(self, description: EffectDescription) -> Any:
        for t in type(description).__mro__:
            if t in self.routes:
                return self.routes[t].perform(description)
        raise UnhandledEffect(description)


__all__ = ['EffectDescription', 'EffectHandler', 'Dispatcher']
