from typing import Any


class PureIOError(Exception):
    """
    Base class for errors raised by pureio itself
    """


class UnreachableVariant(PureIOError, TypeError):
    """
    Raised by the interpreter when it meets a value that is not one of
    `Pure`, `Effect` or `Chain`
    """
    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f'unreachable program variant: {type(value).__qualname__}'
        )


class UnhandledEffect(PureIOError, LookupError):
    """
    Raised when a handler is asked to perform an effect description
    it has no implementation for
    """
    def __init__(self, description: Any):
        self.description = description
        super().__init__(
            f'no handler for effect {type(description).__qualname__}'
        )


class ScriptExhausted(PureIOError):
    """
    Raised by `pureio.testing.ScriptedHandler` when a program asks for
    more input than was scripted
    """


__all__ = [
    'PureIOError', 'UnreachableVariant', 'UnhandledEffect', 'ScriptExhausted'
]
