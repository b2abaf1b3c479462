"""
Example programs built on pureio
"""
from typing import Callable, Dict

from ..program import Program
from .countdown import countdown, countdown_app
from .guess import guess
from .hello import hello
from .menu import menu

APPS: Dict[str, Callable[[], Program[None]]] = {
    'hello': hello,
    'countdown': countdown_app,
    'guess': guess,
    'menu': menu
}

__all__ = ['APPS', 'hello', 'countdown', 'countdown_app', 'guess', 'menu']
