import sys
from contextlib import contextmanager


def _stack_depth() -> int:
    depth = 0
    frame = sys._getframe()
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


@contextmanager
def recursion_limit(n):
    """
    Allow at most ``n`` frames on top of the current stack
    """
    recursion_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(_stack_depth() + n)
    try:
        yield
    finally:
        sys.setrecursionlimit(recursion_limit)
