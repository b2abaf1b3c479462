import logging

import pytest

from pureio import Interpreter, run
from pureio.console import ReadLine, WriteLine, read_line, write_line
from pureio.errors import UnreachableVariant
from pureio.program import Chain, Program, pure, suspend
from pureio.testing import ScriptedHandler

from .utils import recursion_limit


class Rogue(Program):
    pass


def counter(n):
    program = pure(0)
    for _ in range(n):
        program = program.and_then(lambda v: pure(v + 1))
    return program


def writes(n):
    program = pure(None)
    for i in range(n):
        program = program.and_then(lambda _, i=i: write_line(str(i)))
    return program


def right_nested_writes(i, n):
    if i == n:
        return pure(i)
    return write_line(str(i)).and_then(
        lambda _: right_nested_writes(i + 1, n)
    )


def test_pure_returns_value():
    assert run(pure('value'), ScriptedHandler()) == 'value'


def test_effect_invokes_handler_once():
    handler = ScriptedHandler(lines=['Ada'])
    assert run(read_line(), handler) == 'Ada'
    assert handler.performed == [ReadLine()]


def test_effects_run_in_order():
    handler = ScriptedHandler(lines=['b'])
    program = suspend(WriteLine('a')).and_then(lambda _: suspend(ReadLine()))
    assert run(program, handler) == 'b'
    assert handler.performed == [WriteLine('a'), ReadLine()]


def test_left_nested_effects_run_in_order():
    handler = ScriptedHandler()
    run(writes(5), handler)
    assert handler.output == ['0', '1', '2', '3', '4']


def test_left_nested_stack_safety():
    n = 100000
    with recursion_limit(100):
        assert run(counter(n), ScriptedHandler()) == n


def test_left_nested_effect_stack_safety():
    n = 100000
    handler = ScriptedHandler()
    with recursion_limit(100):
        run(writes(n), handler)
    assert len(handler.output) == n
    assert handler.output[-1] == str(n - 1)


def test_right_nested_stack_safety():
    n = 100000
    handler = ScriptedHandler()
    with recursion_limit(100):
        assert run(right_nested_writes(0, n), handler) == n
    assert len(handler.output) == n


def test_mixed_nesting_stack_safety():
    program = pure(0)
    for _ in range(20000):
        program = program.and_then(
            lambda v: pure(v).and_then(lambda w: pure(w + 1))
        ).and_then(lambda v: write_line('x').map(lambda _: v))
    handler = ScriptedHandler()
    with recursion_limit(100):
        assert run(program, handler) == 20000
    assert len(handler.output) == 20000


def reductions(program):
    interpreter = Interpreter(ScriptedHandler())
    interpreter.run(program)
    return interpreter


def test_reductions_grow_linearly():
    small = reductions(counter(1000)).reductions
    large = reductions(counter(8000)).reductions
    assert small <= 4 * 1000
    assert large <= 8 * small + 8


def test_effects_are_counted_once_each():
    interpreter = reductions(writes(1000))
    assert interpreter.effects == 1000
    assert interpreter.reductions <= 4 * 1000


def test_unreachable_variant():
    with pytest.raises(UnreachableVariant):
        run(Rogue(), ScriptedHandler())


def test_unreachable_variant_as_chain_source():
    with pytest.raises(UnreachableVariant) as e:
        run(Chain(Rogue(), pure), ScriptedHandler())
    assert isinstance(e.value.value, Rogue)


def test_continuation_returning_non_program():
    with pytest.raises(UnreachableVariant):
        run(pure(1).and_then(lambda v: v + 1), ScriptedHandler())


def test_handler_errors_propagate_unchanged():
    error = ValueError('device failure')

    class Failing:
        def perform(self, description):
            raise error

    with pytest.raises(ValueError) as e:
        run(write_line('a').and_then(lambda _: pure(1)), Failing())
    assert e.value is error


def test_continuation_errors_stop_interpretation():
    handler = ScriptedHandler()

    def fail(_):
        raise KeyError('boom')

    program = write_line('a').and_then(fail).and_then(
        lambda _: write_line('b')
    )
    with pytest.raises(KeyError):
        run(program, handler)
    assert handler.output == ['a']


def test_program_run_method():
    assert pure(1).map(lambda v: v + 1).run(ScriptedHandler()) == 2


def test_logs_run_summary(caplog):
    with caplog.at_level(logging.DEBUG, logger='pureio.interpreter'):
        run(writes(3), ScriptedHandler())
    assert 'done after' in caplog.text
    assert '3 effects' in caplog.text
