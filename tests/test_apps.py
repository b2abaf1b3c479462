import logging

from pureio.apps import countdown, countdown_app, guess, hello, menu
from pureio.apps.guess import check_attempt
from pureio.apps.menu import display_menu, launch
from pureio.console import ReadLine, WriteLine
from pureio.logging import Log
from pureio.testing import ScriptedHandler

from .utils import recursion_limit

MENU = ['Menu', '1) Hello', '2) Countdown', '3) Exit']
MENU_PROMPT = 'Enter a number between 1 and 3'


def test_hello():
    handler = ScriptedHandler(lines=['Ada'])
    assert hello().run(handler) is None
    assert handler.performed == [
        WriteLine("What's your name?"),
        ReadLine(),
        WriteLine('Hello Ada!')
    ]


def test_countdown():
    handler = ScriptedHandler()
    countdown(3).run(handler)
    assert handler.output == ['3', '2', '1', '0', 'BOOM!!!']


def test_countdown_from_zero():
    handler = ScriptedHandler()
    countdown(0).run(handler)
    assert handler.output == ['0', 'BOOM!!!']


def test_long_countdown_is_stack_safe():
    handler = ScriptedHandler()
    with recursion_limit(100):
        countdown(100000).run(handler)
    assert len(handler.output) == 100002
    assert handler.output[-2:] == ['0', 'BOOM!!!']


def test_countdown_app_asks_until_in_range():
    handler = ScriptedHandler(lines=['3', 'ten', '10'])
    countdown_app().run(handler)
    prompt = 'Enter a number between 10 and 100000'
    assert handler.output[:2] == [prompt, prompt]
    assert handler.output[2:] == [
        '10', '9', '8', '7', '6', '5', '4', '3', '2', '1', '0', 'BOOM!!!'
    ]


def test_check_attempt():
    for guess_, message, won in [(3, "It's too small.", False),
                                 (9, "It's too large.", False),
                                 (5, 'You won after 2 attempt(s).', True)]:
        handler = ScriptedHandler()
        assert check_attempt(5, 2, guess_).run(handler) is won
        assert handler.output == [message]


def test_guess():
    handler = ScriptedHandler(lines=['25', '10', '5', '7'], numbers=[7])
    assert guess().run(handler) is None
    assert handler.output == [
        'Guess a number between 1 and 20.',
        'Attempt 1>',
        "It's too large.",
        'Attempt 2>',
        "It's too small.",
        'Attempt 3>',
        'You won after 3 attempt(s).'
    ]
    assert handler.records == [Log(logging.DEBUG, 'secret number is 7')]


def test_display_menu():
    handler = ScriptedHandler()
    assert display_menu().run(handler) is None
    assert handler.output == MENU


def test_launch_exit():
    assert launch(3).run(ScriptedHandler()) is True


def test_menu():
    handler = ScriptedHandler(lines=['1', 'Ada', '4', '2', '10', '3'])
    assert menu().run(handler) is None
    assert handler.output == (
        MENU + [MENU_PROMPT, "What's your name?", 'Hello Ada!'] +
        MENU + [MENU_PROMPT, MENU_PROMPT] +
        ['Enter a number between 10 and 100000'] +
        [str(n) for n in range(10, -1, -1)] + ['BOOM!!!'] +
        MENU + [MENU_PROMPT]
    )  # yapf: disable
    assert not handler.lines
