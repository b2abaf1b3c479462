from ..console import read_int_between, write_line
from ..functions import always
from ..program import Program, Programs, for_each, pure, with_effect
from .countdown import countdown_app
from .hello import hello

ITEMS = ('Hello', 'Countdown', 'Exit')


def display_menu() -> Program[None]:
    lines = ['Menu'] + [f'{i}) {item}' for i, item in enumerate(ITEMS, 1)]
    return for_each(write_line, lines).map(always(None))


def launch(choice: int) -> Program[bool]:
    """
    Run the menu item numbered ``choice``

    Return:
        Program that produces whether the menu should exit
    """
    if choice == 1:
        return hello().map(always(False))
    if choice == 2:
        return countdown_app().map(always(False))
    if choice == 3:
        return pure(True)
    raise ValueError(f'unexpected choice: {choice}')


@with_effect
def menu() -> Programs[None]:
    """
    Show the menu and run the chosen item until the user picks "Exit"
    """
    while True:
        yield display_menu()
        prompt = f'Enter a number between 1 and {len(ITEMS)}'
        choice = yield read_int_between(1, len(ITEMS), prompt)
        should_exit = yield launch(choice)
        if should_exit:
            return None
