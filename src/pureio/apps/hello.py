from ..console import read_line, write_line
from ..program import Program


def hello() -> Program[None]:
    """
    Ask for the user's name and greet them
    """
    return write_line("What's your name?").and_then(
        lambda _: read_line()
    ).and_then(
        lambda name: write_line(f'Hello {name}!')
    )  # yapf: disable
