import logging
import sys
from argparse import ArgumentParser
from typing import List, Optional

from .apps import APPS
from .defaults import DefaultHandler


def make_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog='pureio', description='Run one of the pureio example programs'
    )
    parser.add_argument('app', choices=sorted(APPS))
    parser.add_argument(
        '--seed', type=int, default=None, help='seed for random effects'
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='threshold for log output on stderr'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point of the ``pureio`` command. Building the program is
    pure; all effects happen inside ``run``.

    Args:
        argv: command line arguments without the program name
    Return:
        exit status
    """
    args = make_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, stream=sys.stderr)
    program = APPS[args.app]()
    try:
        program.run(DefaultHandler(seed=args.seed))
    except (KeyboardInterrupt, EOFError) as e:
        print(f'pureio: aborted ({type(e).__name__})', file=sys.stderr)
        return 1
    return 0
