from .console import read_line, write_line  # noqa
from .defaults import DefaultHandler  # noqa
from .errors import *  # noqa
from .functions import *  # noqa
from .handler import *  # noqa
from .immutable import Immutable  # noqa
from .interpreter import Interpreter, run  # noqa
from .program import *  # noqa
from .random import random_int  # noqa
