## tinyargs — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Argument, ArgKind, ParseResult
from .errors import *
from .parser import ArgParser

FLAG, VALUE = ArgKind.FLAG, ArgKind.VALUE

_PARSER = ArgParser()

def create(file=None, verbosity: int = 0) -> ArgParser:
    return ArgParser(file=file, verbosity=verbosity)

def __getattr__(name):
    return getattr(_PARSER, name)
