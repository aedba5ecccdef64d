## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re

from .types import Argument, ArgKind
from .errors import ArgsError


def format_error(exc: ArgsError) -> str:
    return f"Error: {exc}"

def format_help_line(arg: Argument) -> str:
    if arg.short_name is not None and arg.long_name is not None:
        return f"  {arg.short_name}, {arg.long_name}: {arg.description} (Type: {arg.label})"
    # Single-name entries keep the wider gap so descriptions roughly line up.
    return f"  {arg.display_name}:     {arg.description} (Type: {arg.label})"

def format_help(arguments: list[Argument]) -> str:
    return '\n'.join(["Usage:", *(format_help_line(a) for a in arguments)])


def format_trace(token: str, arg: Argument) -> str:
    return f"  ~ : {token} → {', '.join(arg.names)} ({arg.label})"

def format_state(arg: Argument) -> str:
    """One line describing what parsing recorded for `arg`, used by the command-line tool."""
    names = ', '.join(arg.names)
    if arg.kind == ArgKind.FLAG:
        state = 'true' if arg.is_set else 'false'
    elif arg.value is not None:
        state = '"' + arg.value.replace('"', '\\"') + '"'
    else:
        state = '∅ (set)' if arg.is_set else '∅'
    return f"\033[97m{names}\033[0m\t{state}"


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))
