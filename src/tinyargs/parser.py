## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# tinyargs — A tiny, linear-scan parser for flags and key/value command-line options.
#

import sys
from typing import Iterator, Sequence

from .types import Argument, ArgKind, ParseResult
from .errors import ArgsError, ArgsUnrecognized, ArgsMissingValue, ArgsMissingRequired, ArgsDefinitionError
from .formatting import format_error, format_help, format_trace


class ArgParser:
    """Ordered registry of declared options, plus the state recorded by the last parse.

    Lookups by name always resolve to the first registered entry whose short or long
    name is equal to the requested one; later duplicates are unreachable.
    """

    def __init__(self, file=None, verbosity: int = 0):
        self.arguments: list[Argument] = []
        self.file = file
        self.verbosity = verbosity

    def __len__(self):
        return len(self.arguments)

    def __iter__(self) -> Iterator[Argument]:
        return iter(self.arguments)

    # Declaration ─────────────────────────────────────────────────────────────────────────────
    def add(self, short_name: str | None, long_name: str | None, kind: int,
            required: bool = False, description: str = '') -> Argument:
        if short_name is None and long_name is None:
            raise ArgsDefinitionError("Argument needs at least a short or a long name.")
        if type(kind) is not int or kind not in (ArgKind.FLAG, ArgKind.VALUE):
            raise ArgsDefinitionError(f"Unknown argument kind `{kind}` for {long_name or short_name}.",
                                      token=long_name or short_name)
        arg = Argument(short_name, long_name, kind, required=required, description=description)
        self.arguments.append(arg)
        return arg

    def free(self) -> None:
        self.arguments.clear()

    # Parsing ─────────────────────────────────────────────────────────────────────────────────
    def parse(self, args: Sequence[str], reset: bool = True) -> ParseResult:
        """Match `args` (program name excluded) against the declarations.

        The first problem stops parsing; entries matched before it stay set. With
        `reset=False` state from previous calls is kept and accumulated.
        """
        if reset: self.reset()
        try:
            self._consume(list(args))
            self._check_required()
        except ArgsError as exc:
            print(format_error(exc), file=self.file)
            return ParseResult(error=exc)
        return ParseResult()

    def parse_argv(self, argv: Sequence[str] | None = None, reset: bool = True) -> ParseResult:
        argv = sys.argv if argv is None else argv
        return self.parse(argv[1:], reset=reset)

    def reset(self) -> None:
        for arg in self.arguments:
            arg.reset()

    def _consume(self, tokens: list[str]) -> None:
        index = 0
        while index < len(tokens):
            token = tokens[index]
            if (arg := self.find(token)) is None:
                raise ArgsUnrecognized(token)
            if self.verbosity > 0:
                print(format_trace(token, arg), file=self.file)

            arg.is_set = True
            if arg.kind == ArgKind.VALUE:
                if index + 1 < len(tokens):
                    index += 1
                    arg.value = tokens[index]
                elif arg.required:
                    raise ArgsMissingValue(token, arg)
                # Optional value with nothing after it: stays set, without a value.
            index += 1

    def _check_required(self) -> None:
        for arg in self.arguments:
            if arg.required and not arg.is_set:
                raise ArgsMissingRequired(arg.display_name, arg)

    # Queries ─────────────────────────────────────────────────────────────────────────────────
    def find(self, name: str) -> Argument | None:
        return next((arg for arg in self.arguments if arg.matches(name)), None)

    def get_value(self, name: str) -> str | None:
        arg = self.find(name)
        return arg.value if arg is not None else None

    def is_flag_set(self, name: str) -> bool:
        arg = self.find(name)
        return arg.is_set if arg is not None else False

    def has(self, name: str) -> bool:
        if (arg := self.find(name)) is None:
            return False
        if arg.kind == ArgKind.FLAG:
            return arg.is_set
        return arg.value is not None

    # Help ────────────────────────────────────────────────────────────────────────────────────
    def format_help(self) -> str:
        return format_help(self.arguments)

    def print_help(self, file=None) -> None:
        print(self.format_help(), file=file if file is not None else self.file)
