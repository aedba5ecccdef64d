## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from dataclasses import dataclass

from .errors import ArgsError


class ArgKind:
    FLAG = 1
    VALUE = 2


KIND_LABELS: dict[int, str] = {
    ArgKind.FLAG: 'Flag',
    ArgKind.VALUE: 'Key=Value',
}


@dataclass
class Argument:
    short_name: str | None
    long_name: str | None
    kind: int
    required: bool = False
    description: str = ''
    # Runtime state, filled in by the parser.
    is_set: bool = False
    value: str | None = None

    def matches(self, name: str) -> bool:
        return name in (self.short_name, self.long_name)

    @property
    def names(self) -> list[str]:
        return [n for n in (self.short_name, self.long_name) if n is not None]

    @property
    def display_name(self) -> str:
        return self.long_name if self.long_name is not None else self.short_name

    @property
    def label(self) -> str:
        return KIND_LABELS[self.kind]

    def reset(self) -> None:
        self.is_set, self.value = False, None


@dataclass(frozen=True)
class ParseResult:
    error: ArgsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self):
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error
