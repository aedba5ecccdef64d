## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# tinyargs — A tiny, linear-scan parser for flags and key/value command-line options.
#

import sys
from dataclasses import dataclass

import click

from .types import ArgKind
from .errors import ArgsDefinitionError
from .parser import ArgParser
from .formatting import write_without_ansi, format_state


@dataclass(frozen=True)
class CliConfig:
    verbose: int
    plain: bool


KIND_CHOICES = {'flag': ArgKind.FLAG, 'value': ArgKind.VALUE}


def _split_spec(spec: str) -> tuple[str | None, str | None, str]:
    """Split `NAMES[:DESCRIPTION]` into (short_name, long_name, description)."""
    names, _, description = spec.partition(':')
    short_name, long_name = None, None
    for name in (n.strip() for n in names.split(',')):
        if not name:
            raise click.BadParameter(f"Empty name in declaration `{spec}`.")
        if name.startswith('--'):
            if long_name is not None:
                raise click.BadParameter(f"Declaration `{spec}` has more than one long name.")
            long_name = name
        else:
            if short_name is not None:
                raise click.BadParameter(f"Declaration `{spec}` has more than one short name.")
            short_name = name
    return short_name, long_name, description.strip()


def build_parser(declarations: tuple[tuple[str, str], ...], required: tuple[str, ...], verbosity: int = 0) -> ArgParser:
    parser = ArgParser(verbosity=verbosity)
    for kind, spec in declarations:
        short_name, long_name, description = _split_spec(spec)
        try:
            parser.add(short_name, long_name, KIND_CHOICES[kind], required=False, description=description)
        except ArgsDefinitionError as exc:
            raise click.BadParameter(str(exc)) from exc

    for name in required:
        if (arg := parser.find(name)) is None:
            raise click.BadParameter(f"Cannot require `{name}`, it was never declared.")
        arg.required = True
    return parser


@click.group(context_settings={'help_option_names': ['--usage']})
@click.option('--arg', '-a', 'declarations', multiple=True, type=(click.Choice(list(KIND_CHOICES)), str),
              help='Declare an option as KIND NAMES[:DESCRIPTION], e.g. `value -n,--name:Your name`.')
@click.option('--required', '-r', multiple=True, help='Mark the declaration owning NAME as required.')
@click.option('--verbose', '-v', default=0, count=True, help='Trace every matched token.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.pass_context
def cli(ctx: click.Context, declarations, required, verbose: int, plain: bool) -> None:
    ctx.ensure_object(dict)
    ctx.obj['config'] = config = CliConfig(verbose=verbose, plain=plain)
    if config.plain:
        writer = write_without_ansi(sys.stdout.write)
        sys.stdout.write, sys.stderr.write = writer, writer
    ctx.obj['parser'] = build_parser(declarations, required, verbosity=config.verbose)


@cli.command('check', context_settings={'ignore_unknown_options': True, 'help_option_names': []})
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def check(ctx: click.Context, tokens: tuple[str, ...]) -> None:
    parser: ArgParser = ctx.obj['parser']
    result = parser.parse(tokens)
    if not result:
        print(f'\033[30;43m PARSE ERROR. \033[0m {type(result.error).__name__}', file=sys.stderr)
        parser.print_help()
        ctx.exit(1)

    for arg in parser:
        print(format_state(arg))
    ctx.exit(0)


@cli.command('help')
@click.pass_context
def show_help(ctx: click.Context) -> None:
    ctx.obj['parser'].print_help()


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='tinyargs')


if __name__ == "__main__":
    main()
