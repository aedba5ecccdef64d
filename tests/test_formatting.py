## tinyargs — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import io

from tinyargs.types import ArgKind
from tinyargs.parser import ArgParser
from tinyargs.errors import ArgsUnrecognized, ArgsMissingValue, ArgsMissingRequired
from tinyargs.formatting import format_error, format_state, write_without_ansi


def _sample_parser():
    parser = ArgParser()
    parser.add('-h', '--help', ArgKind.FLAG, False, 'Show this help.')
    parser.add('-n', None, ArgKind.VALUE, True, 'Name to greet.')
    parser.add(None, '--color', ArgKind.VALUE, False, 'Output color.')
    return parser


def test_print_help_renders_every_declaration(capsys):
    _sample_parser().print_help()
    assert capsys.readouterr().out.splitlines() == [
        "Usage:",
        "  -h, --help: Show this help. (Type: Flag)",
        "  -n:     Name to greet. (Type: Key=Value)",
        "  --color:     Output color. (Type: Key=Value)",
    ]


def test_print_help_ignores_parse_state(capsys):
    parser = _sample_parser()
    parser.print_help()
    before = capsys.readouterr().out
    parser.parse(['--help', '-n', 'x', '--color', 'red'])
    capsys.readouterr()
    parser.print_help()
    after = capsys.readouterr().out
    assert before == after
    assert len(after.splitlines()) == 1 + len(parser)


def test_print_help_to_stream():
    out = io.StringIO()
    _sample_parser().print_help(file=out)
    assert out.getvalue().startswith("Usage:\n  -h, --help:")


def test_parser_file_receives_diagnostics():
    out = io.StringIO()
    parser = ArgParser(file=out)
    parser.add('-n', '--name', ArgKind.VALUE, True)
    assert not parser.parse(['-x'])
    assert out.getvalue() == "Error: Unrecognized argument -x\n"


def test_format_error_messages():
    assert format_error(ArgsUnrecognized('--x')) == "Error: Unrecognized argument --x"
    assert format_error(ArgsMissingValue('-n')) == "Error: Missing value for argument -n"
    assert format_error(ArgsMissingRequired('--name')) == "Error: Missing required argument --name"


def test_format_state_lines():
    parser = _sample_parser()
    parser.parse(['-h', '-n', 'Al "x"', '--color'])
    plain = [write_without_ansi(lambda s: s)(format_state(a)) for a in parser]
    assert plain == ['-h, --help\ttrue', '-n\t"Al \\"x\\""', '--color\t∅ (set)']


def test_write_without_ansi_strips_codes():
    captured = []
    write = write_without_ansi(captured.append)
    write("\033[30;43m PARSE ERROR. \033[0m done")
    assert captured == [" PARSE ERROR.  done"]
