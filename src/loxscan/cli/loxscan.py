"""
loxscan - Token Dump Command-Line Interface
===========================================

Scans a Lox source file and prints one token per line. Intended for
inspecting what a parser will receive.

Usage Examples
--------------
Dump tokens:
    $ loxscan main.lox

With source locations:
    $ loxscan main.lox --show-locations

Stop at the first malformed lexeme:
    $ loxscan main.lox --strict

Verbose mode (also enables debug logging):
    $ loxscan -v main.lox
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import click

from loxscan import __version__
from loxscan.cli.errors import ExitCode, handle_cli_exception
from loxscan.scanner import Number, Scanner, ScannerOptions, Token, error_for_token


# =============================================================================
# Formatting
# =============================================================================

def format_token(token: Token, show_locations: bool = False) -> str:
    """
    Render a token as a single output line.

    Examples:
        KEYWORD var
        NUMBER 12.5
        main.lox:1:5  IDENTIFIER answer
    """
    parts = [token.type.name]

    if isinstance(token.value, Number):
        parts.append(str(token.value))
    elif isinstance(token.value, Enum):
        parts.append(token.value.name.lower() if token.is_error() else token.value.value)
    elif token.value is not None:
        parts.append(repr(token.value))

    line = " ".join(parts)
    if show_locations and token.location is not None:
        line = f"{token.location}  {line}"
    return line


def _source_line(source: bytes, line: int) -> str:
    """Return the text of a 1-indexed line for error context."""
    lines = source.split(b"\n")
    if 1 <= line <= len(lines):
        return lines[line - 1].decode("utf-8", errors="replace")
    return ""


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-l", "--show-locations",
    is_flag=True,
    help="Prefix each token with file:line:column",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Stop at the first malformed lexeme (also enabled by LOXSCAN_STRICT)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="loxscan")
def main(
    input_file: Path,
    output: Optional[Path],
    show_locations: bool,
    strict: bool,
    verbose: bool,
) -> None:
    """
    Print the tokens of a Lox source file.

    INPUT_FILE is the source file to scan.

    Whitespace and // comments are dropped. Malformed lexemes are printed
    as ERROR tokens and reported on stderr; the exit code is 1 if any
    were found.

    \b
    Examples:
        loxscan main.lox              # One token per line
        loxscan -l main.lox           # With file:line:column
        loxscan --strict main.lox     # Fail on the first error
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    options = ScannerOptions.from_env()
    options.filename = str(input_file)
    options.strict = options.strict or strict

    try:
        source = input_file.read_bytes()

        if verbose:
            click.echo(f"Scanning {input_file} ({len(source)} bytes)...", err=True)

        tokens = Scanner(source, options).scan_tokens()
        result = "".join(f"{format_token(t, show_locations)}\n" for t in tokens)

        if output:
            output.write_text(result, encoding="utf-8")
            if verbose:
                click.echo(f"Output written to: {output}", err=True)
        else:
            click.echo(result, nl=False)

    except Exception as e:
        handle_cli_exception(e, verbose)

    errors = [t for t in tokens if t.is_error()]
    for token in errors:
        line = _source_line(source, token.location.line)
        click.echo(str(error_for_token(token, line)), err=True)

    if verbose:
        click.echo(f"Tokens: {len(tokens)}, errors: {len(errors)}", err=True)

    if errors:
        sys.exit(ExitCode.SCAN_ERROR)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
