"""
peekscan - Character Run Scanner Command-Line Interface
=======================================================

Splits a text file into maximal runs of one character class (words,
numbers, whitespace, newlines, punctuation) and prints where each run
starts. Handy for checking how a hand-written lexer will see a file.

Usage Examples
--------------
Scan a file:
    $ peekscan notes.txt

Include whitespace runs:
    $ peekscan notes.txt --whitespace

First 20 runs only:
    $ peekscan notes.txt --max-runs 20

Latin-1 input, output to file:
    $ peekscan legacy.txt --encoding latin-1 -o runs.txt

Output Format
-------------
One line per run, with a 1-based column:
    1:1   WORD        'hello'
    1:7   PUNCT       ','

Copyright (c) 2025-2026 peekcursor contributors
"""

import dataclasses
import logging
from pathlib import Path
from typing import Optional

import click

from peekcursor import __version__
from peekcursor.cli.errors import handle_cli_exception
from peekcursor.config import get_default_config
from peekcursor.scanner import RunScanner, read_source


logger = logging.getLogger(__name__)


def format_run(run) -> str:
    """Format one run as 'line:col  KIND  text' with a 1-based column."""
    position = f"{run.line}:{run.column + 1}"
    return f"{position:<6}{run.kind.name:<12}{run.text!r}"


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
    "-e", "--encoding",
    type=str,
    default=None,
    help="Input text encoding (default: utf-8 or $PEEKCURSOR_ENCODING)",
)
@click.option(
    "--whitespace/--no-whitespace",
    default=None,
    help="Report whitespace runs (default: off)",
)
@click.option(
    "-n", "--max-runs",
    type=click.IntRange(min=0),
    default=None,
    help="Stop after this many runs (default: all)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="peekscan")
def main(
    input_file: Path,
    output: Optional[Path],
    encoding: Optional[str],
    whitespace: Optional[bool],
    max_runs: Optional[int],
    verbose: bool,
) -> None:
    """
    Split a text file into character-class runs.

    INPUT_FILE is the text file to scan.

    Each run is printed with the line and column where it starts.
    Whitespace runs are skipped unless --whitespace is given.

    Examples:

        # Scan a source file
        peekscan program.c

        # Show whitespace too, first 50 runs
        peekscan program.c --whitespace --max-runs 50
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = get_default_config()
    overrides = {}
    if encoding is not None:
        overrides["encoding"] = encoding
    if whitespace is not None:
        overrides["show_whitespace"] = whitespace
    if max_runs is not None:
        overrides["max_runs"] = max_runs
    config = dataclasses.replace(config, **overrides)

    try:
        text = read_source(input_file, config.encoding)
        if verbose:
            click.echo(f"Input file: {input_file} ({len(text)} characters)", err=True)

        scanner = RunScanner(text, str(input_file), config)
        lines = [format_run(run) for run in scanner.scan()]
        logger.debug(f"Scanned {len(lines)} runs, stopped at {scanner.cursor.location}")

        result = "\n".join(lines) + "\n" if lines else ""

        if output:
            output.write_text(result, encoding="utf-8")
            if verbose:
                click.echo(f"Output written to: {output}", err=True)
        else:
            click.echo(result, nl=False)

    except Exception as e:
        handle_cli_exception(e, verbose)

    if verbose:
        click.echo(f"Runs reported: {len(lines)}", err=True)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
