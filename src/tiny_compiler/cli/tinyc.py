"""
tinyc - Compiler Command-Line Interface
=======================================

Command-line wrapper around the compiler. It reads a source file (or
stdin), compiles it and writes the result to stdout or a file.

Usage Examples
--------------
Compile to stdout:
    $ tinyc program.lisp

With output file:
    $ tinyc program.lisp -o program.c

From stdin:
    $ echo '(add 2 2)' | tinyc

Inspect intermediate stages:
    $ tinyc --tokens program.lisp
    $ tinyc --ast program.lisp
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

import click

from tiny_compiler import __version__
from tiny_compiler.compiler import TinyCompiler, CompilerOptions, Stage
from tiny_compiler.traverser import ASTPrinter
from tiny_compiler.cli.errors import handle_cli_exception

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Send DEBUG records to stderr when verbose output is requested."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s: %(message)s",
            stream=sys.stderr,
        )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.File("r", encoding="utf-8"),
    default="-",
    required=False,
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print tokens and exit (for debugging)",
)
@click.option(
    "--ast",
    is_flag=True,
    help="Print the source syntax tree and exit (for debugging)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="tinyc")
def main(
    input_file: TextIO,
    output: Optional[Path],
    tokens: bool,
    ast: bool,
    verbose: bool,
) -> None:
    """
    Compile parenthesized-call source code to C-like call syntax.

    INPUT_FILE is the source file to compile; omit it or pass '-' to
    read from stdin.

    \b
    Examples:
        tinyc program.lisp                # Print result to stdout
        tinyc program.lisp -o program.c   # Write result to a file
        tinyc --tokens program.lisp       # Dump tokens
        tinyc --ast program.lisp          # Dump source syntax tree

    \b
    Supported language:
        - Calls: (name arg arg ...)
        - Numbers: 42
        - Strings: "text"
    """
    setup_logging(verbose)

    if tokens:
        stop_after = Stage.SCAN
    elif ast:
        stop_after = Stage.PARSE
    else:
        stop_after = Stage.GENERATE

    try:
        source = input_file.read()
        filename = input_file.name

        logger.debug(f"Read {len(source)} characters from {filename}")

        compiler = TinyCompiler(CompilerOptions(stop_after=stop_after))
        result = compiler.compile_source(source, filename)

        # Dump modes go to the same destination as compiled output
        if tokens:
            text = "\n".join(
                f"{token.type.name:<8} {token.value!r}" for token in result.tokens
            )
        elif ast:
            text = ASTPrinter().print(result.ast)
        else:
            text = result.output

        if output is None:
            click.echo(text)
            return

        output.write_text(text, encoding="utf-8")
        logger.debug(f"Wrote {len(text)} characters to {output}")
        click.echo(f"Compiled {filename} -> {output}", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
