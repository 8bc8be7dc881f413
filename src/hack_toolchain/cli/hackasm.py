"""
hackasm - Hack Assembler Command-Line Interface
===============================================

This module implements the command-line interface for the Hack assembler.

Usage Examples
--------------
Basic assembly:
    $ hackasm Max.asm Max.hack

With listing and symbol files:
    $ hackasm Max.asm Max.hack -l Max.lst -s Max.sym

Verbose mode (logs every label, variable and encoded instruction):
    $ hackasm -v Max.asm Max.hack
"""

from pathlib import Path
from typing import Optional

import click

from hack_toolchain import __version__
from hack_toolchain.assembler import Assembler
from hack_toolchain.cli.errors import handle_cli_exception, setup_logging


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.argument(
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-l", "--listing",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate listing file",
)
@click.option(
    "-s", "--symbols",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate symbol file (labels and variables)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackasm")
def main(
    input_file: Path,
    output_file: Path,
    listing: Optional[Path],
    symbols: Optional[Path],
    verbose: bool,
) -> None:
    """
    Assemble Hack assembly source into Hack machine code.

    INPUT_FILE is the assembly source (.asm); OUTPUT_FILE receives one
    16-digit binary word per instruction (.hack).

    Nothing is written if assembly fails.

    \b
    Examples:
        hackasm Add.asm Add.hack
        hackasm -l Pong.lst Pong.asm Pong.hack
    """
    setup_logging(verbose)
    asm = Assembler(verbose=verbose)

    try:
        if verbose:
            click.echo(f"Assembling {input_file}...")

        words = asm.assemble_file(input_file)
        asm.write_hack(output_file)

        if listing:
            asm.write_listing(listing)
            if verbose:
                click.echo(f"Wrote listing to {listing}")

        if symbols:
            asm.write_symbols(symbols)
            if verbose:
                click.echo(f"Wrote symbols to {symbols}")

        if verbose:
            click.echo(f"Assembly complete: {len(words)} words written to {output_file}")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")


if __name__ == "__main__":
    main()
