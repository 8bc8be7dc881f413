"""
hackdisasm - Hack Disassembler Command-Line Interface
=====================================================

Decodes a .hack file back into Hack assembly.

Usage Examples
--------------
Disassemble to stdout:
    $ hackdisasm Max.hack

Output to file:
    $ hackdisasm Max.hack -o Max.dis

Plain assembly without addresses and words:
    $ hackdisasm Max.hack --bare
"""

from pathlib import Path
from typing import Optional

import click

from hack_toolchain import __version__
from hack_toolchain.disassembler import HackDisassembler
from hack_toolchain.cli.errors import handle_cli_exception, setup_logging
from hack_toolchain.errors import FileAccessError


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-a", "--address",
    type=int,
    default=0,
    help="Address of the first word. Default: 0",
)
@click.option(
    "-c", "--count",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum number of instructions to disassemble (default: all)",
)
@click.option(
    "--bare",
    is_flag=True,
    help="Emit assembly text only, one instruction per line",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackdisasm")
def main(
    input_file: Path,
    output: Optional[Path],
    address: int,
    count: Optional[int],
    bare: bool,
    verbose: bool,
) -> None:
    """
    Disassemble Hack machine code.

    INPUT_FILE is a .hack file with one 16-digit binary word per line.
    """
    setup_logging(verbose)

    try:
        try:
            words = input_file.read_text().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(str(input_file), str(e)) from e

        disasm = HackDisassembler()
        instructions = disasm.disassemble(words, start_address=address, count=count)

        if bare:
            text = "\n".join(instr.text for instr in instructions)
        else:
            text = "\n".join(str(instr) for instr in instructions)

        if output:
            try:
                output.write_text(text + "\n")
            except OSError as e:
                raise FileAccessError(str(output), str(e)) from e
            if verbose:
                click.echo(f"Wrote {len(instructions)} instructions to {output}")
        else:
            click.echo(text)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Disassembly")


if __name__ == "__main__":
    main()
