"""
Hack Assembler - Main Interface
===============================

This module provides the main Assembler class, the primary interface for
assembling Hack source code. It coordinates the lexer and the code
generator and owns all file I/O.

Example Usage
-------------
>>> from hack_toolchain.assembler import Assembler
>>>
>>> asm = Assembler()
>>> words = asm.assemble_string('''
...     @2
...     D=A
...     @3
...     D=D+A
...     @0
...     M=D
... ''')
>>> words[3]
'1110000010010000'
>>> asm.write_hack("Add.hack")

Command-Line Usage
------------------
    $ hackasm Add.asm Add.hack -l Add.lst -s Add.sym

Output is only written once the whole program has assembled, so a failed
run never leaves a partial .hack file behind.
"""

from pathlib import Path
import logging
from typing import Optional

from hack_toolchain.assembler.codegen import CodeGenerator
from hack_toolchain.assembler.lexer import Lexer
from hack_toolchain.errors import FileAccessError

logger = logging.getLogger(__name__)


class Assembler:
    """
    Main Hack assembler class.

    Attributes:
        verbose: If True, log output-file writes at INFO level instead of DEBUG
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the assembler.

        Args:
            verbose: Report output-file writes at INFO level
        """
        self._verbose = verbose
        self._codegen = CodeGenerator()
        self._source_file: Optional[Path] = None
        self._assembled = False

    def _progress(self, message: str) -> None:
        logger.log(logging.INFO if self._verbose else logging.DEBUG, message)

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble_string(self, source: str, filename: str = "<input>") -> list[str]:
        """
        Assemble source code from a string.

        Args:
            source: Hack assembly source
            filename: Virtual filename for error messages

        Returns:
            Machine words in program order

        Raises:
            AssemblerError: If any line is malformed
        """
        self._assembled = False
        logger.info(f"Assembling started: {filename}")

        lines = Lexer(source, filename).scan()
        words = self._codegen.generate(lines)

        self._assembled = True
        logger.info(f"Assembling ended: {len(words)} words")
        return words

    def assemble_file(self, filepath: str | Path) -> list[str]:
        """
        Assemble source code from a file.

        Args:
            filepath: Path to the .asm source file

        Returns:
            Machine words in program order

        Raises:
            FileAccessError: If the source file cannot be read
            AssemblerError: If assembly fails
        """
        filepath = Path(filepath)
        self._source_file = filepath

        try:
            source = filepath.read_text()
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(str(filepath), _describe(e)) from e

        return self.assemble_string(source, str(filepath))

    # =========================================================================
    # Output Methods
    # =========================================================================

    def get_words(self) -> list[str]:
        """Return the machine words from the last assembly."""
        return self._codegen.get_words()

    def get_symbols(self) -> dict[str, int]:
        """
        Get the symbol table.

        Returns:
            Dictionary mapping every symbol (reserved, labels, variables)
            to its address
        """
        return self._codegen.get_symbols()

    def get_listing(self) -> str:
        """Return the assembly listing as a string."""
        return self._codegen.get_listing()

    def get_source_file(self) -> Optional[Path]:
        """Return the path of the last assembled file, if any."""
        return self._source_file

    def write_hack(self, filepath: str | Path) -> None:
        """
        Write machine words, one per line, newline-terminated.

        Args:
            filepath: Output file path
        """
        self._check_assembled()
        text = "".join(f"{word}\n" for word in self._codegen.get_words())
        _write_text(filepath, text)
        self._progress(f"Wrote {len(self._codegen.get_words())} words to {filepath}")

    def write_listing(self, filepath: str | Path) -> None:
        """Write the assembly listing file."""
        self._check_assembled()
        _write_text(filepath, self._codegen.get_listing())
        self._progress(f"Wrote listing to {filepath}")

    def write_symbols(self, filepath: str | Path) -> None:
        """Write the user symbol table file."""
        self._check_assembled()
        _write_text(filepath, self._codegen.get_symbol_file())
        self._progress(f"Wrote symbols to {filepath}")

    def _check_assembled(self) -> None:
        if not self._assembled:
            raise RuntimeError("nothing assembled yet")


# =============================================================================
# File Helpers
# =============================================================================

def _describe(error: Exception) -> str:
    if isinstance(error, OSError) and error.strerror:
        return error.strerror
    return str(error)


def _write_text(filepath: str | Path, text: str) -> None:
    try:
        Path(filepath).write_text(text)
    except OSError as e:
        raise FileAccessError(str(filepath), _describe(e)) from e


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(source: str, filename: str = "<input>") -> list[str]:
    """
    Convenience function to assemble source code.

    Args:
        source: Hack assembly source
        filename: Virtual filename for errors

    Returns:
        Machine words in program order

    Raises:
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_string(source, filename)


def assemble_file(filepath: str | Path) -> list[str]:
    """
    Convenience function to assemble a file.

    Raises:
        FileAccessError: If the file cannot be read
        AssemblerError: If assembly fails
    """
    return Assembler().assemble_file(filepath)
