"""
Hack Toolchain - Assembler and Disassembler for the Hack Computer
=================================================================

This package translates Hack assembly language into the 16-bit machine
code of the Hack computer, and decodes machine code back into assembly.

Main Components
---------------
- **assembler**: Two-pass Hack assembler (hackasm)
    Converts assembly source files (.asm) to machine code (.hack)

- **disassembler**: Hack disassembler (hackdisasm)
    Decodes .hack files for inspection

- **cpu**: Instruction field tables and reserved symbols

Quick Start
-----------
Assemble a program:
    >>> from hack_toolchain import Assembler
    >>> asm = Assembler()
    >>> words = asm.assemble_file("Max.asm")
    >>> asm.write_hack("Max.hack")

Or use the command-line tools:
    $ hackasm Max.asm Max.hack
    $ hackdisasm Max.hack

Version History
---------------
1.0.0 - Initial release with assembler and disassembler
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from hack_toolchain.assembler import Assembler, SymbolTable, assemble, assemble_file
from hack_toolchain.disassembler import HackDisassembler
from hack_toolchain.errors import (
    HackError,
    SourceLocation,
    AssemblerError,
    MalformedLabelError,
    InvalidLiteralError,
    UnknownMnemonicError,
    DuplicateSymbolError,
    FileAccessError,
    DisassemblerError,
)

__all__ = [
    "__version__",
    # Assembler
    "Assembler",
    "SymbolTable",
    "assemble",
    "assemble_file",
    # Disassembler
    "HackDisassembler",
    # Exception hierarchy
    "HackError",
    "SourceLocation",
    "AssemblerError",
    "MalformedLabelError",
    "InvalidLiteralError",
    "UnknownMnemonicError",
    "DuplicateSymbolError",
    "FileAccessError",
    "DisassemblerError",
]
