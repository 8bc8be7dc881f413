"""
Hack Assembler
==============

This package translates Hack assembly source into Hack machine words,
one 16-character '0'/'1' string per instruction.

Main Components
---------------
- **Assembler**: Main class; owns file I/O and drives assembly
- **Lexer**: Normalizes and classifies source lines
- **CodeGenerator**: Runs the two passes and builds the listing
- **SymbolTable**: Reserved symbols, labels and variables
- **encoder**: A- and C-instruction encoders

Assembly Process
----------------
1. **Lexing**: strip comments ("//") and whitespace, classify each line
   as a label, A-instruction or C-instruction
2. **Pass 1**: bind every label to the address of the next instruction
3. **Pass 2**: encode each instruction, allocating variables from
   address 16 in order of first reference

Example Usage
-------------
>>> from hack_toolchain.assembler import assemble
>>> assemble("@END\\n0;JMP\\n(END)")
['0000000000000010', '1110101010000111']
"""

from hack_toolchain.assembler.assembler import Assembler, assemble, assemble_file
from hack_toolchain.assembler.lexer import (
    Lexer,
    LineType,
    SourceLine,
    classify_line,
    normalize_line,
    scan_source,
)
from hack_toolchain.assembler.symbols import Symbol, SymbolKind, SymbolTable
from hack_toolchain.assembler.encoder import (
    ComputeFields,
    encode_a_instruction,
    encode_c_instruction,
    resolve_operand,
    split_c_instruction,
)
from hack_toolchain.assembler.codegen import CodeGenerator, ListingEntry

__all__ = [
    # Main class and functions
    "Assembler",
    "assemble",
    "assemble_file",
    # Lexer
    "Lexer",
    "LineType",
    "SourceLine",
    "classify_line",
    "normalize_line",
    "scan_source",
    # Symbols
    "Symbol",
    "SymbolKind",
    "SymbolTable",
    # Encoders
    "ComputeFields",
    "encode_a_instruction",
    "encode_c_instruction",
    "resolve_operand",
    "split_c_instruction",
    # Code generator
    "CodeGenerator",
    "ListingEntry",
]
