"""
Hack Toolchain CPU Package
==========================

Architecture definitions shared by the assembler and the disassembler:
the C-instruction field tables, their reverse lookups, the reserved
symbol set, and word-layout constants.

Usage:
    from hack_toolchain.cpu import COMP_TABLE, PREDEFINED_SYMBOLS
"""

from hack_toolchain.cpu.hack import (
    # Word layout
    WORD_BITS,
    ADDRESS_BITS,
    MAX_ADDRESS,
    A_INSTRUCTION_PREFIX,
    C_INSTRUCTION_PREFIX,
    VARIABLE_BASE,
    # Symbols
    PREDEFINED_SYMBOLS,
    # Field tables
    DEST_TABLE,
    COMP_TABLE,
    JUMP_TABLE,
    DEST_BY_CODE,
    COMP_BY_CODE,
    JUMP_BY_CODE,
    # Helpers
    format_address,
)

__all__ = [
    "WORD_BITS",
    "ADDRESS_BITS",
    "MAX_ADDRESS",
    "A_INSTRUCTION_PREFIX",
    "C_INSTRUCTION_PREFIX",
    "VARIABLE_BASE",
    "PREDEFINED_SYMBOLS",
    "DEST_TABLE",
    "COMP_TABLE",
    "JUMP_TABLE",
    "DEST_BY_CODE",
    "COMP_BY_CODE",
    "JUMP_BY_CODE",
    "format_address",
]
