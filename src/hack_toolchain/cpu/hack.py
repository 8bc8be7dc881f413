"""
Hack Instruction Set Definitions
================================

Field encodings and reserved symbols for the 16-bit Hack computer.

Instruction Formats
-------------------
A-instruction (address load):

    0vvv vvvv vvvv vvvv     v = 15-bit unsigned address

C-instruction (compute):

    111a cccc ccdd djjj     a+c = comp (7 bits), d = dest, j = jump

The 'a' bit selects between the A register (0) and memory M (1) as the
ALU's second operand, which is why every comp code that mentions M
starts with 1.

Memory Map
----------
| Range         | Use                          |
|---------------|------------------------------|
| 0 - 15        | Virtual registers R0-R15     |
| 16 - 16383    | Variables (allocated from 16)|
| 16384 - 24575 | Screen memory map            |
| 24576         | Keyboard                     |

All tables are read-only mappings built once at import.
"""

from types import MappingProxyType


# =============================================================================
# Word Layout
# =============================================================================

WORD_BITS = 16
ADDRESS_BITS = 15
MAX_ADDRESS = (1 << ADDRESS_BITS) - 1  # 32767

A_INSTRUCTION_PREFIX = "0"
C_INSTRUCTION_PREFIX = "111"

# Variables are allocated upward from here
VARIABLE_BASE = 16


# =============================================================================
# Predefined Symbols
# =============================================================================

def _build_predefined_symbols() -> dict[str, int]:
    symbols = {
        "SP": 0,
        "LCL": 1,
        "ARG": 2,
        "THIS": 3,
        "THAT": 4,
    }
    # R0-R4 alias SP..THAT; both map to the same addresses
    for i in range(16):
        symbols[f"R{i}"] = i
    symbols["SCREEN"] = 16384
    symbols["KBD"] = 24576
    return symbols


PREDEFINED_SYMBOLS = MappingProxyType(_build_predefined_symbols())


# =============================================================================
# C-Instruction Field Tables
# =============================================================================

DEST_TABLE = MappingProxyType({
    "":    "000",
    "M":   "001",
    "D":   "010",
    "MD":  "011",
    "A":   "100",
    "AM":  "101",
    "AD":  "110",
    "AMD": "111",
})

COMP_TABLE = MappingProxyType({
    # a = 0: operate on A
    "0":   "0101010",
    "1":   "0111111",
    "-1":  "0111010",
    "D":   "0001100",
    "A":   "0110000",
    "!D":  "0001101",
    "!A":  "0110001",
    "-D":  "0001111",
    "-A":  "0110011",
    "D+1": "0011111",
    "A+1": "0110111",
    "D-1": "0001110",
    "A-1": "0110010",
    "D+A": "0000010",
    "D-A": "0010011",
    "A-D": "0000111",
    "D&A": "0000000",
    "D|A": "0010101",
    # a = 1: operate on M
    "M":   "1110000",
    "!M":  "1110001",
    "-M":  "1110011",
    "M+1": "1110111",
    "M-1": "1110010",
    "D+M": "1000010",
    "D-M": "1010011",
    "M-D": "1000111",
    "D&M": "1000000",
    "D|M": "1010101",
})

JUMP_TABLE = MappingProxyType({
    "":    "000",
    "JGT": "001",
    "JEQ": "010",
    "JGE": "011",
    "JLT": "100",
    "JNE": "101",
    "JLE": "110",
    "JMP": "111",
})


# =============================================================================
# Reverse Tables (used by the disassembler)
# =============================================================================

DEST_BY_CODE = MappingProxyType({code: name for name, code in DEST_TABLE.items()})
COMP_BY_CODE = MappingProxyType({code: name for name, code in COMP_TABLE.items()})
JUMP_BY_CODE = MappingProxyType({code: name for name, code in JUMP_TABLE.items()})


# =============================================================================
# Lookup Helpers
# =============================================================================

def format_address(value: int) -> str:
    """Return value as a zero-padded 15-digit binary string."""
    return format(value, f"0{ADDRESS_BITS}b")
