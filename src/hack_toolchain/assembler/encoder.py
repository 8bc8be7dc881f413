"""
Hack Instruction Encoders
=========================

Encodes single normalized instructions into 16-character binary words.

Address-load (A) instructions:
    '0' + the operand's address as 15 binary digits, MSB first.
    A decimal operand is used directly; anything else is a symbol,
    allocated as a variable on first reference.

Compute (C) instructions:
    '111' + comp (7 bits) + dest (3 bits) + jump (3 bits).
    Fields are looked up verbatim in the tables of hack_toolchain.cpu;
    an unknown field is an error, never a default.
"""

from dataclasses import dataclass
from typing import Optional

from hack_toolchain.assembler.symbols import SymbolTable
from hack_toolchain.cpu import (
    A_INSTRUCTION_PREFIX,
    C_INSTRUCTION_PREFIX,
    COMP_TABLE,
    DEST_TABLE,
    JUMP_TABLE,
    MAX_ADDRESS,
    format_address,
)
from hack_toolchain.errors import (
    InvalidLiteralError,
    SourceLocation,
    UnknownMnemonicError,
)


# =============================================================================
# A-Instructions
# =============================================================================

def resolve_operand(
    operand: str,
    symbols: SymbolTable,
    location: Optional[SourceLocation] = None,
    source_line: Optional[str] = None,
) -> int:
    """
    Resolve an A-instruction operand to an address.

    Args:
        operand: Text after the '@' marker
        symbols: Symbol table; new variables are allocated in it
        location: Source location for error messages
        source_line: Raw source text for error messages

    Returns:
        Address in 0..32767

    Raises:
        InvalidLiteralError: Empty operand, non-decimal numeric operand,
            or literal out of 15-bit range
    """
    if not operand:
        raise InvalidLiteralError(operand, "missing operand after '@'",
                                  location, source_line)

    if operand[0].isdigit():
        if not operand.isascii() or not operand.isdigit():
            raise InvalidLiteralError(operand, "not a decimal integer",
                                      location, source_line)
        value = int(operand)
        if value > MAX_ADDRESS:
            raise InvalidLiteralError(
                operand, f"out of range 0..{MAX_ADDRESS}", location, source_line
            )
        return value

    return symbols.allocate_variable(operand, location)


def encode_a_instruction(
    text: str,
    symbols: SymbolTable,
    location: Optional[SourceLocation] = None,
    source_line: Optional[str] = None,
) -> str:
    """
    Encode a normalized A-instruction ('@' + operand).

    >>> encode_a_instruction("@21", SymbolTable())
    '0000000000010101'
    """
    address = resolve_operand(text[1:], symbols, location, source_line)
    return A_INSTRUCTION_PREFIX + format_address(address)


# =============================================================================
# C-Instructions
# =============================================================================

@dataclass(frozen=True)
class ComputeFields:
    """The three textual fields of a C-instruction."""
    dest: str
    comp: str
    jump: str


def split_c_instruction(text: str) -> ComputeFields:
    """
    Split a normalized C-instruction into dest, comp and jump.

    Uses the first '=' and the first ';'. An '=' only separates the
    destination when it comes before the ';'; otherwise it is left in
    the jump text, where the table lookup rejects it.

    >>> split_c_instruction("AM=M-1;JNE")
    ComputeFields(dest='AM', comp='M-1', jump='JNE')
    >>> split_c_instruction("0;JMP")
    ComputeFields(dest='', comp='0', jump='JMP')
    """
    semi = text.find(";")
    if semi == -1:
        body, jump = text, ""
    else:
        body, jump = text[:semi], text[semi + 1:]

    eq = body.find("=")
    if eq == -1:
        dest, comp = "", body
    else:
        dest, comp = body[:eq], body[eq + 1:]

    return ComputeFields(dest, comp, jump)


def _lookup(table, field: str, token: str,
            location: Optional[SourceLocation],
            source_line: Optional[str]) -> str:
    try:
        return table[token]
    except KeyError:
        raise UnknownMnemonicError(field, token, location, source_line) from None


def encode_c_instruction(
    text: str,
    location: Optional[SourceLocation] = None,
    source_line: Optional[str] = None,
) -> str:
    """
    Encode a normalized C-instruction.

    >>> encode_c_instruction("D=D+A")
    '1110000010010000'

    Raises:
        UnknownMnemonicError: dest, comp or jump not in its table
    """
    fields = split_c_instruction(text)
    comp = _lookup(COMP_TABLE, "comp", fields.comp, location, source_line)
    dest = _lookup(DEST_TABLE, "dest", fields.dest, location, source_line)
    jump = _lookup(JUMP_TABLE, "jump", fields.jump, location, source_line)
    return C_INSTRUCTION_PREFIX + comp + dest + jump
