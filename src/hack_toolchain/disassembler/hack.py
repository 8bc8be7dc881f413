"""
Hack Disassembler
=================

Decodes Hack machine words back into assembly text. This is the inverse
of the assembler's code generation, minus symbol names: A-instructions
come back as numeric addresses unless a symbol table is supplied.

Word Layout:
    0vvv vvvv vvvv vvvv     @v
    111a cccc ccdd djjj     dest=comp;jump

Bits 13-14 of a C-instruction are unused and ignored on decode.

Usage:
    disasm = HackDisassembler()
    for instr in disasm.disassemble(words):
        print(instr)
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from hack_toolchain.cpu import (
    ADDRESS_BITS,
    COMP_BY_CODE,
    DEST_BY_CODE,
    JUMP_BY_CODE,
    WORD_BITS,
)
from hack_toolchain.errors import DisassemblerError


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class DisassembledInstruction:
    """
    Represents a single disassembled Hack instruction.

    Attributes:
        address: Instruction address (index in ROM)
        word: The 16-character binary word
        text: Assembly text (e.g. "@21", "D=D+A", "0;JMP")
        is_address: True for A-instructions
        value: Decoded 15-bit value for A-instructions, else None
        comment: Optional annotation (symbol name, unknown encoding)
    """
    address: int
    word: str
    text: str
    is_address: bool
    value: Optional[int] = None
    comment: str = ""

    def __str__(self) -> str:
        """Format as listing line: ADDRESS: WORD  TEXT"""
        if self.comment:
            return f"{self.address:5d}: {self.word}  {self.text:<16} // {self.comment}"
        return f"{self.address:5d}: {self.word}  {self.text}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "address": self.address,
            "word": self.word,
            "text": self.text,
            "is_address": self.is_address,
            "value": self.value,
            "comment": self.comment,
        }


# =============================================================================
# Hack Disassembler
# =============================================================================

class HackDisassembler:
    """
    Disassembler for Hack machine words.

    Uses the reverse field tables from hack_toolchain.cpu. A comp code
    outside the instruction set renders as "???" with a comment rather
    than failing, so the rest of a ROM image can still be inspected.
    """

    def __init__(self, symbol_table: Optional[dict[int, str]] = None):
        """
        Args:
            symbol_table: Optional dict mapping addresses to symbol names,
                used to annotate A-instructions.
        """
        self._symbol_table = dict(symbol_table or {})

    def disassemble_one(self, word: str, address: int = 0,
                        line: Optional[int] = None) -> DisassembledInstruction:
        """
        Decode a single word.

        Raises:
            DisassemblerError: If word is not 16 binary digits
        """
        word = word.strip()
        if len(word) != WORD_BITS or set(word) - {"0", "1"}:
            raise DisassemblerError(word, line)

        if word[0] == "0":
            value = int(word[1:], 2)
            return DisassembledInstruction(
                address=address,
                word=word,
                text=f"@{value}",
                is_address=True,
                value=value,
                comment=self._symbol_table.get(value, ""),
            )

        comp_bits = word[3:10]
        dest = DEST_BY_CODE[word[10:13]]
        jump = JUMP_BY_CODE[word[13:16]]
        comp = COMP_BY_CODE.get(comp_bits)

        comment = ""
        if comp is None:
            comp = "???"
            comment = f"unknown computation {comp_bits}"
        if word[:3] != "111":
            comment = (comment + "; " if comment else "") + "non-standard prefix bits"

        text = comp
        if dest:
            text = f"{dest}={text}"
        if jump:
            text = f"{text};{jump}"

        return DisassembledInstruction(
            address=address,
            word=word,
            text=text,
            is_address=False,
            comment=comment,
        )

    def disassemble(self, words: Iterable[str], start_address: int = 0,
                    count: Optional[int] = None) -> list[DisassembledInstruction]:
        """
        Decode a sequence of words, skipping blank lines.

        Args:
            words: Binary words (typically the lines of a .hack file)
            start_address: Address of the first word
            count: Maximum number of instructions (None = all)
        """
        result = []
        address = start_address
        for number, word in enumerate(words, start=1):
            if count is not None and len(result) >= count:
                break
            if not word.strip():
                continue
            result.append(self.disassemble_one(word, address, number))
            address += 1
        return result


def decode_address(word: str) -> int:
    """Return the low 15 bits of an A-instruction word as an integer."""
    return int(word[-ADDRESS_BITS:], 2)
