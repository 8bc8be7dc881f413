"""
Hack Code Generator
===================

This module turns classified source lines into Hack machine words.
It implements the two-pass assembly process:

Pass 1 (Label Resolution)
-------------------------
- Scan every line in source order with an instruction counter at 0
- A label declaration binds its name to the current counter and does
  not advance it
- Every A- or C-instruction advances the counter by one

Pass 2 (Code Generation)
------------------------
- Skip label declarations
- Encode A-instructions, allocating variables on first reference
- Encode C-instructions via the dest/comp/jump tables
- Collect words in source order

Pass 2 only starts once pass 1 has seen the whole input, so labels can
be referenced before or after their declaration.

Output Formats
--------------
- Machine words: one 16-character '0'/'1' string per instruction
- Listing: address, word, line number and source for every statement,
  followed by the user symbol table
- Symbol file: "NAME ADDRESS" per user symbol
"""

from dataclasses import dataclass
import logging
from typing import Optional

from hack_toolchain.assembler.encoder import (
    encode_a_instruction,
    encode_c_instruction,
)
from hack_toolchain.assembler.lexer import LineType, SourceLine
from hack_toolchain.assembler.symbols import SymbolKind, SymbolTable
from hack_toolchain.errors import DuplicateSymbolError, MalformedLabelError

logger = logging.getLogger(__name__)


# =============================================================================
# Listing Entry
# =============================================================================

@dataclass
class ListingEntry:
    """
    One row of the assembly listing.

    Attributes:
        address: Instruction address (for labels, the address they bind to)
        word: Encoded word, or None for label declarations
        line: Source line number (1-based)
        text: Normalized source text
    """
    address: int
    word: Optional[str]
    line: int
    text: str

    def __str__(self) -> str:
        word = self.word if self.word is not None else ""
        return f"{self.address:5d}  {word:16s}  {self.line:5d}  {self.text}"


# =============================================================================
# Code Generator
# =============================================================================

class CodeGenerator:
    """
    Generates Hack machine words from classified source lines.

    The code generator maintains:
    - The symbol table for the current run
    - The emitted word list
    - Listing entries for optional listing output

    Each call to generate() starts from a fresh symbol table, so running
    it twice on the same lines yields identical words.
    """

    def __init__(self):
        self._symbols = SymbolTable()
        self._words: list[str] = []
        self._listing: list[ListingEntry] = []

    def generate(self, lines: list[SourceLine]) -> list[str]:
        """
        Assemble classified lines into machine words.

        Args:
            lines: Lines from the lexer (blank lines are ignored)

        Returns:
            Encoded words in source order

        Raises:
            AssemblerError: On the first malformed line; no words are
                returned in that case
        """
        self._symbols = SymbolTable()
        self._words = []
        self._listing = []

        logger.info("First pass started")
        count = self._pass1(lines)
        logger.info(f"First pass complete: {count} instructions, "
                    f"{len(self._symbols.entries(SymbolKind.LABEL))} labels")

        logger.info("Second pass started")
        words = self._pass2(lines)
        logger.info(f"Second pass complete: {len(words)} words, "
                    f"{len(self._symbols.entries(SymbolKind.VARIABLE))} variables")

        self._words = words
        return list(words)

    # =========================================================================
    # Pass 1
    # =========================================================================

    def _pass1(self, lines: list[SourceLine]) -> int:
        """
        First pass: bind labels to instruction addresses.

        Returns:
            Number of instructions in the program
        """
        counter = 0
        for line in lines:
            if line.type is LineType.LABEL:
                self._define_label(line, counter)
            elif line.is_instruction:
                counter += 1
        return counter

    def _define_label(self, line: SourceLine, address: int) -> None:
        """Validate a label declaration and bind it."""
        text = line.text
        name = text[1:-1]
        if (len(text) < 2 or not text.endswith(")")
                or not name or "(" in name or ")" in name):
            raise MalformedLabelError(text, line.location, line.raw)

        existing = self._symbols.get(name)
        if existing is not None and existing.kind is SymbolKind.LABEL:
            raise DuplicateSymbolError(
                name,
                location=line.location,
                original_location=existing.location,
                source_line=line.raw,
            )

        self._symbols.define_label(name, address, line.location)

    # =========================================================================
    # Pass 2
    # =========================================================================

    def _pass2(self, lines: list[SourceLine]) -> list[str]:
        """Second pass: encode every instruction in order."""
        words = []
        for line in lines:
            if line.type is LineType.LABEL:
                self._listing.append(ListingEntry(
                    len(words), None, line.location.line, line.text
                ))
                continue
            if line.type is LineType.A_INSTRUCTION:
                word = encode_a_instruction(
                    line.text, self._symbols, line.location, line.raw
                )
            elif line.type is LineType.C_INSTRUCTION:
                word = encode_c_instruction(line.text, line.location, line.raw)
            else:
                continue

            logger.debug(f"{line.text!r} -> {word}")
            self._listing.append(ListingEntry(
                len(words), word, line.location.line, line.text
            ))
            words.append(word)
        return words

    # =========================================================================
    # Results
    # =========================================================================

    def get_words(self) -> list[str]:
        """Return the words from the last generate() call."""
        return list(self._words)

    def get_symbols(self) -> dict[str, int]:
        """Return all symbols, reserved ones included."""
        return self._symbols.as_dict()

    def get_listing(self) -> str:
        """
        Get the assembly listing as a string.

        Returns:
            The listing showing addresses, words, and source lines,
            followed by the user-defined symbols.
        """
        lines = []
        lines.append("Hack Assembler Listing")
        lines.append("=" * 60)
        lines.append("")
        lines.append(" Addr  Word              Line  Source")
        lines.append("-" * 60)
        lines.extend(str(entry) for entry in self._listing)
        lines.append("")
        lines.append("Symbol Table")
        lines.append("-" * 30)
        for sym in sorted(self._user_entries(), key=lambda s: s.name):
            lines.append(f"{sym.name:20s} = {sym.address:5d}  ({sym.kind.value})")
        return "\n".join(lines) + "\n"

    def get_symbol_file(self) -> str:
        """
        Format user-defined symbols as a symbol file.

        Format: name address (one per line, sorted by name)
        """
        lines = ["# Symbol table", "# Generated by hackasm"]
        for sym in sorted(self._user_entries(), key=lambda s: s.name):
            lines.append(f"{sym.name} {sym.address}")
        return "\n".join(lines) + "\n"

    def _user_entries(self):
        return [
            sym for sym in self._symbols.entries()
            if sym.kind is not SymbolKind.PREDEFINED
        ]
