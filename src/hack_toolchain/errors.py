"""
Hack Toolchain Error Hierarchy
==============================

This module defines the exception hierarchy for the whole toolchain.
All exceptions inherit from HackError, allowing callers to catch every
toolchain error with a single except clause if desired.

Exception Hierarchy
-------------------
HackError (base)
├── AssemblerError (assembler-related)
│   ├── MalformedLabelError - label declaration is not well-formed
│   ├── InvalidLiteralError - numeric operand unparseable or out of range
│   ├── UnknownMnemonicError - dest/comp/jump token not in its table
│   └── DuplicateSymbolError - label declared more than once
├── FileAccessError - input unreadable or output unwritable
└── DisassemblerError - word is not a 16-digit binary string

Design Philosophy
-----------------
Assembler errors capture source location information (filename, line,
column) so messages point straight at the offending line:

    prog.asm:7:5: error: unknown computation 'D+2'
        D=D+2
        ^
    hint: check the computation against the Hack instruction set
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HackError(Exception):
    """
    Base exception for all toolchain errors.

        try:
            assembler.assemble_file("Max.asm")
        except HackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed, counting blank and comment lines)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(HackError):
    """
    Base exception for all assembler-related errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The raw source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with location, source context, and hint."""
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class MalformedLabelError(AssemblerError):
    """
    Label declaration is not well-formed.

    Raised during the first pass when a line opens with '(' but does not
    close with ')', or when the enclosed name is empty or itself contains
    a parenthesis.

    Examples:
        (LOOP        ; missing ')'
        ()           ; empty name
    """

    def __init__(
        self,
        text: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.text = text
        super().__init__(
            f"malformed label declaration '{text}'",
            location=location,
            hint="labels are declared as (NAME) on a line of their own",
            source_line=source_line,
        )


class InvalidLiteralError(AssemblerError):
    """
    Numeric operand of an address-load instruction is invalid.

    Raised when an operand starting with a digit is not a plain decimal
    integer, or when its value does not fit in 15 bits (0..32767).
    """

    def __init__(
        self,
        literal: str,
        reason: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.literal = literal
        self.reason = reason
        super().__init__(
            f"invalid literal '{literal}': {reason}",
            location=location,
            source_line=source_line,
        )


class UnknownMnemonicError(AssemblerError):
    """
    A compute-instruction field is not in its lookup table.

    Attributes:
        field: Which field failed ("dest", "comp" or "jump")
        token: The offending field text
    """

    FIELD_NAMES = {
        "dest": "destination",
        "comp": "computation",
        "jump": "jump condition",
    }

    def __init__(
        self,
        field: str,
        token: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.field = field
        self.token = token
        name = self.FIELD_NAMES.get(field, field)
        super().__init__(
            f"unknown {name} '{token}'",
            location=location,
            hint=f"check the {name} against the Hack instruction set "
                 f"(mnemonics are case-sensitive)",
            source_line=source_line,
        )


class DuplicateSymbolError(AssemblerError):
    """
    Label declared more than once.

    Includes the location of the first declaration when available.
    """

    def __init__(
        self,
        symbol: str,
        location: Optional[SourceLocation] = None,
        original_location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol
        self.original_location = original_location

        hint = None
        if original_location:
            hint = f"'{symbol}' was first declared at {original_location}"

        super().__init__(
            f"duplicate label '{symbol}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


# =============================================================================
# I/O Exceptions
# =============================================================================

class FileAccessError(HackError):
    """
    Input file cannot be read or output file cannot be written.

    Attributes:
        path: The path that could not be accessed
        reason: Description of the underlying failure
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot access '{path}': {reason}")


# =============================================================================
# Disassembler Exceptions
# =============================================================================

class DisassemblerError(HackError):
    """
    Machine word cannot be decoded.

    Raised when an input line is not exactly sixteen '0'/'1' characters.
    """

    def __init__(self, word: str, line: Optional[int] = None):
        self.word = word
        self.line = line
        where = f"line {line}: " if line is not None else ""
        super().__init__(f"{where}invalid machine word '{word}'")
