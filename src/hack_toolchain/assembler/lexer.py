"""
Hack Assembly Language Lexer
============================

This module turns raw source text into a list of normalized, classified
source lines that both assembler passes iterate over.

Hack assembly has no multi-line statements and no tokens that span
whitespace, so lexing is line-oriented: each raw line is normalized
(comment and whitespace removed) and then classified by its first
character.

Line Types
----------
| Type          | Form              | Example        |
|---------------|-------------------|----------------|
| BLANK         | (nothing left)    | `   // note`   |
| LABEL         | `(NAME)`          | `(LOOP)`       |
| A_INSTRUCTION | `@OPERAND`        | `@i`, `@100`   |
| C_INSTRUCTION | `[dest=]comp[;jump]` | `D;JGT`     |

Comments
--------
A comment starts at the two-character marker "//" and runs to the end of
the line. A single "/" is not a comment.

Example
-------
>>> from hack_toolchain.assembler.lexer import Lexer
>>> for line in Lexer("@2  // two\\nD = A").scan():
...     print(line)
SourceLine(A_INSTRUCTION, '@2', 1)
SourceLine(C_INSTRUCTION, 'D=A', 2)
"""

from dataclasses import dataclass
from enum import Enum, auto

from hack_toolchain.errors import SourceLocation


COMMENT_MARKER = "//"


# =============================================================================
# Line Types
# =============================================================================

class LineType(Enum):
    """Classification of a normalized source line."""
    BLANK = auto()
    LABEL = auto()
    A_INSTRUCTION = auto()
    C_INSTRUCTION = auto()


@dataclass(frozen=True)
class SourceLine:
    """
    A normalized source line.

    Attributes:
        type: Classification of the line
        text: Normalized text (no whitespace, no comment)
        location: Where the line starts in the source file
        raw: Original text of the line, for diagnostics
    """
    type: LineType
    text: str
    location: SourceLocation
    raw: str = ""

    @property
    def is_instruction(self) -> bool:
        """True for lines that occupy an instruction address."""
        return self.type in (LineType.A_INSTRUCTION, LineType.C_INSTRUCTION)

    def __repr__(self) -> str:
        return f"SourceLine({self.type.name}, {self.text!r}, {self.location.line})"


# =============================================================================
# Normalization and Classification
# =============================================================================

def normalize_line(line: str) -> str:
    """
    Strip the comment suffix and all whitespace from a raw line.

    Scans left to right; once the "//" marker is seen, that position and
    everything after it is excluded. Whitespace anywhere in the remaining
    text is dropped, so "D = D + A" becomes "D=D+A".

    Args:
        line: Raw source line (may be empty)

    Returns:
        Normalized text; empty if the line carries no statement
    """
    result = []
    in_comment = False
    for i, ch in enumerate(line):
        if line.startswith(COMMENT_MARKER, i):
            in_comment = True
        if in_comment:
            break
        if not ch.isspace():
            result.append(ch)
    return "".join(result)


def split_source_lines(source: str) -> list[str]:
    """
    Split source into lines on "\\n" only (after folding "\\r\\n").

    Other characters str.splitlines() treats as breaks (form feed,
    U+2028, ...) stay inside their line, so they cannot end a comment.
    A final newline does not start an extra empty line.
    """
    text = source.replace("\r\n", "\n")
    if text.endswith("\n"):
        text = text[:-1]
    if not text:
        return []
    return text.split("\n")


def classify_line(text: str) -> LineType:
    """
    Classify a normalized line by its leading character.

    Lines opening with '(' are label declarations; well-formedness is
    checked by the first pass, which reports errors with line context.
    """
    if not text:
        return LineType.BLANK
    if text[0] == "(":
        return LineType.LABEL
    if text[0] == "@":
        return LineType.A_INSTRUCTION
    return LineType.C_INSTRUCTION


# =============================================================================
# Lexer
# =============================================================================

class Lexer:
    """
    Line-oriented lexer for Hack assembly source.

    Attributes:
        source: The complete source text
        filename: Name used in source locations
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

    def scan(self, keep_blank: bool = False) -> list[SourceLine]:
        """
        Normalize and classify every line of the source.

        Args:
            keep_blank: Include BLANK lines in the result

        Returns:
            Lines in source order, with 1-based line numbers that count
            blank and comment lines
        """
        lines = []
        for number, raw in enumerate(split_source_lines(self.source), start=1):
            text = normalize_line(raw)
            line_type = classify_line(text)
            if line_type is LineType.BLANK and not keep_blank:
                continue

            stripped = raw.lstrip()
            column = len(raw) - len(stripped) + 1 if stripped else 1
            lines.append(SourceLine(
                type=line_type,
                text=text,
                location=SourceLocation(self.filename, number, column),
                raw=raw.rstrip(),
            ))
        return lines


def scan_source(source: str, filename: str = "<input>") -> list[SourceLine]:
    """Convenience wrapper returning the non-blank lines of source."""
    return Lexer(source, filename).scan()
