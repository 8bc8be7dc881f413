"""
Hack Symbol Table
=================

Maps symbolic names to non-negative addresses for one assembly run.

A fresh table is pre-populated with the reserved names (SP, LCL, ARG,
THIS, THAT, R0-R15, SCREEN, KBD). Labels are added by the first pass;
variables are allocated lazily by the second pass, starting at address
16 in order of first reference.

The table is owned by the code generator and passed explicitly to the
address encoder. Nothing else mutates it.
"""

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Iterator, Optional

from hack_toolchain.cpu import PREDEFINED_SYMBOLS, VARIABLE_BASE
from hack_toolchain.errors import SourceLocation

logger = logging.getLogger(__name__)


class SymbolKind(Enum):
    """Where a symbol's address came from."""
    PREDEFINED = "predefined"
    LABEL = "label"
    VARIABLE = "variable"


@dataclass
class Symbol:
    """
    Symbol table entry.

    Attributes:
        name: Symbol name (case-sensitive)
        address: Resolved address
        kind: Predefined, label, or variable
        location: Where the symbol was declared or first referenced
    """
    name: str
    address: int
    kind: SymbolKind
    location: Optional[SourceLocation] = None


class SymbolTable:
    """
    Name-to-address mapping with sequential variable allocation.

    Supports the mapping protocol for reads:

        >>> table = SymbolTable()
        >>> table["SCREEN"]
        16384
        >>> table.allocate_variable("i")
        16
    """

    def __init__(self, variable_base: int = VARIABLE_BASE):
        self._symbols: dict[str, Symbol] = {}
        self._next_variable = variable_base

        for name, address in PREDEFINED_SYMBOLS.items():
            self._symbols[name] = Symbol(name, address, SymbolKind.PREDEFINED)

    # =========================================================================
    # Mapping Protocol
    # =========================================================================

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __getitem__(self, name: str) -> int:
        return self._symbols[name].address

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def get(self, name: str) -> Optional[Symbol]:
        """Return the full entry for name, or None."""
        return self._symbols.get(name)

    # =========================================================================
    # Definition
    # =========================================================================

    def define_label(self, name: str, address: int,
                     location: Optional[SourceLocation] = None) -> Symbol:
        """
        Bind a label to an instruction address.

        A label may rebind a reserved name; the label's address wins.
        Duplicate user labels are rejected by the caller before this point.
        """
        existing = self._symbols.get(name)
        if existing is not None and existing.kind is SymbolKind.PREDEFINED:
            logger.warning(
                f"label '{name}' rebinds reserved symbol "
                f"(was {existing.address}, now {address})"
            )

        symbol = Symbol(name, address, SymbolKind.LABEL, location)
        self._symbols[name] = symbol
        logger.debug(f"label {name} = {address}")
        return symbol

    def allocate_variable(self, name: str,
                          location: Optional[SourceLocation] = None) -> int:
        """
        Return the address of name, allocating a variable slot if new.

        Lookup is idempotent: a name that is already bound (reserved,
        label, or earlier variable) keeps its address.
        """
        existing = self._symbols.get(name)
        if existing is not None:
            return existing.address

        address = self._next_variable
        self._next_variable += 1
        self._symbols[name] = Symbol(name, address, SymbolKind.VARIABLE, location)
        logger.debug(f"variable {name} allocated at {address}")
        return address

    @property
    def next_variable_address(self) -> int:
        """Address the next new variable will receive."""
        return self._next_variable

    # =========================================================================
    # Queries
    # =========================================================================

    def user_symbols(self) -> dict[str, int]:
        """Labels and variables, excluding the reserved set."""
        return {
            name: sym.address for name, sym in self._symbols.items()
            if sym.kind is not SymbolKind.PREDEFINED
        }

    def as_dict(self) -> dict[str, int]:
        """All symbols as a plain name-to-address dictionary."""
        return {name: sym.address for name, sym in self._symbols.items()}

    def entries(self, kind: Optional[SymbolKind] = None) -> list[Symbol]:
        """Entries in insertion order, optionally filtered by kind."""
        return [
            sym for sym in self._symbols.values()
            if kind is None or sym.kind is kind
        ]
