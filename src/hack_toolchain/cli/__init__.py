"""
Hack Toolchain Command-Line Interface
=====================================

This package provides command-line tools for the Hack toolchain:

- **hackasm**: Hack assembler
- **hackdisasm**: Hack disassembler

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["hackasm", "hackdisasm"]
