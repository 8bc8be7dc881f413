"""
Hack Toolchain Disassembler Module
==================================

Decodes Hack machine words (the lines of a .hack file) back into
assembly text, for inspecting assembler output.

Usage:
    from hack_toolchain.disassembler import HackDisassembler

    disasm = HackDisassembler()
    instructions = disasm.disassemble(Path("Max.hack").read_text().splitlines())
"""

from .hack import HackDisassembler, DisassembledInstruction, decode_address

__all__ = [
    "HackDisassembler",
    "DisassembledInstruction",
    "decode_address",
]
