# =============================================================================
# test_encoder.py - Instruction Encoder Unit Tests
# =============================================================================
# Tests for A- and C-instruction encoding.
#
# Test coverage includes:
#   - Literal and symbolic A-instruction operands
#   - Literal range and format errors
#   - Field splitting for every C-instruction shape
#   - Every dest/comp/jump table entry
#   - Unknown mnemonics in each field
# =============================================================================

import pytest

from hack_toolchain.assembler.encoder import (
    ComputeFields,
    encode_a_instruction,
    encode_c_instruction,
    resolve_operand,
    split_c_instruction,
)
from hack_toolchain.assembler.symbols import SymbolTable
from hack_toolchain.cpu import COMP_TABLE, DEST_TABLE, JUMP_TABLE
from hack_toolchain.errors import (
    InvalidLiteralError,
    SourceLocation,
    UnknownMnemonicError,
)


# =============================================================================
# A-Instruction Tests
# =============================================================================

class TestAInstruction:
    """Test address-load encoding."""

    def test_zero(self):
        """@0 encodes to all zeros."""
        assert encode_a_instruction("@0", SymbolTable()) == "0" * 16

    def test_small_literal(self):
        """@21 encodes 21 in the low bits."""
        assert encode_a_instruction("@21", SymbolTable()) == "0000000000010101"

    def test_max_literal(self):
        """@32767 is the largest address."""
        assert encode_a_instruction("@32767", SymbolTable()) == "0" + "1" * 15

    def test_leading_zeros(self):
        """Leading zeros are still a decimal literal."""
        assert encode_a_instruction("@007", SymbolTable()) == "0000000000000111"

    @pytest.mark.parametrize("n", [0, 1, 2, 255, 1024, 16383, 16384, 24576, 32767])
    def test_low_bits_decode_to_literal(self, n):
        """The low 15 bits of the word are the literal."""
        word = encode_a_instruction(f"@{n}", SymbolTable())
        assert len(word) == 16
        assert word[0] == "0"
        assert int(word[1:], 2) == n

    def test_predefined_symbol(self):
        """Reserved names resolve to their fixed addresses."""
        assert encode_a_instruction("@SCREEN", SymbolTable()) == "0100000000000000"
        assert encode_a_instruction("@R15", SymbolTable()) == "0000000000001111"

    def test_variable_allocated(self):
        """Unknown symbols become variables from 16."""
        table = SymbolTable()
        assert encode_a_instruction("@i", table) == "0000000000010000"
        assert encode_a_instruction("@j", table) == "0000000000010001"
        assert encode_a_instruction("@i", table) == "0000000000010000"

    def test_literal_does_not_allocate(self):
        """Literals never touch the variable counter."""
        table = SymbolTable()
        encode_a_instruction("@100", table)
        assert table.next_variable_address == 16


class TestAInstructionErrors:
    """Test invalid A-instruction operands."""

    def test_out_of_range(self):
        """32768 does not fit in 15 bits."""
        with pytest.raises(InvalidLiteralError) as exc_info:
            encode_a_instruction("@32768", SymbolTable())
        assert exc_info.value.literal == "32768"
        assert "out of range" in str(exc_info.value)

    def test_digit_prefix_symbol(self):
        """An operand starting with a digit must be entirely decimal."""
        with pytest.raises(InvalidLiteralError):
            encode_a_instruction("@12abc", SymbolTable())

    def test_missing_operand(self):
        """A bare '@' has nothing to load."""
        with pytest.raises(InvalidLiteralError):
            encode_a_instruction("@", SymbolTable())

    def test_location_in_message(self):
        """Errors report the source location."""
        location = SourceLocation("prog.asm", 12, 5)
        with pytest.raises(InvalidLiteralError) as exc_info:
            resolve_operand("99999", SymbolTable(), location, "@99999")
        assert exc_info.value.location == location
        assert "prog.asm:12:5" in str(exc_info.value)
        assert "@99999" in str(exc_info.value)


# =============================================================================
# Field Splitting Tests
# =============================================================================

class TestSplitCInstruction:
    """Test decomposition into dest/comp/jump."""

    @pytest.mark.parametrize("text,fields", [
        ("D=A", ComputeFields("D", "A", "")),
        ("AMD=M+1", ComputeFields("AMD", "M+1", "")),
        ("0;JMP", ComputeFields("", "0", "JMP")),
        ("D;JGT", ComputeFields("", "D", "JGT")),
        ("M=D;JEQ", ComputeFields("M", "D", "JEQ")),
        ("D+1", ComputeFields("", "D+1", "")),
        ("=D", ComputeFields("", "D", "")),
        ("D;", ComputeFields("", "D", "")),
    ])
    def test_shapes(self, text, fields):
        """Each instruction shape splits on the first '=' and ';'."""
        assert split_c_instruction(text) == fields

    def test_equals_after_semicolon(self):
        """An '=' after the ';' stays in the jump text."""
        assert split_c_instruction("D;J=MP") == ComputeFields("", "D", "J=MP")


# =============================================================================
# C-Instruction Tests
# =============================================================================

class TestCInstruction:
    """Test compute encoding."""

    def test_d_plus_a(self):
        """D=D+A encodes comp 0000010, dest 010, jump 000."""
        word = encode_c_instruction("D=D+A")
        assert word == "1110000010010000"
        assert word[3:10] == "0000010"
        assert word[10:13] == "010"
        assert word[13:] == "000"

    def test_unconditional_jump(self):
        """0;JMP is the classic infinite loop."""
        assert encode_c_instruction("0;JMP") == "1110101010000111"

    def test_memory_operand(self):
        """M computations set the a-bit."""
        assert encode_c_instruction("MD=M+1") == "1111110111011000"

    @pytest.mark.parametrize("comp,code", sorted(COMP_TABLE.items()))
    def test_every_comp(self, comp, code):
        """Every computation encodes to its table code."""
        word = encode_c_instruction(comp)
        assert word == "111" + code + "000" + "000"

    @pytest.mark.parametrize("dest,code", sorted(DEST_TABLE.items()))
    def test_every_dest(self, dest, code):
        """Every destination encodes to its table code."""
        text = f"{dest}=0" if dest else "0"
        assert encode_c_instruction(text)[10:13] == code

    @pytest.mark.parametrize("jump,code", sorted(JUMP_TABLE.items()))
    def test_every_jump(self, jump, code):
        """Every jump encodes to its table code."""
        text = f"0;{jump}" if jump else "0"
        assert encode_c_instruction(text)[13:] == code

    def test_table_sizes(self):
        """8 destinations, 28 computations, 8 jumps, all distinct codes."""
        assert len(DEST_TABLE) == 8
        assert len(COMP_TABLE) == 28
        assert len(JUMP_TABLE) == 8
        assert len(set(COMP_TABLE.values())) == 28


class TestUnknownMnemonics:
    """Test rejection of tokens outside the vocabulary."""

    def test_unknown_comp(self):
        """D+2 is not an ALU operation."""
        with pytest.raises(UnknownMnemonicError) as exc_info:
            encode_c_instruction("D=D+2")
        assert exc_info.value.field == "comp"
        assert exc_info.value.token == "D+2"

    def test_unknown_dest(self):
        """Destinations must be spelled in table order."""
        with pytest.raises(UnknownMnemonicError) as exc_info:
            encode_c_instruction("DM=1")
        assert exc_info.value.field == "dest"
        assert exc_info.value.token == "DM"

    def test_unknown_jump(self):
        """Unknown jump conditions are rejected."""
        with pytest.raises(UnknownMnemonicError) as exc_info:
            encode_c_instruction("0;JUMP")
        assert exc_info.value.field == "jump"
        assert exc_info.value.token == "JUMP"

    def test_case_sensitive(self):
        """Lower-case mnemonics are not accepted."""
        with pytest.raises(UnknownMnemonicError):
            encode_c_instruction("d=a")

    def test_commuted_operands(self):
        """Only the listed operand order is accepted."""
        with pytest.raises(UnknownMnemonicError):
            encode_c_instruction("D=A+D")

    def test_empty_comp(self):
        """A destination without a computation is rejected."""
        with pytest.raises(UnknownMnemonicError) as exc_info:
            encode_c_instruction("D=")
        assert exc_info.value.field == "comp"
        assert exc_info.value.token == ""

    def test_message_names_field(self):
        """The message names the field and the token."""
        with pytest.raises(UnknownMnemonicError) as exc_info:
            encode_c_instruction("0;JXX")
        assert "unknown jump condition 'JXX'" in str(exc_info.value)
