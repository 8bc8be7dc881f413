# =============================================================================
# test_cli.py - Command-Line Interface Tests
# =============================================================================
# Tests for the hackasm and hackdisasm tools.
#
# Test coverage includes:
#   - Argument count and usage errors
#   - Successful assembly with optional outputs
#   - Exit codes for assembly and file errors
#   - No output file after a failed run
# =============================================================================

from click.testing import CliRunner

from hack_toolchain.cli.errors import ExitCode
from hack_toolchain.cli.hackasm import main as hackasm
from hack_toolchain.cli.hackdisasm import main as hackdisasm


ADD_SOURCE = "@2\nD=A\n@3\nD=D+A\n@0\nM=D\n"


# =============================================================================
# hackasm Tests
# =============================================================================

class TestHackasm:
    """Tests for the hackasm CLI tool."""

    def test_help(self):
        """Help text describes the tool."""
        result = CliRunner().invoke(hackasm, ["--help"])
        assert result.exit_code == 0
        assert "Assemble Hack assembly" in result.output

    def test_version(self):
        """Version option works."""
        result = CliRunner().invoke(hackasm, ["--version"])
        assert result.exit_code == 0
        assert "hackasm" in result.output

    def test_no_arguments(self):
        """Missing arguments exit non-zero with usage."""
        result = CliRunner().invoke(hackasm, [])
        assert result.exit_code != 0
        assert "Usage" in result.output

    def test_one_argument(self, tmp_path):
        """Exactly two positional arguments are required."""
        src = tmp_path / "Add.asm"
        src.write_text(ADD_SOURCE)
        result = CliRunner().invoke(hackasm, [str(src)])
        assert result.exit_code != 0
        assert "Usage" in result.output

    def test_three_arguments(self, tmp_path):
        """Extra positional arguments are rejected."""
        result = CliRunner().invoke(hackasm, ["a.asm", "a.hack", "extra"])
        assert result.exit_code != 0
        assert "Usage" in result.output

    def test_assemble(self, tmp_path):
        """Assemble a program into a .hack file."""
        src = tmp_path / "Add.asm"
        src.write_text(ADD_SOURCE)
        out = tmp_path / "Add.hack"

        result = CliRunner().invoke(hackasm, [str(src), str(out)])

        assert result.exit_code == 0, result.output
        lines = out.read_text().splitlines()
        assert len(lines) == 6
        assert lines[3] == "1110000010010000"
        assert out.read_text().endswith("\n")

    def test_listing_and_symbols(self, tmp_path):
        """Optional listing and symbol files are produced."""
        src = tmp_path / "Loop.asm"
        src.write_text("@n\n(LOOP)\n@LOOP\n0;JMP\n")
        out = tmp_path / "Loop.hack"
        lst = tmp_path / "Loop.lst"
        sym = tmp_path / "Loop.sym"

        result = CliRunner().invoke(
            hackasm, [str(src), str(out), "-l", str(lst), "-s", str(sym)]
        )

        assert result.exit_code == 0, result.output
        assert "Hack Assembler Listing" in lst.read_text()
        assert "n 16" in sym.read_text().splitlines()

    def test_verbose(self, tmp_path):
        """Verbose mode reports progress."""
        src = tmp_path / "Add.asm"
        src.write_text(ADD_SOURCE)
        result = CliRunner().invoke(hackasm, ["-v", str(src), str(tmp_path / "Add.hack")])
        assert result.exit_code == 0
        assert "Assembly complete: 6 words" in result.output

    def test_assembly_error(self, tmp_path):
        """Assembly errors exit with BUILD_ERROR and write nothing."""
        src = tmp_path / "Bad.asm"
        src.write_text("@1\nD=D*A\n")
        out = tmp_path / "Bad.hack"

        result = CliRunner().invoke(hackasm, [str(src), str(out)])

        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "unknown computation 'D*A'" in result.output
        assert "Bad.asm:2" in result.output
        assert not out.exists()

    def test_missing_input(self, tmp_path):
        """Unreadable input is reported and nothing is written."""
        out = tmp_path / "out.hack"
        result = CliRunner().invoke(hackasm, [str(tmp_path / "nope.asm"), str(out)])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "nope.asm" in result.output
        assert not out.exists()


# =============================================================================
# hackdisasm Tests
# =============================================================================

class TestHackdisasm:
    """Tests for the hackdisasm CLI tool."""

    def test_help(self):
        """Help text describes the tool."""
        result = CliRunner().invoke(hackdisasm, ["--help"])
        assert result.exit_code == 0
        assert "Disassemble Hack" in result.output

    def test_disassemble_to_stdout(self, tmp_path):
        """Words are decoded to stdout."""
        hack = tmp_path / "Add.hack"
        hack.write_text("0000000000000010\n1110110000010000\n")
        result = CliRunner().invoke(hackdisasm, [str(hack), "--bare"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["@2", "D=A"]

    def test_disassemble_to_file(self, tmp_path):
        """Output option writes a listing file."""
        hack = tmp_path / "Add.hack"
        hack.write_text("0000000000000010\n")
        out = tmp_path / "Add.dis"
        result = CliRunner().invoke(hackdisasm, [str(hack), "-o", str(out)])
        assert result.exit_code == 0
        assert "@2" in out.read_text()

    def test_invalid_word(self, tmp_path):
        """Malformed words exit with BUILD_ERROR."""
        hack = tmp_path / "Bad.hack"
        hack.write_text("0101\n")
        result = CliRunner().invoke(hackdisasm, [str(hack)])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "invalid machine word" in result.output

    def test_count_limits_output(self, tmp_path):
        """--count stops after that many instructions."""
        hack = tmp_path / "Add.hack"
        hack.write_text("0000000000000010\n1110110000010000\n")
        result = CliRunner().invoke(hackdisasm, [str(hack), "--bare", "-c", "1"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["@2"]

    def test_negative_count_rejected(self, tmp_path):
        """A negative --count is a usage error."""
        hack = tmp_path / "Add.hack"
        hack.write_text("0000000000000010\n")
        result = CliRunner().invoke(hackdisasm, [str(hack), "--count", "-1"])
        assert result.exit_code == ExitCode.INVALID_ARGS
