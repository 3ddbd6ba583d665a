"""Tests for the dx7dump command line."""

from typer.testing import CliRunner

from cli.app import app
from cli.commands.scan import find_sysex_files
from dx7dump.formats.writer import backup_path

runner = CliRunner()


def bad_checksum(data: bytes) -> bytes:
    buffer = bytearray(data)
    buffer[4102] = 0x01
    return bytes(buffer)


class TestListCommand:
    """Test cases for the list command."""

    def test_lists_names(self, write_file, numbered_bank):
        """Every voice name is printed."""
        result = runner.invoke(app, ["list", str(write_file(numbered_bank.to_bytes()))])

        assert result.exit_code == 0
        assert "|VOICE 1   |" in result.output
        assert "|VOICE 32  |" in result.output

    def test_compact(self, write_file, numbered_bank):
        """The compact grid still lists every voice."""
        result = runner.invoke(app, ["list", "-c", str(write_file(numbered_bank.to_bytes()))])

        assert result.exit_code == 0
        assert "VOICE 9" in result.output
        assert "VOICE 25" in result.output

    def test_single_voice(self, write_file, single_voice_data):
        """Single voice dumps list their one name."""
        result = runner.invoke(app, ["list", "-c", str(write_file(single_voice_data, "v.syx"))])

        assert result.exit_code == 0
        assert "INIT VOICE" in result.output

    def test_soft_error_reported(self, write_file, zero_bank_data):
        """Recoverable errors are printed and the names still listed."""
        result = runner.invoke(app, ["list", str(write_file(bad_checksum(zero_bank_data)))])

        assert result.exit_code == 0
        assert "CHECKSUM FAILED" in result.output

    def test_errors_only_skips_clean_files(self, write_file, numbered_bank):
        """--errors prints nothing for valid files."""
        result = runner.invoke(app, ["list", "-e", str(write_file(numbered_bank.to_bytes()))])

        assert result.exit_code == 0
        assert "VOICE 1" not in result.output

    def test_bad_files_do_not_stop_the_run(self, write_file, numbered_bank):
        """Size errors are reported, later files still processed, exit code 1."""
        small = write_file(bytes(10), "small.syx")
        good = write_file(numbered_bank.to_bytes(), "good.syx")

        result = runner.invoke(app, ["list", str(small), str(good)])

        assert result.exit_code == 1
        assert "File too small (10 Bytes)" in result.output
        assert "VOICE 1" in result.output

    def test_find_dupes(self, write_file, init_bank):
        """Duplicates are printed one-based."""
        result = runner.invoke(app, ["list", "-e", "-d", str(write_file(init_bank.to_bytes()))])

        assert result.exit_code == 0
        assert "Found duplicate: 1 = 2" in result.output
        assert "Found duplicate: 31 = 32" in result.output

    def test_fix_with_yes(self, write_file, zero_bank_data):
        """--fix --yes repairs without asking."""
        path = write_file(bad_checksum(zero_bank_data))

        result = runner.invoke(app, ["list", "-e", "--fix", "-y", str(path)])

        assert result.exit_code == 0
        assert "File fixed." in result.output
        assert path.read_bytes() == zero_bank_data
        assert backup_path(path).exists()


class TestShowCommand:
    """Test cases for the show command."""

    def test_show_patch(self, write_file, numbered_bank):
        """One voice is shown with its parameters."""
        result = runner.invoke(app, ["show", "-p", "3", str(write_file(numbered_bank.to_bytes()))])

        assert result.exit_code == 0
        assert "VOICE 3" in result.output
        assert "Algorithm" in result.output
        assert "VOICE 4" not in result.output

    def test_show_hex(self, write_file, numbered_bank):
        """--hex prints the voice data with its checksum."""
        path = write_file(numbered_bank.to_bytes())

        result = runner.invoke(app, ["show", "-p", "1", "--hex", str(path)])

        assert result.exit_code == 0
        assert "last byte = checksum" in result.output

    def test_algorithm_diagram(self, write_file, numbered_bank):
        """The voice's algorithm is drawn below the global parameters."""
        result = runner.invoke(app, ["show", "-p", "1", str(write_file(numbered_bank.to_bytes()))])

        assert result.exit_code == 0
        assert "Algorithm 1" in result.output
        assert "┌──┐" in result.output
        assert "[6] │" in result.output

    def test_algorithm_diagram_ascii(self, write_file, numbered_bank):
        """--ascii draws the diagram without box-drawing characters."""
        path = write_file(numbered_bank.to_bytes())

        result = runner.invoke(app, ["show", "-p", "1", "--ascii", str(path)])

        assert result.exit_code == 0
        assert "[6] |" in result.output
        assert " +----+" in result.output
        for glyph in "┌┐└┘":
            assert glyph not in result.output

    def test_patch_out_of_range(self, write_file, numbered_bank):
        """Patch numbers are 1-32."""
        result = runner.invoke(app, ["show", "-p", "33", str(write_file(numbered_bank.to_bytes()))])

        assert result.exit_code != 0

    def test_single_voice_patch(self, write_file, single_voice_data):
        """Single voice files only have patch 1."""
        path = write_file(single_voice_data, "v.syx")

        assert runner.invoke(app, ["show", "-p", "1", str(path)]).exit_code == 0
        assert runner.invoke(app, ["show", "-p", "2", str(path)]).exit_code == 1

    def test_fatal_error(self, write_file, zero_bank_data):
        """Broken files are reported."""
        data = bytearray(zero_bank_data)
        data[4103] = 0x00

        result = runner.invoke(app, ["show", str(write_file(data))])

        assert result.exit_code == 1
        assert "Did not find sysex end F7" in result.output


class TestValidateCommand:
    """Test cases for the validate command."""

    def test_valid(self, write_file, zero_bank_data):
        result = runner.invoke(app, ["validate", str(write_file(zero_bank_data))])

        assert result.exit_code == 0
        assert "VALID" in result.output
        assert "INVALID" not in result.output

    def test_soft_error(self, write_file, zero_bank_data):
        """Recoverable errors pass unless --strict."""
        path = write_file(bad_checksum(zero_bank_data))

        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 0
        assert "NEEDS REPAIR" in result.output

        assert runner.invoke(app, ["validate", "--strict", str(path)]).exit_code == 1

    def test_invalid(self, write_file, zero_bank_data):
        data = bytearray(zero_bank_data)
        data[0] = 0x00

        result = runner.invoke(app, ["validate", str(write_file(data))])

        assert result.exit_code == 1
        assert "INVALID" in result.output

    def test_single_voice_error_code(self, write_file, single_voice_data):
        """Single voice results show the error code."""
        data = bytearray(single_voice_data)
        data[162] = 0x00

        result = runner.invoke(app, ["validate", str(write_file(data, "v.syx"))])

        assert result.exit_code == 1
        assert "0x01" in result.output


class TestFixCommand:
    """Test cases for the fix command."""

    def test_confirm_yes(self, write_file, zero_bank_data):
        path = write_file(bad_checksum(zero_bank_data))

        result = runner.invoke(app, ["fix", str(path)], input="y\n")

        assert result.exit_code == 0
        assert path.read_bytes() == zero_bank_data

    def test_confirm_no(self, write_file, zero_bank_data):
        data = bad_checksum(zero_bank_data)
        path = write_file(data)

        result = runner.invoke(app, ["fix", str(path)], input="n\n")

        assert result.exit_code == 0
        assert path.read_bytes() == data
        assert not backup_path(path).exists()

    def test_no_backup(self, write_file, zero_bank_data):
        path = write_file(bad_checksum(zero_bank_data))

        result = runner.invoke(app, ["fix", "-y", "--no-backup", str(path)])

        assert result.exit_code == 0
        assert not backup_path(path).exists()

    def test_existing_backup(self, write_file, zero_bank_data):
        """A leftover .ORIG aborts the fix with exit code 1."""
        data = bad_checksum(zero_bank_data)
        path = write_file(data)
        write_file(b"old", "bank.syx.ORIG")

        result = runner.invoke(app, ["fix", "-y", str(path)])

        assert result.exit_code == 1
        assert "File-fix aborted" in result.output
        assert path.read_bytes() == data

    def test_nothing_to_fix(self, write_file, zero_bank_data):
        result = runner.invoke(app, ["fix", "-y", str(write_file(zero_bank_data))])

        assert result.exit_code == 0
        assert "Nothing to fix" in result.output


class TestDupesAndScan:
    """Test cases for the dupes and scan commands."""

    def test_dupes(self, write_file, numbered_bank):
        result = runner.invoke(app, ["dupes", str(write_file(numbered_bank.to_bytes()))])

        assert result.exit_code == 0
        assert "No duplicates" in result.output

    def test_find_sysex_files(self, tmp_path):
        """Search is recursive, case-insensitive and sorted."""
        (tmp_path / "sub").mkdir()
        for name in ("b.syx", "A.SYX", "sub/c.Syx", "notes.txt"):
            (tmp_path / name).write_bytes(b"")

        files = find_sysex_files(tmp_path)

        assert [f.relative_to(tmp_path).as_posix() for f in files] == [
            "A.SYX",
            "b.syx",
            "sub/c.Syx",
        ]

    def test_scan(self, write_file, numbered_bank, zero_bank_data):
        """Scan runs the listing over every file it finds."""
        write_file(numbered_bank.to_bytes(), "a.syx")
        path = write_file(bad_checksum(zero_bank_data), "sub/b.syx")

        result = runner.invoke(app, ["scan", "-e", str(path.parent.parent)])

        assert result.exit_code == 0
        assert "CHECKSUM FAILED" in result.output
        assert "Scanned 2 file(s)" in result.output


class TestAppCommands:
    """Test cases for global options."""

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "1.2.0" in result.output

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "dx7dump" in result.output
