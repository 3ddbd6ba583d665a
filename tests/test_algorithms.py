"""Tests for the algorithm diagrams."""

from cli.display.algorithms import (
    ALGORITHM_DIAGRAMS_ASCII,
    ALGORITHM_DIAGRAMS_UNICODE,
    algorithm_diagram,
)


class TestAlgorithmDiagrams:
    """Test cases for the algorithm diagram tables."""

    def test_table_sizes(self):
        """Both glyph sets have one diagram per algorithm."""
        assert len(ALGORITHM_DIAGRAMS_UNICODE) == 32
        assert len(ALGORITHM_DIAGRAMS_ASCII) == 32

    def test_algorithm_1(self):
        """Algorithm 1 stacks 6 over 5 over 4 over 3 with feedback on 6."""
        unicode = algorithm_diagram(0)
        ascii_only = algorithm_diagram(0, unicode=False)

        assert "[6] │" in unicode
        assert "┌──┐" in unicode
        assert "[6] |" in ascii_only
        assert "+--+" in ascii_only
        assert ascii_only.splitlines()[-1] == " +----+"

    def test_algorithm_32(self):
        """Algorithm 32 puts all six operators on the bottom row."""
        assert "[1]  [2]  [3]  [4]  [5]  [6]" in algorithm_diagram(31)

    def test_every_operator_shown(self):
        """Every diagram names all six operators."""
        for diagram in ALGORITHM_DIAGRAMS_UNICODE + ALGORITHM_DIAGRAMS_ASCII:
            for op in range(1, 7):
                assert f"[{op}]" in diagram

    def test_ascii_table_is_7_bit(self):
        for diagram in ALGORITHM_DIAGRAMS_ASCII:
            assert all(ord(c) < 0x80 for c in diagram)

    def test_out_of_range(self):
        """Values outside 0-31 have no diagram."""
        assert algorithm_diagram(32) == ""
        assert algorithm_diagram(-1, unicode=False) == ""
