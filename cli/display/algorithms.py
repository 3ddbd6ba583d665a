"""
DX7 algorithm diagrams.

One diagram per algorithm (index 0 = algorithm 1), showing how the six
operators are stacked. Carriers sit on the bottom row; a loop on an
operator marks the feedback path.
"""

from typing import List

# fmt: off
ALGORITHM_DIAGRAMS_UNICODE: List[str] = [
    # 1
    (
        "      ┌──┐\n"
        "     [6] │\n"
        "      ├──┘\n"
        "     [5]\n"
        "      │\n"
        "[2]  [4]\n"
        " │    │\n"
        "[1]  [3]\n"
        " └────┘\n"
    ),
    # 2
    (
        "       [6]\n"
        "        │\n"
        "       [5]\n"
        "┌──┐    │\n"
        "│ [2]  [4]\n"
        "└──┤    │\n"
        "  [1]  [3]\n"
        "   └────┘\n"
    ),
    # 3
    (
        "      ┌──┐\n"
        "[3]  [6] │\n"
        " │    ├──┘\n"
        "[2]  [5]\n"
        " │    │\n"
        "[1]  [4]\n"
        " └────┘\n"
    ),
    # 4
    (
        "      ┌──┐\n"
        "[3]  [6] │\n"
        " │    │  │\n"
        "[2]  [5] │\n"
        " │    │  │\n"
        "[1]  [4] │\n"
        " │    ├──┘\n"
        " └────┘\n"
    ),
    # 5
    (
        "           ┌──┐\n"
        "[2]  [4]  [6] │\n"
        " │    │    ├──┘\n"
        "[1]  [3]  [5]\n"
        " └────┴────┘\n"
    ),
    # 6
    (
        "           ┌──┐\n"
        "[2]  [4]  [6] │\n"
        " │    │    │  │\n"
        "[1]  [3]  [5] │\n"
        " │    │    ├──┘\n"
        " └────┴────┘\n"
    ),
    # 7
    (
        "          ┌──┐\n"
        "         [6] │\n"
        "          ├──┘\n"
        "[2]  [4] [5]\n"
        " │    │ ╱\n"
        "[1]  [3]\n"
        " └────┘\n"
    ),
    # 8
    (
        "           [6]\n"
        "     ┌──┐   │\n"
        "[2]  │ [4] [5]\n"
        " │   └──┤ ╱\n"
        "[1]    [3]\n"
        " └──────┘\n"
    ),
    # 9
    (
        "           [6]\n"
        "┌──┐        │\n"
        "│ [2]  [4] [5]\n"
        "└──┤    │ ╱\n"
        "  [1]  [3]\n"
        "   └────┘\n"
    ),
    # 10
    (
        "          ┌──┐\n"
        "         [3] │\n"
        "          ├──┘\n"
        "[5] [6]  [2]\n"
        "   ╲ │    │\n"
        "    [4]  [1]\n"
        "     └────┘\n"
    ),
    # 11
    (
        "           [3]\n"
        "     ┌──┐   │\n"
        "[5] [6] │  [2]\n"
        "   ╲ ├──┘   │\n"
        "    [4]    [1]\n"
        "     └──────┘\n"
    ),
    # 12
    (
        "              ┌──┐\n"
        "[4] [5] [6]  [2] │\n"
        "   ╲ │ ╱      ├──┘\n"
        "    [3]      [1]\n"
        "     └────────┘\n"
    ),
    # 13
    (
        "         ┌──┐\n"
        "[4] [5] [6] │  [2]\n"
        "   ╲ │ ╱ └──┘   │\n"
        "    [3]        [1]\n"
        "     └──────────┘\n"
    ),
    # 14
    (
        "       ┌──┐\n"
        "  [5] [6] │\n"
        "     ╲ ├──┘\n"
        "[2]   [4]\n"
        " │     │\n"
        "[1]   [3]\n"
        " └─────┘\n"
    ),
    # 15
    (
        "     [5] [6]\n"
        "┌──┐    ╲ │\n"
        "│ [2]    [4]\n"
        "└──┤      │\n"
        "  [1]    [3]\n"
        "   └──────┘\n"
    ),
    # 16
    (
        "         ┌──┐\n"
        "    [4] [6] │\n"
        "     │   ├──┘\n"
        "[2] [3] [5]\n"
        "   ╲ │ ╱\n"
        "    [1]\n"
        "     │\n"
    ),
    # 17
    (
        "      [4] [6]\n"
        "┌──┐   │   │\n"
        "│ [2] [3] [5]\n"
        "└──┘ ╲ │ ╱\n"
        "      [1]\n"
        "       │\n"
    ),
    # 18
    (
        "          [6]\n"
        "           │\n"
        "          [5]\n"
        "      ┌─┐  │\n"
        "[2]  [3]│ [4]\n"
        "   ╲  ├─┘╱\n"
        "    ╲ │ ╱\n"
        "     [1]\n"
        "      │\n"
    ),
    # 19
    (
        "[3]\n"
        " │    ┌──┐\n"
        "[2]  [6] │\n"
        " │    │ ╲┘\n"
        "[1]  [4] [5]\n"
        " └────┴───┘\n"
    ),
    # 20
    (
        " ┌──┐\n"
        "[3] │   [5] [6]\n"
        " │ ╲┘      ╲ │\n"
        "[1] [2]     [4]\n"
        " └───┴───────┘\n"
    ),
    # 21
    (
        " ┌──┐\n"
        "[3] │   [6]\n"
        " │ ╲┘    │ ╲\n"
        "[1] [2] [4] [5]\n"
        " └───┴───┴───┘\n"
    ),
    # 22
    (
        "          ┌──┐\n"
        "[2]      [6] │\n"
        " │      ╱ │ ╲┘\n"
        "[1]  [3] [4] [5]\n"
        " └────┴───┴───┘\n"
    ),
    # 23
    (
        "           ┌──┐\n"
        "     [3]  [6] │\n"
        "      │    │ ╲┘\n"
        "[1]  [2]  [4] [5]\n"
        " └────┴────┴───┘\n"
    ),
    # 24
    (
        "               ┌──┐\n"
        "              [6] │\n"
        "             ╱ │ ╲┘\n"
        "[1]  [2]  [3] [4] [5]\n"
        " └────┴────┴───┴───┘\n"
    ),
    # 25
    (
        "                ┌──┐\n"
        "               [6] │\n"
        "                │ ╲┘\n"
        "[1]  [2]  [3]  [4] [5]\n"
        " └────┴────┴────┴───┘\n"
    ),
    # 26
    (
        "               ┌──┐\n"
        "     [3]  [5] [6] │\n"
        "      │      ╲ ├──┘\n"
        "[1]  [2]      [4]\n"
        " └────┴────────┘\n"
    ),
    # 27
    (
        "      ┌──┐\n"
        "     [3] │  [5] [6]\n"
        "      ├──┘     ╲ │\n"
        "[1]  [2]        [4]\n"
        " └────┴──────────┘\n"
    ),
    # 28
    (
        "      ┌──┐\n"
        "     [5] │\n"
        "      ├──┘\n"
        "[2]  [4]\n"
        " │    │\n"
        "[1]  [3]  [6]\n"
        " └────┴────┘\n"
    ),
    # 29
    (
        "                ┌──┐\n"
        "          [4]  [6] │\n"
        "           │    ├──┘\n"
        "[1]  [2]  [3]  [5]\n"
        " └────┴────┴────┘\n"
    ),
    # 30
    (
        "           ┌──┐\n"
        "          [5] │\n"
        "           ├──┘\n"
        "          [4]\n"
        "           │\n"
        "[1]  [2]  [3]  [6]\n"
        " └────┴────┴────┘\n"
    ),
    # 31
    (
        "                     ┌──┐\n"
        "                    [6] │\n"
        "                     ├──┘\n"
        "[1]  [2]  [3]  [4]  [5]\n"
        " └────┴────┴────┴────┘\n"
    ),
    # 32
    (
        "                          ┌──┐\n"
        "[1]  [2]  [3]  [4]  [5]  [6] │\n"
        " │    │    │    │    │    ├──┘\n"
        " └────┴────┴────┴────┴────┘\n"
    ),
]

ALGORITHM_DIAGRAMS_ASCII: List[str] = [
    # 1
    (
        "      +--+\n"
        "     [6] |\n"
        "      |--+\n"
        "     [5]\n"
        "      |\n"
        "[2]  [4]\n"
        " |    |\n"
        "[1]  [3]\n"
        " |    |\n"
        " +----+\n"
    ),
    # 2
    (
        "       [6]\n"
        "        |\n"
        "       [5]\n"
        "+--+    |\n"
        "| [2]  [4]\n"
        "+--|    |\n"
        "  [1]  [3]\n"
        "   |    |\n"
        "   +----+\n"
    ),
    # 3
    (
        "      +--+\n"
        "[3]  [6] |\n"
        " |    |--+\n"
        "[2]  [5]\n"
        " |    |\n"
        "[1]  [4]\n"
        " |    |\n"
        " +----+\n"
    ),
    # 4
    (
        "      +--+\n"
        "[3]  [6] |\n"
        " |    |  |\n"
        "[2]  [5] |\n"
        " |    |  |\n"
        "[1]  [4] |\n"
        " |    |--+\n"
        " +----+\n"
    ),
    # 5
    (
        "           +--+\n"
        "[2]  [4]  [6] |\n"
        " |    |    |--+\n"
        "[1]  [3]  [5]\n"
        " |    |    |\n"
        " +----+----+\n"
    ),
    # 6
    (
        "           +--+\n"
        "[2]  [4]  [6] |\n"
        " |    |    |  |\n"
        "[1]  [3]  [5] |\n"
        " |    |    |--+\n"
        " +----+----+\n"
    ),
    # 7
    (
        "          +--+\n"
        "         [6] |\n"
        "          |--+\n"
        "[2]  [4] [5]\n"
        " |    | /\n"
        "[1]  [3]\n"
        " |    | \n"
        " +----+\n"
    ),
    # 8
    (
        "           [6]\n"
        "     +--+   |\n"
        "[2]  | [4] [5]\n"
        " |   +--| /\n"
        "[1]    [3]\n"
        " |      | \n"
        " +------+\n"
    ),
    # 9
    (
        "           [6]\n"
        "+--+        |\n"
        "| [2]  [4] [5]\n"
        "+--|    | /\n"
        "  [1]  [3]\n"
        "   |    | \n"
        "   +----+\n"
    ),
    # 10
    (
        "          +--+\n"
        "         [3] |\n"
        "          |--+\n"
        "[5] [6]  [2]\n"
        "   \\ |    |\n"
        "    [4]  [1]\n"
        "     |    |\n"
        "     +----+\n"
    ),
    # 11
    (
        "           [3]\n"
        "     +--+   |\n"
        "[5] [6] |  [2]\n"
        "   \\ |--+   |\n"
        "    [4]    [1]\n"
        "     |      |\n"
        "     +------+\n"
    ),
    # 12
    (
        "              +--+\n"
        "[4] [5] [6]  [2] |\n"
        "   \\ | /      |--+\n"
        "    [3]      [1]\n"
        "     |        |\n"
        "     +--------+\n"
    ),
    # 13
    (
        "         +--+\n"
        "[4] [5] [6] |  [2]\n"
        "   \\ | / +--+   |\n"
        "    [3]        [1]\n"
        "     |          |\n"
        "     +----------+\n"
    ),
    # 14
    (
        "       +--+\n"
        "  [5] [6] |\n"
        "     \\ |--+\n"
        "[2]   [4]\n"
        " |     |\n"
        "[1]   [3]\n"
        " |     |\n"
        " +-----+\n"
    ),
    # 15
    (
        "     [5] [6]\n"
        "+--+    \\ |\n"
        "| [2]    [4]\n"
        "+--|      |\n"
        "  [1]    [3]\n"
        "   |      |\n"
        "   +------+\n"
    ),
    # 16
    (
        "         +--+\n"
        "    [4] [6] |\n"
        "     |   |--+\n"
        "[2] [3] [5]\n"
        "   \\ | / \n"
        "    [1]\n"
        "     |\n"
    ),
    # 17
    (
        "      [4] [6]\n"
        "+--+   |   |\n"
        "| [2] [3] [5]\n"
        "+--+ \\ | / \n"
        "      [1]\n"
        "       |\n"
    ),
    # 18
    (
        "          [6]\n"
        "           |\n"
        "          [5]\n"
        "      +-+  |\n"
        "[2]  [3]| [4]\n"
        "   \\  |-+/\n"
        "    \\ | /\n"
        "     [1]\n"
        "      |\n"
    ),
    # 19
    (
        "[3]\n"
        " |    +--+\n"
        "[2]  [6] |\n"
        " |    | \\+\n"
        "[1]  [4] [5]\n"
        " |    |   |\n"
        " +----+---+\n"
    ),
    # 20
    (
        " +--+\n"
        "[3] |   [5] [6]\n"
        " | \\+      \\ |\n"
        "[1] [2]     [4]\n"
        " |   |       |\n"
        " +---+-------+\n"
    ),
    # 21
    (
        " +--+\n"
        "[3] |   [6]\n"
        " | \\+    | \\\n"
        "[1] [2] [4] [5]\n"
        " |   |   |   |\n"
        " +---+---+---+\n"
    ),
    # 22
    (
        "          +--+\n"
        "[2]      [6] |\n"
        " |      / | \\+\n"
        "[1]  [3] [4] [5]\n"
        " |    |   |   |\n"
        " +----+---+---+\n"
    ),
    # 23
    (
        "           +--+\n"
        "     [3]  [6] |\n"
        "      |    | \\+\n"
        "[1]  [2]  [4] [5]\n"
        " |    |    |   |\n"
        " +----+----+---+\n"
    ),
    # 24
    (
        "               +--+\n"
        "              [6] |\n"
        "             / | \\+\n"
        "[1]  [2]  [3] [4] [5]\n"
        " |    |    |   |   |\n"
        " +----+----+---+---+\n"
    ),
    # 25
    (
        "                +--+\n"
        "               [6] |\n"
        "                | \\+\n"
        "[1]  [2]  [3]  [4] [5]\n"
        " |    |    |    |   |\n"
        " +----+----+----+---+\n"
    ),
    # 26
    (
        "               +--+\n"
        "     [3]  [5] [6] |\n"
        "      |      \\ |--+\n"
        "[1]  [2]      [4]\n"
        " |    |        |\n"
        " +----+--------+\n"
    ),
    # 27
    (
        "      +--+\n"
        "     [3] |  [5] [6]\n"
        "      |--+     \\ |\n"
        "[1]  [2]        [4]\n"
        " |    |          |\n"
        " +----+----------+\n"
    ),
    # 28
    (
        "      +--+\n"
        "     [5] |\n"
        "      |--+\n"
        "[2]  [4]\n"
        " |    |\n"
        "[1]  [3]  [6]\n"
        " |    |    |\n"
        " +----+----+\n"
    ),
    # 29
    (
        "                +--+\n"
        "          [4]  [6] |\n"
        "           |    |--+\n"
        "[1]  [2]  [3]  [5]\n"
        " |    |    |    |\n"
        " +----+----+----+\n"
    ),
    # 30
    (
        "           +--+\n"
        "          [5] |\n"
        "           |--+\n"
        "          [4]\n"
        "           |\n"
        "[1]  [2]  [3]  [6]\n"
        " |    |    |    |\n"
        " +----+----+----+\n"
    ),
    # 31
    (
        "                     +--+\n"
        "                    [6] |\n"
        "                     |--+\n"
        "[1]  [2]  [3]  [4]  [5]\n"
        " |    |    |    |    |\n"
        " +----+----+----+----+\n"
    ),
    # 32
    (
        "                          +--+\n"
        "[1]  [2]  [3]  [4]  [5]  [6] |\n"
        " |    |    |    |    |    |--+\n"
        " +----+----+----+----+----+\n"
    ),
]
# fmt: on


def algorithm_diagram(algorithm: int, unicode: bool = True) -> str:
    """
    Diagram for a stored algorithm value (0-31).

    Args:
        algorithm: Algorithm as stored in the voice (algorithm number - 1)
        unicode: Use box-drawing characters; otherwise plain ASCII

    Returns:
        Multi-line diagram, or an empty string for values out of range
    """
    diagrams = ALGORITHM_DIAGRAMS_UNICODE if unicode else ALGORITHM_DIAGRAMS_ASCII
    if 0 <= algorithm < len(diagrams):
        return diagrams[algorithm]
    return ""
