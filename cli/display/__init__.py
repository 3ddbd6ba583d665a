"""
CLI display modules.
"""

from cli.display.tables import (
    display_duplicates,
    display_file_header,
    display_operator_table,
    display_validation,
    display_voice_names,
    display_voice_summary,
)
from cli.display.hex_view import display_hex_dump, display_voice_data

__all__ = [
    "display_duplicates",
    "display_file_header",
    "display_operator_table",
    "display_validation",
    "display_voice_names",
    "display_voice_summary",
    "display_hex_dump",
    "display_voice_data",
]
