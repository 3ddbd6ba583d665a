"""
Dump analysis module.

Provides the per-file pipeline and duplicate detection for DX7 banks.
"""

from dx7dump.analysis.dump_analyzer import DumpAnalyzer, DumpAnalysis
from dx7dump.analysis.duplicates import find_duplicates

__all__ = [
    "DumpAnalyzer",
    "DumpAnalysis",
    "find_duplicates",
]
