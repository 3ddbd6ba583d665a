"""
DX7Dump - Analyzer for Yamaha DX7 voice bank SysEx files.

This library provides tools to:
- Classify and read DX7 bulk dumps, single voice dumps and headerless dumps
- Validate sysex structure and checksums
- Decode packed and unpacked voice data
- Repair banks with a broken header, byte count or checksum
- Find duplicate voices in a bank

Example usage:
    from dx7dump import DumpAnalyzer

    analyzer = DumpAnalyzer()
    analysis = analyzer.analyze_file("rom1a.syx")
    for voice in analysis.voices:
        print(voice.algorithm_number, voice.name)
"""

__version__ = "1.2.0"
__author__ = "DX7Dump Contributors"

from dx7dump.analysis.dump_analyzer import DumpAnalysis, DumpAnalyzer
from dx7dump.analysis.duplicates import find_duplicates
from dx7dump.formats.layout import PackedVoice, UnpackedVoice
from dx7dump.formats.reader import DumpShape, classify, read_dump
from dx7dump.formats.sysex import BankDump, SingleVoiceDump
from dx7dump.formats.unpack import unpack_voice
from dx7dump.formats.validator import validate_bank, validate_single_voice
from dx7dump.formats.writer import repair_bank
from dx7dump.utils.checksum import calculate_dx7_checksum

__all__ = [
    "DumpAnalysis",
    "DumpAnalyzer",
    "find_duplicates",
    "PackedVoice",
    "UnpackedVoice",
    "DumpShape",
    "classify",
    "read_dump",
    "BankDump",
    "SingleVoiceDump",
    "unpack_voice",
    "validate_bank",
    "validate_single_voice",
    "repair_bank",
    "calculate_dx7_checksum",
]
