"""
DX7 dump file analyzer.

Runs the per-file pipeline: classify and read the file, validate its
structure, decode its voices and, on request, repair it or look for
duplicate voices. Every call returns a fresh DumpAnalysis; nothing is shared
between files.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from dx7dump.analysis.duplicates import find_duplicates
from dx7dump.formats.layout import VoiceParams
from dx7dump.formats.reader import DumpFile, DumpShape, read_dump
from dx7dump.formats.validator import (
    SingleVoiceReport,
    ValidationReport,
    headerless_bank_report,
    headerless_single_voice_report,
    validate_bank,
    validate_single_voice,
)
from dx7dump.formats.writer import repair_bank

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[Path], bool]


@dataclass
class DumpAnalysis:
    """
    Complete analysis result of one dump file.

    Attributes:
        dump: The file contents as read
        bank_report: Validation result (bank shapes)
        voice_report: Validation result (single voice shapes)
        repaired: True once the file was rewritten by ``DumpAnalyzer.fix``
    """

    dump: DumpFile
    bank_report: Optional[ValidationReport] = None
    voice_report: Optional[SingleVoiceReport] = None
    repaired: bool = False
    duplicates: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def filepath(self) -> Path:
        return self.dump.path

    @property
    def shape(self) -> DumpShape:
        return self.dump.shape

    @property
    def filesize(self) -> int:
        return self.dump.size

    @property
    def is_bank(self) -> bool:
        return self.shape.is_bank

    @property
    def valid(self) -> bool:
        """True when the voices can be decoded and shown."""
        if self.bank_report is not None:
            return self.bank_report.passed
        return self.voice_report is not None and self.voice_report.passed

    @property
    def needs_repair(self) -> bool:
        return (
            self.bank_report is not None
            and self.bank_report.passed
            and self.bank_report.needs_repair
            and not self.repaired
        )

    @property
    def soft_error(self) -> bool:
        """True when the file is usable but has recoverable problems."""
        if self.bank_report is not None:
            return self.bank_report.soft_error
        return self.dump.headerless

    @property
    def messages(self) -> List[str]:
        if self.bank_report is not None:
            return self.bank_report.messages
        messages = list(self.voice_report.messages) if self.voice_report else []
        if self.dump.headerless:
            messages.insert(0, f"File seems to be a headerless dump ({self.filesize} Bytes)")
        return messages

    @property
    def voices(self) -> List[VoiceParams]:
        """Decoded voices; empty when the file failed validation."""
        if not self.valid:
            return []
        if self.dump.bank is not None:
            return self.dump.bank.voices
        return [self.dump.single_voice.voice]


class DumpAnalyzer:
    """
    Analyze DX7 dump files.

    Example:
        analyzer = DumpAnalyzer()
        analysis = analyzer.analyze_file("rom1a.syx")
        if analysis.needs_repair:
            analyzer.fix(analysis, confirm=lambda path: True)
    """

    def analyze_file(self, filepath: Union[str, Path]) -> DumpAnalysis:
        """
        Read and validate a dump file.

        Raises:
            FileReadError: If the file cannot be read
            FileSizeError: If the file length matches no known shape
        """
        return self._analyze(read_dump(filepath))

    def _analyze(self, dump: DumpFile) -> DumpAnalysis:
        analysis = DumpAnalysis(dump=dump)

        if dump.shape == DumpShape.FULL_BANK:
            analysis.bank_report = validate_bank(dump.bank)
        elif dump.shape == DumpShape.HEADERLESS_BANK:
            analysis.bank_report = headerless_bank_report(dump.size)
        elif dump.shape == DumpShape.FULL_SINGLE_VOICE:
            analysis.voice_report = validate_single_voice(dump.single_voice)
        else:
            analysis.voice_report = headerless_single_voice_report()

        logger.debug(
            "%s: valid=%s needs_repair=%s", dump.path, analysis.valid, analysis.needs_repair
        )
        return analysis

    def fix(
        self,
        analysis: DumpAnalysis,
        confirm: Optional[ConfirmFn] = None,
        backup: bool = True,
    ) -> bool:
        """
        Repair a bank file when validation found recoverable problems.

        Args:
            analysis: Result of ``analyze_file``
            confirm: Called with the file path before writing; returning
                False skips the repair. None repairs without asking.
            backup: Keep the original file as ``<name>.ORIG``

        Returns:
            True if the file was rewritten

        Raises:
            RepairError: If the backup or the write fails
        """
        if not analysis.needs_repair:
            return False

        if confirm is not None and not confirm(analysis.filepath):
            logger.debug("Repair of %s declined", analysis.filepath)
            return False

        repair_bank(analysis.dump.bank, analysis.filepath, backup=backup)
        analysis.repaired = True
        return True

    def find_duplicates(self, analysis: DumpAnalysis) -> List[Tuple[int, int]]:
        """Find duplicate voices in a valid bank; single voices have none."""
        if analysis.is_bank and analysis.valid:
            analysis.duplicates = find_duplicates(analysis.dump.bank)
        else:
            analysis.duplicates = []
        return analysis.duplicates
