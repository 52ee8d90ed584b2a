"""Data models for extraction diagnostics and conversion results."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Any


@dataclass
class Diagnostic:
    """A non-fatal event recorded while converting."""

    stage: str  # strings, plurals, writer
    message: str
    offset: Optional[int] = None  # character offset in the source, if known

    def __str__(self) -> str:
        if self.offset is None:
            return f"[{self.stage}] {self.message}"
        return f"[{self.stage}] {self.message} (at offset {self.offset})"


class Diagnostics:
    """Collects diagnostics emitted by extractors and writers."""

    def __init__(self) -> None:
        self._records: List[Diagnostic] = []

    def add(self, stage: str, message: str, offset: Optional[int] = None) -> Diagnostic:
        diagnostic = Diagnostic(stage=stage, message=message, offset=offset)
        self._records.append(diagnostic)
        return diagnostic

    def for_stage(self, stage: str) -> List[Diagnostic]:
        """Get the diagnostics recorded by one stage."""
        return [d for d in self._records if d.stage == stage]

    @property
    def records(self) -> List[Diagnostic]:
        return list(self._records)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


@dataclass
class ExtractionResult:
    """Represents the output of one extractor pass."""

    output: str
    entries: List[Any] = field(default_factory=list)  # StringEntry or PluralGroup
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def count(self) -> int:
        return len(self.entries)


@dataclass
class WriteResult:
    """Represents the outcome of writing one artifact."""

    path: Path
    written: bool = False
    skipped: bool = False

    @property
    def status(self) -> str:
        if self.written:
            return "written"
        if self.skipped:
            return "skipped"
        return "not written"


@dataclass
class ConversionReport:
    """Represents the result of converting a single strings.xml file."""

    source_path: Path
    strings: ExtractionResult
    plurals: ExtractionResult
    diagnostics: Diagnostics
    writes: List[WriteResult] = field(default_factory=list)

    @property
    def plural_item_count(self) -> int:
        return sum(len(group.items) for group in self.plurals.entries)

    @property
    def skipped_writes(self) -> List[WriteResult]:
        return [w for w in self.writes if w.skipped]
