"""Data models for the resource converter."""

from .resource_entry import StringEntry, PluralItem, PluralGroup
from .conversion_result import (
    Diagnostic,
    Diagnostics,
    ExtractionResult,
    WriteResult,
    ConversionReport,
)

__all__ = [
    "StringEntry",
    "PluralItem",
    "PluralGroup",
    "Diagnostic",
    "Diagnostics",
    "ExtractionResult",
    "WriteResult",
    "ConversionReport",
]
