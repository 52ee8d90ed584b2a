"""Resource extraction and file handling modules."""

from .source_loader import load_source, SourceLoadError
from .strings_extractor import StringsExtractor
from .plurals_extractor import PluralsExtractor
from .resource_writer import ResourceWriter, ConsoleOverwritePrompt

__all__ = [
    "load_source",
    "SourceLoadError",
    "StringsExtractor",
    "PluralsExtractor",
    "ResourceWriter",
    "ConsoleOverwritePrompt",
]
