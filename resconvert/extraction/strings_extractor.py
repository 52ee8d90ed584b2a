"""Extractor for <string> resources into Localizable.strings content."""

from typing import List, Optional

from ..models.resource_entry import StringEntry
from ..models.conversion_result import Diagnostics, ExtractionResult
from .patterns import STRING_PATTERN, NAME_ATTRIBUTE, get_attribute, get_group, iter_matches


class StringsExtractor:
    """Extracts <string name="...">...</string> entries from strings.xml text."""

    STAGE = "strings"

    def extract(self, source: str, diagnostics: Optional[Diagnostics] = None) -> ExtractionResult:
        """
        Convert every <string> entry in source into a Localizable.strings line.

        Args:
            source: Raw strings.xml content
            diagnostics: Sink for skipped matches (a new one is created if omitted)

        Returns:
            ExtractionResult whose output holds one `name = "value";` line per
            entry, in source order
        """
        if diagnostics is None:
            diagnostics = Diagnostics()

        entries = self.parse_entries(source, diagnostics)
        output = "\n".join(entry.to_strings_line() for entry in entries)

        return ExtractionResult(output=output, entries=entries, diagnostics=diagnostics)

    def parse_entries(self, source: str, diagnostics: Diagnostics) -> List[StringEntry]:
        """Parse entries without rendering them."""
        entries = []

        for match in iter_matches(STRING_PATTERN, source):
            name = get_attribute(match.group("attrs"), NAME_ATTRIBUTE)
            value = get_group(match, "value")
            if name is None or value is None:
                diagnostics.add(self.STAGE, "Could not parse a match, ignoring", match.start())
                continue
            entries.append(StringEntry(name=name, value=value))

        return entries
