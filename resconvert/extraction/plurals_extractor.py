"""Extractor for <plurals> resources into Localizable.stringsdict content."""

from typing import List, Optional

from ..models.resource_entry import PluralGroup, PluralItem
from ..models.conversion_result import Diagnostics, ExtractionResult
from .patterns import (
    PLURALS_PATTERN,
    PLURAL_ITEM_PATTERN,
    NAME_ATTRIBUTE,
    QUANTITY_ATTRIBUTE,
    get_attribute,
    get_group,
    iter_matches,
    comment_spans,
    inside_spans,
    normalize_comment,
)

INDENT = "    "

PLIST_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" '
    '"http://www.apple.com/DTDs/PropertyList-1.0.dtd">\n'
    '<plist version="1.0">'
)
PLIST_FOOTER = "</plist>"

# Format variable referenced by NSStringLocalizedFormatKey
FORMAT_VARIABLE = "COUNT"


def _line(level: int, text: str) -> str:
    return f"{INDENT * level}{text}"


class PluralsExtractor:
    """
    Extracts <plurals> groups from strings.xml text and renders them as a
    stringsdict property list.

    Every group becomes a NSStringPluralRuleType dictionary:

        <key>NAME</key>
        <dict>
            <key>NSStringLocalizedFormatKey</key>
            <string>%#@COUNT@</string>
            <key>COUNT</key>
            <dict>
                <key>NSStringFormatSpecTypeKey</key>
                <string>NSStringPluralRuleType</string>
                <key>NSStringFormatValueTypeKey</key>
                <string>d</string>
                <key>QUANTITY</key>
                <string>VALUE</string>
            </dict>
        </dict>
    """

    STAGE = "plurals"

    def __init__(self, format_value_type: str = "d"):
        self.format_value_type = format_value_type

    def extract(self, source: str, diagnostics: Optional[Diagnostics] = None) -> ExtractionResult:
        """
        Convert every <plurals> group in source into a stringsdict document.

        Args:
            source: Raw strings.xml content
            diagnostics: Sink for skipped groups (a new one is created if omitted)

        Returns:
            ExtractionResult whose output is the full property list document
        """
        if diagnostics is None:
            diagnostics = Diagnostics()

        groups = self.parse_groups(source, diagnostics)
        output = self.render_document(groups)

        return ExtractionResult(output=output, entries=groups, diagnostics=diagnostics)

    def parse_groups(self, source: str, diagnostics: Diagnostics) -> List[PluralGroup]:
        """Parse plural groups without rendering them."""
        groups = []

        for match in iter_matches(PLURALS_PATTERN, source):
            name = get_attribute(match.group("attrs"), NAME_ATTRIBUTE)
            if name is None:
                diagnostics.add(self.STAGE, "Could not parse a match, ignoring", match.start())
                continue

            items = self._parse_items(source, match.start("items"), match.end("items"))
            groups.append(PluralGroup(name=name, items=items))

        return groups

    def _parse_items(self, source: str, start: int, end: int) -> List[PluralItem]:
        """Parse the <item> elements inside one group's items span."""
        items = []
        commented_out = comment_spans(source, start, end)

        for match in iter_matches(PLURAL_ITEM_PATTERN, source, start, end):
            if inside_spans(match.start("item"), commented_out):
                continue

            quantity = get_attribute(match.group("attrs"), QUANTITY_ATTRIBUTE)
            value = get_group(match, "value", allow_empty=True)
            if quantity is None or value is None:
                continue

            comment = match.group("comment")
            if comment is not None:
                comment = normalize_comment(comment)

            items.append(PluralItem(quantity=quantity, value=value, comment=comment))

        return items

    def render_document(self, groups: List[PluralGroup]) -> str:
        """Wrap rendered groups in the property list envelope."""
        lines = [PLIST_HEADER, _line(1, "<dict>")]
        for group in groups:
            lines.extend(self.render_group(group, level=2))
        lines.append(_line(1, "</dict>"))
        lines.append(PLIST_FOOTER)
        return "\n".join(lines)

    def render_group(self, group: PluralGroup, level: int = 0) -> List[str]:
        """Render one group as property list lines starting at the given nesting level."""
        lines = [
            _line(level, f"<key>{group.name}</key>"),
            _line(level, "<dict>"),
            _line(level + 1, "<key>NSStringLocalizedFormatKey</key>"),
            _line(level + 1, f"<string>%#@{FORMAT_VARIABLE}@</string>"),
            _line(level + 1, f"<key>{FORMAT_VARIABLE}</key>"),
            _line(level + 1, "<dict>"),
            _line(level + 2, "<key>NSStringFormatSpecTypeKey</key>"),
            _line(level + 2, "<string>NSStringPluralRuleType</string>"),
            _line(level + 2, "<key>NSStringFormatValueTypeKey</key>"),
            _line(level + 2, f"<string>{self.format_value_type}</string>"),
        ]

        for item in group.items:
            if item.has_comment:
                lines.append(_line(level + 2, f"<!-- {item.comment} -->"))
            lines.append(_line(level + 2, f"<key>{item.quantity}</key>"))
            lines.append(_line(level + 2, f"<string>{item.value}</string>"))

        lines.append(_line(level + 1, "</dict>"))
        lines.append(_line(level, "</dict>"))
        return lines
