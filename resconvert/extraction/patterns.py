"""Regular expressions and match helpers shared by the extractors.

The extractors scan raw text instead of parsing XML, so partially broken
resource files still convert as far as they can.
"""

import re
from typing import Iterator, List, Optional, Tuple

# <string name="NAME">VALUE</string>, value on a single line, optionally wrapped onto its own line
STRING_PATTERN = re.compile(
    r"<string(?=[\s>])"  # Opening tag, not <string-array>
    r"(?P<attrs>[^>]*)(?<!/)>"  # Attributes, self-closing tags excluded
    r"\s*"
    r"(?P<value>.*?)"  # Value, kept verbatim
    r"\s*</string>",
    re.IGNORECASE,
)

# <plurals name="NAME">ITEMS</plurals>
PLURALS_PATTERN = re.compile(
    r"<plurals(?=[\s>])"
    r"(?P<attrs>[^>]*)(?<!/)>"
    r"(?P<items>.*?)"  # Items span, up to the first closing tag
    r"</plurals>",
    re.IGNORECASE | re.DOTALL,
)

# Optional <!-- COMMENT --> directly followed by <item quantity="QUANTITY">VALUE</item>
PLURAL_ITEM_PATTERN = re.compile(
    r"(?:<!--(?P<comment>(?:(?!-->).)*)-->\s*)?"  # Comment must not span another comment
    r"(?P<item><item(?=[\s>])"
    r"(?P<attrs>[^>]*)(?<!/)>"
    r"(?P<value>.*?)"
    r"</item>)",
    re.IGNORECASE | re.DOTALL,
)

# <!-- ... -->
COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)

_ATTRIBUTE_TEMPLATE = r"(?:^|\s){name}\s*=\s*(?:\"(?P<dq>[^\"]*)\"|'(?P<sq>[^']*)')"


def _attribute_pattern(name: str) -> re.Pattern:
    return re.compile(_ATTRIBUTE_TEMPLATE.format(name=re.escape(name)), re.IGNORECASE)


NAME_ATTRIBUTE = _attribute_pattern("name")
QUANTITY_ATTRIBUTE = _attribute_pattern("quantity")


def get_attribute(attrs: Optional[str], pattern: re.Pattern) -> Optional[str]:
    """
    Read an attribute value out of a raw attribute list.

    Args:
        attrs: Text between the tag name and the closing '>'
        pattern: One of the *_ATTRIBUTE patterns

    Returns:
        The attribute value, or None if it is absent or empty
    """
    if not attrs:
        return None
    match = pattern.search(attrs)
    if not match:
        return None
    value = match.group("dq")
    if value is None:
        value = match.group("sq")
    return value or None


def get_group(match: re.Match, key: str, allow_empty: bool = False) -> Optional[str]:
    """Get a named group from a match, treating non-participating groups as missing."""
    value = match.group(key)
    if value is None:
        return None
    if not value and not allow_empty:
        return None
    return value


def iter_matches(pattern: re.Pattern, text: str, start: int = 0, end: Optional[int] = None) -> Iterator[re.Match]:
    """Iterate over non-overlapping matches of pattern within text[start:end]."""
    if end is None:
        end = len(text)
    return pattern.finditer(text, start, end)


def normalize_comment(comment: str) -> Optional[str]:
    """Trim each comment line and drop blank ones."""
    lines = [line.strip() for line in comment.split("\n")]
    lines = [line for line in lines if line]
    if not lines:
        return None
    return "\n".join(lines)


def comment_spans(text: str, start: int = 0, end: Optional[int] = None) -> List[Tuple[int, int]]:
    """Get the (start, end) offsets of every XML comment within text[start:end]."""
    return [m.span() for m in iter_matches(COMMENT_PATTERN, text, start, end)]


def inside_spans(offset: int, spans: List[Tuple[int, int]]) -> bool:
    return any(span_start <= offset < span_end for span_start, span_end in spans)
