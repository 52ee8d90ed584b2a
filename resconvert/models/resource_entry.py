"""Data models for Android string resources."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class StringEntry:
    """Represents a single <string> resource."""

    name: str
    value: str

    def to_strings_line(self) -> str:
        """Render the entry as a Localizable.strings line."""
        return f'{self.name} = "{self.value}";'


@dataclass
class PluralItem:
    """Represents one quantity variant of a <plurals> resource."""

    quantity: str  # zero, one, two, few, many, other
    value: str
    comment: Optional[str] = None

    @property
    def has_comment(self) -> bool:
        return bool(self.comment)


@dataclass
class PluralGroup:
    """Represents a complete <plurals> resource."""

    name: str
    items: List[PluralItem] = field(default_factory=list)

    @property
    def quantities(self) -> List[str]:
        """Quantity tags in source order."""
        return [item.quantity for item in self.items]
