"""Configuration management for the resource converter."""

import os
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

load_dotenv()

# printf conversions accepted for NSStringFormatValueTypeKey
FORMAT_VALUE_TYPES = ("d", "i", "u", "ld", "lu", "lld", "llu", "f", "g", "e", "@")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    """Application configuration."""

    # Output file names
    strings_filename: str = field(
        default_factory=lambda: os.getenv("RESCONVERT_STRINGS_FILENAME", "Localizable.strings")
    )
    stringsdict_filename: str = field(
        default_factory=lambda: os.getenv("RESCONVERT_STRINGSDICT_FILENAME", "Localizable.stringsdict")
    )

    # Plural rule settings
    format_value_type: str = field(
        default_factory=lambda: os.getenv("RESCONVERT_FORMAT_VALUE_TYPE", "d")
    )

    # Write settings
    force_overwrite: bool = field(
        default_factory=lambda: _env_flag("RESCONVERT_FORCE_OVERWRITE")
    )

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if not self.strings_filename.strip():
            errors.append("RESCONVERT_STRINGS_FILENAME is empty")
        if not self.stringsdict_filename.strip():
            errors.append("RESCONVERT_STRINGSDICT_FILENAME is empty")
        if self.strings_filename == self.stringsdict_filename:
            errors.append("Strings and stringsdict file names must differ")
        if self.format_value_type not in FORMAT_VALUE_TYPES:
            errors.append(
                f"RESCONVERT_FORMAT_VALUE_TYPE must be one of {', '.join(FORMAT_VALUE_TYPES)}"
            )
        return errors


# Global config instance
config = Config()
