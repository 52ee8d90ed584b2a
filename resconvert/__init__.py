"""Convert Android string resources into Apple localization files."""

__version__ = "0.1.0"
