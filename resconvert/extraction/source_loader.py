"""Loader for Android strings.xml source files."""

from pathlib import Path
from typing import Union


class SourceLoadError(SystemExit):
    """
    Raised when the source file cannot be read.

    Subclasses SystemExit: a run without its source has nothing left to do,
    so the process terminates instead of reporting a recoverable error.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = str(path)
        super().__init__(f"Could not load contents of xml file at path: {self.path}")


def load_source(file_path: Union[str, Path]) -> str:
    """
    Read a strings.xml file as UTF-8 text.

    Args:
        file_path: Path to the strings.xml file

    Returns:
        The full file content

    Raises:
        SourceLoadError: If the file is missing, unreadable or not valid UTF-8
    """
    path = Path(file_path)
    try:
        data = path.read_bytes()
        return data.decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceLoadError(path) from e
