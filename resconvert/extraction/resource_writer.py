"""Writer for generated Localizable.strings and Localizable.stringsdict files."""

from pathlib import Path
from typing import Callable, Optional, Union

import click
from rich.console import Console
from rich.markup import escape

from ..models.conversion_result import Diagnostics, WriteResult

# Decides whether an existing file may be overwritten
OverwriteDecider = Callable[[Path], bool]


class ConsoleOverwritePrompt:
    """Asks on the terminal whether an existing file should be overwritten."""

    OPTIONS = {
        "Y": "Overwrite existing {filename}",
        "N": "Skip this step",
    }

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def __call__(self, path: Path) -> bool:
        self.console.print(f"[yellow]Strings file already exists at destination location:[/yellow] {escape(str(path))}")
        for option, description in self.OPTIONS.items():
            self.console.print(f"  [cyan]{option}[/cyan] {escape(description.format(filename=path.name))}")

        choice = click.prompt(
            "Choose an option",
            type=click.Choice(list(self.OPTIONS), case_sensitive=False),
            default="N",
        )
        return choice.upper() == "Y"


class ResourceWriter:
    """Writes converted resources to a destination directory."""

    STAGE = "writer"

    def __init__(
        self,
        force_overwrite: bool = False,
        decide_overwrite: Optional[OverwriteDecider] = None,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.force_overwrite = force_overwrite
        self.decide_overwrite = decide_overwrite or ConsoleOverwritePrompt()
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()

    def write(self, content: str, destination_dir: Union[str, Path], filename: str) -> WriteResult:
        """
        Write content to destination_dir/filename.

        Args:
            content: Serialized file content
            destination_dir: Directory to write into (created if missing)
            filename: Name of the file to write

        Returns:
            WriteResult telling whether the file was written or skipped

        Raises:
            OSError: If the directory or file cannot be written
        """
        path = Path(destination_dir) / filename

        if not self.force_overwrite and path.exists():
            if not self.decide_overwrite(path):
                self.diagnostics.add(self.STAGE, f"Skipping {filename}...")
                return WriteResult(path=path, skipped=True)

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)

        return WriteResult(path=path, written=True)
