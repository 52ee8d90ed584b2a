"""Converts one strings.xml file into Localizable.strings and Localizable.stringsdict."""

from pathlib import Path
from typing import Optional, Union

from .config import Config, config as default_config
from .extraction.source_loader import load_source
from .extraction.strings_extractor import StringsExtractor
from .extraction.plurals_extractor import PluralsExtractor
from .extraction.resource_writer import ResourceWriter, OverwriteDecider
from .models.conversion_result import ConversionReport, Diagnostics


class ResourceConverter:
    """Runs the load, extract and write steps for a single source file."""

    def __init__(
        self,
        config: Optional[Config] = None,
        force_overwrite: Optional[bool] = None,
        decide_overwrite: Optional[OverwriteDecider] = None,
    ):
        self.config = config or default_config
        if force_overwrite is None:
            force_overwrite = self.config.force_overwrite
        self.force_overwrite = force_overwrite
        self.decide_overwrite = decide_overwrite
        self.strings_extractor = StringsExtractor()
        self.plurals_extractor = PluralsExtractor(format_value_type=self.config.format_value_type)

    def extract(self, source_path: Union[str, Path]) -> ConversionReport:
        """
        Load and convert a source file without writing anything.

        Args:
            source_path: Path to the strings.xml file

        Returns:
            ConversionReport with both artifacts and all diagnostics
        """
        source = load_source(source_path)
        diagnostics = Diagnostics()

        strings = self.strings_extractor.extract(source, diagnostics)
        plurals = self.plurals_extractor.extract(source, diagnostics)

        return ConversionReport(
            source_path=Path(source_path),
            strings=strings,
            plurals=plurals,
            diagnostics=diagnostics,
        )

    def convert(self, source_path: Union[str, Path], destination_dir: Union[str, Path]) -> ConversionReport:
        """
        Convert a source file and write both artifacts to destination_dir.

        A declined overwrite skips only that artifact. Write errors propagate.
        """
        report = self.extract(source_path)

        writer = ResourceWriter(
            force_overwrite=self.force_overwrite,
            decide_overwrite=self.decide_overwrite,
            diagnostics=report.diagnostics,
        )
        report.writes.append(
            writer.write(report.strings.output, destination_dir, self.config.strings_filename)
        )
        report.writes.append(
            writer.write(report.plurals.output, destination_dir, self.config.stringsdict_filename)
        )

        return report
