"""Command-line interface for the resource converter."""

import click
from pathlib import Path
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .converter import ResourceConverter
from .extraction.resource_writer import ConsoleOverwritePrompt
from .models.conversion_result import ConversionReport
from .config import config

console = Console()


@click.group()
@click.version_option(version=__version__)
def cli():
    """Converting Android resources to iOS resources."""
    pass


@cli.command()
@click.argument("source_path", type=click.Path(dir_okay=False))
@click.argument("destination_path", type=click.Path(file_okay=False))
@click.option(
    "--overwrite", "-o",
    is_flag=True,
    help="Overwrites the existing Localizable files"
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print the generated files without saving"
)
def strings(source_path: str, destination_path: str, overwrite: bool, dry_run: bool):
    """Convert a strings.xml file into Localizable.strings and Localizable.stringsdict files.

    SOURCE_PATH is the strings.xml file to convert. DESTINATION_PATH is the
    directory the Localizable files are written to.
    """
    # Validate config
    errors = config.validate()
    if errors:
        console.print("[red]Configuration errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        raise click.Abort()

    converter = ResourceConverter(
        config=config,
        force_overwrite=overwrite or config.force_overwrite,
        decide_overwrite=ConsoleOverwritePrompt(console),
    )

    console.print(f"[blue]Reading:[/blue] {escape(source_path)}")

    try:
        if dry_run:
            report = converter.extract(source_path)
        else:
            report = converter.convert(source_path, destination_path)
    except Exception as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if dry_run:
        _print_artifact(config.strings_filename, report.strings.output)
        _print_artifact(config.stringsdict_filename, report.plurals.output)

    _print_diagnostics(report)
    _print_summary(report)

    if dry_run:
        console.print("\n[yellow]Dry run - no changes saved[/yellow]")
    else:
        console.print("[green]Done![/green]")


@cli.command()
@click.argument("source_path", type=click.Path(dir_okay=False))
def stats(source_path: str):
    """Show resource counts for a strings.xml file."""
    report = ResourceConverter(config=config).extract(source_path)

    table = Table(title=f"Statistics for {Path(source_path).name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Strings", str(report.strings.count))
    table.add_row("Plural groups", str(report.plurals.count))
    table.add_row("Plural items", str(report.plural_item_count))
    table.add_row("Skipped matches", str(len(report.diagnostics)))

    console.print(table)


def _print_artifact(filename: str, content: str):
    """Print a generated file verbatim."""
    console.rule(filename)
    console.print(content, markup=False, highlight=False)


def _print_diagnostics(report: ConversionReport):
    """Print the warnings collected during conversion."""
    for diagnostic in report.diagnostics:
        console.print(f"[yellow]Warning:[/yellow] {escape(str(diagnostic))}", highlight=False)


def _print_summary(report: ConversionReport):
    """Print conversion statistics."""
    table = Table(title=f"Conversion of {report.source_path.name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Strings", str(report.strings.count))
    table.add_row("Plural groups", str(report.plurals.count))
    table.add_row("Plural items", str(report.plural_item_count))
    table.add_row("Warnings", str(len(report.diagnostics)))
    for result in report.writes:
        table.add_row(result.path.name, result.status)

    console.print(table)


if __name__ == "__main__":
    cli()
