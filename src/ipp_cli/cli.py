"""Command-line interface for the IPP source assembler."""

import sys
from pathlib import Path

import click
from rich.text import Text

from ipp_cli.assembly import Assembler, AssemblyResult, SkipReason
from ipp_cli.config import BuildConfig
from ipp_cli.errors import IppError
from ipp_cli.utils.console import (
    _rich_success, _rich_error, _rich_info, _rich_warning, _rich_echo,
    _rich_panel, _create_fragments_table, _get_console
)
from ipp_cli.version import get_version


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return

    version_text = Text()
    version_text.append("IPP source assembler", style="bold cyan")
    version_text.append(f" version {get_version()}", style="white")
    _rich_panel(version_text, style="cyan")
    ctx.exit()


def _load_config(base_dir, config_file, **overrides):
    """Load BuildConfig and its fragment list, or exit with an error message."""
    try:
        config = BuildConfig.load(base_dir=base_dir, config_file=config_file, **overrides)
        return config, config.fragment_specs()
    except IppError as e:
        _rich_error(f"Configuration error: {e}", symbol="error")
        sys.exit(1)


def _report(result: AssemblyResult, primary: Path):
    """Print per-step diagnostics for an assembly run."""
    for step in result.steps:
        fragment = step.fragment
        if step.spliced:
            _rich_echo(
                f"Replace [{step.start}, {step.end}) with {fragment.path} ({step.replacement_length})",
                symbol="scissors",
            )
        elif step.reason == SkipReason.MARKER_NOT_FOUND:
            _rich_echo(f"Marker not found: {fragment.marker}", color="muted", symbol="skip")

    for warning in result.warnings:
        _rich_warning(warning, symbol="warning")

    _rich_info(f"{primary.name} length: {result.output_length}")


@click.group(help="IPP: inline fragment files into a single source file")
@click.option('--version', is_flag=True, callback=print_version,
              expose_value=False, is_eager=True, help="Show version and exit.")
def cli():
    """Main entry point for the IPP CLI."""


@cli.command(help="Assemble the primary file and write the flattened output")
@click.option('--base-dir', '-C', default=".", type=click.Path(file_okay=False),
              help="Directory to run the build in")
@click.option('--config', 'config_file', type=click.Path(dir_okay=False),
              help="Config file (default: <base-dir>/ipp.yml)")
@click.option('--output', '-o', help="Output path, relative to the base directory")
@click.option('--dry-run', is_flag=True, help="Assemble without writing the output file")
def build(base_dir, config_file, output, dry_run):
    """Assemble the primary file.

    Each configured fragment replaces the first occurrence of its marker.
    Missing markers or fragment files are reported and skipped.
    """
    config, specs = _load_config(base_dir, config_file, output=output, dry_run=dry_run)

    try:
        primary = config.primary_path
        assembler = Assembler(specs, config.header)
        result = assembler.build(primary, config.output_path, dry_run=config.dry_run)

        _rich_info(f"{primary.name} length: {result.input_length}")
        _report(result, primary)

        if result.written:
            _rich_success(f"written to {result.output_path}", symbol="check")
        else:
            _rich_info("Dry run: output not written", symbol="preview")

    except (IppError, OSError) as e:
        _rich_error(f"Build failed: {e}", symbol="error")
        sys.exit(1)


@cli.command(help="List configured fragments in the order they are applied")
@click.option('--base-dir', '-C', default=".", type=click.Path(file_okay=False),
              help="Directory to run the build in")
@click.option('--config', 'config_file', type=click.Path(dir_okay=False),
              help="Config file (default: <base-dir>/ipp.yml)")
def fragments(base_dir, config_file):
    """Show each fragment with its marker, path and availability."""
    config, specs = _load_config(base_dir, config_file)

    primary = config.primary_path
    source = primary.read_bytes() if primary.is_file() else None
    if source is None:
        _rich_warning(f"Primary file not found: {primary}", symbol="warning")

    rows = []
    for fragment in specs:
        file_state = "yes" if fragment.path.is_file() else "missing"
        if source is None:
            marker_state = "-"
        else:
            marker_state = "yes" if fragment.marker_bytes in source else "no"
        rows.append((fragment.name, fragment.marker, str(fragment.path), file_state, marker_state))

    console = _get_console()
    if console:
        console.print(_create_fragments_table(rows, title=f"Fragments for {primary}"))
    else:
        for index, row in enumerate(rows, start=1):
            click.echo(f"{index}. " + "  ".join(row))


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        _rich_error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
