#!/usr/bin/env python3
"""
SVGO Export - CLI Interface

Compress exported SVG assets in place with svgo.

Usage:
    svgo-export optimize ~/Desktop/icons ~/Desktop/logos
    svgo-export handle export-finished.json --no-sound
    cat export-finished.json | svgo-export handle - --json-output
    svgo-export show-command ~/Desktop/icons
"""

import json
import logging
import shlex
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TaskProgressColumn,
    TimeRemainingColumn,
)
from rich.table import Table

from svgoexport import (
    ExportBatch,
    ExportCompletionHandler,
    NullSoundPlayer,
    SVGOOptimizer,
    SoundPlayer,
    unique_paths,
)
from svgoexport.optimizer import SVGO_PATH
from svgoexport.utils import format_size

console = Console()

svgo_path_option = click.option(
    "--svgo-path",
    default=SVGO_PATH,
    show_default=True,
    help="Location of the svgo executable",
)
no_sound_option = click.option(
    "--no-sound",
    is_flag=True,
    help="Don't play a sound when done",
)
json_output_option = click.option(
    "--json-output", "-j",
    is_flag=True,
    help="Output results as JSON",
)


def create_progress_bar(disable: bool = False):
    """Create a rich progress bar."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=console,
        disable=disable,
    )


def setup_logging(verbose: bool):
    """Send log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def create_sound_player(no_sound: bool):
    return NullSoundPlayer() if no_sound else SoundPlayer()


@click.group(invoke_without_command=True)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.pass_context
def cli(ctx, verbose: bool):
    """SVGO Export - Compress exported SVG files with svgo."""
    setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("folders", nargs=-1, type=click.Path(exists=True, file_okay=False))
@svgo_path_option
@no_sound_option
@json_output_option
def optimize(folders: tuple, svgo_path: str, no_sound: bool, json_output: bool):
    """Optimize the SVG files in one or more folders."""
    if not folders:
        console.print("[red]No folders specified[/red]")
        sys.exit(1)

    optimizer = SVGOOptimizer(svgo_path)
    results = []

    def optimize_and_record(folder: str) -> bool:
        result = optimizer.optimize_folder(folder)
        results.append(result)
        return result.success

    with create_progress_bar(disable=json_output) as progress:
        overall_task = progress.add_task(
            f"Optimizing {len(unique_paths(folders))} folders...",
            total=100,
        )

        handler = ExportCompletionHandler(
            optimizer=optimize_and_record,
            sound=create_sound_player(no_sound),
            progress_callback=lambda folder, percentage: progress.update(
                overall_task, completed=percentage
            ),
        )
        outcome = handler.handle_folders(folders)

    if json_output:
        click.echo(json.dumps({
            "total": len(results),
            "success": sum(1 for result in results if result.success),
            "failed": sum(1 for result in results if not result.success),
            "results": [result.to_dict() for result in results],
        }, indent=2))
    else:
        table = Table(title="Optimization Results")
        table.add_column("Folder", style="cyan")
        table.add_column("Status")
        table.add_column("Original Size", style="green")
        table.add_column("Optimized Size", style="green")
        table.add_column("Reduction", style="green")

        for result in results:
            table.add_row(
                result.folder,
                "[green]ok[/green]" if result.success else "[red]failed[/red]",
                format_size(result.original_size),
                format_size(result.optimized_size),
                f"{result.compression_ratio * 100:.1f}%",
            )

        console.print(table)

        for result in results:
            if result.error:
                console.print(f"[red]{result.folder}: {result.error}[/red]")

    if not outcome.success:
        sys.exit(1)


@cli.command()
@click.argument("payload", type=click.File("r"))
@svgo_path_option
@no_sound_option
@json_output_option
def handle(payload, svgo_path: str, no_sound: bool, json_output: bool):
    """Replay an export-finished event from a JSON file ('-' for stdin)."""
    try:
        batch = ExportBatch.from_action_context(json.load(payload))
    except ValueError as e:
        console.print(f"[red]Invalid export payload: {e}[/red]")
        sys.exit(2)

    handler = ExportCompletionHandler(
        optimizer=SVGOOptimizer(svgo_path),
        sound=create_sound_player(no_sound),
    )
    outcome = handler.handle(batch)

    if json_output:
        result = {"handled": outcome is not None}
        if outcome is not None:
            result.update(outcome.to_dict())
        click.echo(json.dumps(result, indent=2))
    elif outcome is None:
        console.print("No SVG exports found")
    else:
        status = "[bold green]Success[/bold green]" if outcome.success else "[bold red]Failed[/bold red]"
        console.print(Panel(
            f"Exports: {len(batch)}\n"
            f"Folders: {len(outcome.folders)}\n"
            f"Status: {status}",
            title="Export Compression",
        ))

    if outcome is not None and not outcome.success:
        sys.exit(1)


@cli.command("show-command")
@click.argument("folder")
@svgo_path_option
def show_command(folder: str, svgo_path: str):
    """Print the svgo command line used for a folder."""
    click.echo(shlex.join(SVGOOptimizer(svgo_path).build_command(folder)))


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
