"""
Command-line entry point for treescan.

Traverse a directory, gather per-file metadata (location, name, extension,
size, mod time, is_dir, permissions) plus md5 / sha1 / sha256 computed in
parallel, and store everything in a single report file.
"""

from __future__ import annotations

from pathlib import Path

import typer

from treescan.core.config.settings import settings
from treescan.core.exceptions import TreeScanError
from treescan.core.log_config import level_from_name, setup_logging
from treescan.features.source_scanner.domain.models import ScanRequest
from treescan.features.source_scanner.service.scanner import scanner

app = typer.Typer(help="Inventory a directory tree with md5/sha1/sha256 digests.", add_completion=False)


@app.command()
def scan(
    start_dir: Path = typer.Option(
        Path("."),
        "--start-dir",
        help="Starting directory for file scanning.",
    ),
    sub_dirs: bool = typer.Option(
        False,
        "--sub-dirs",
        help="Scan subdirectories (default: immediate children only).",
    ),
    output: Path = typer.Option(
        Path(settings.OUTPUT_FILE),
        "--output",
        help="Output file path (.db/.sqlite/.sqlite3 writes SQLite, anything else JSON).",
    ),
    concurrency: int = typer.Option(
        settings.MAX_WORKERS,
        "--concurrency",
        help="Number of concurrent workers.",
    ),
    chunk_size: int = typer.Option(
        settings.CHUNK_SIZE,
        "--chunk-size",
        help="Read chunk size in bytes (power of two).",
    ),
    strict: bool = typer.Option(
        settings.STRICT_WALK,
        "--strict/--no-strict",
        help="Abort when a subdirectory cannot be listed instead of skipping it.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output.",
    ),
) -> None:
    """
    Scan START_DIR and write the inventory report to OUTPUT.
    """
    setup_logging(level_from_name(settings.LOG_LEVEL, debug=debug))

    try:
        request = ScanRequest(
            root_path=start_dir,
            recursive=sub_dirs,
            output_path=output,
            max_workers=concurrency,
            chunk_size=chunk_size,
            strict_walk=strict,
            debug=debug,
        )
        summary = scanner.scan(request)
    except TreeScanError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Inventoried {summary.files_processed} of {summary.files_found} entries into {summary.output_path}"
    )
    typer.echo("Done!")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
