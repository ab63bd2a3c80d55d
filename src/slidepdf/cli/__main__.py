"""Typer-based CLI for slidepdf."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import typer
from rich import print

from slidepdf.core import qa as qa_check
from slidepdf.core.config import load_config
from slidepdf.core.errors import SlideshowError
from slidepdf.core.pipeline import DEFAULT_OUTPUT_DIR, run_slideshow

app = typer.Typer(add_completion=False, help="Build a PDF slideshow from a list of images")
logger = logging.getLogger("slidepdf")


def _setup_logging(verbose: bool) -> None:
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=logging.INFO,
            format="[%(levelname)s] %(message)s",
            stream=sys.stdout,
        )
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


@app.command()
def make(
    config: Path = typer.Argument(..., exists=True, dir_okay=False, help="YAML slideshow config"),
    output_dir: Path = typer.Option(DEFAULT_OUTPUT_DIR, "--output-dir", "-o", help="Directory for the PDF"),
    page_breaks: str = typer.Option(
        "emitted",
        "--page-breaks",
        help="'emitted' breaks only between drawn pages; 'index' follows list positions",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Generate the slideshow described by CONFIG."""
    _setup_logging(verbose)
    if page_breaks not in ("emitted", "index"):
        print(f"[red]Unknown page break policy:[/] {page_breaks}")
        raise typer.Exit(code=1)

    try:
        spec, geometry = load_config(config)
        result = run_slideshow(spec, output_dir, geometry=geometry, page_breaks=page_breaks)
    except (SlideshowError, OSError) as exc:
        logger.error("%s", exc)
        print("[red]Failed to generate slideshow[/]")
        raise typer.Exit(code=1)

    print("[green]OK[/] →", json.dumps(result, ensure_ascii=False, indent=2))


@app.command()
def qa(pdf: Path) -> None:
    """Show page count and page size of a generated PDF."""
    try:
        report = qa_check.run(pdf)
    except FileNotFoundError:
        print("PDF not found")
        raise typer.Exit(code=1)
    print(json.dumps(report, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    app()
