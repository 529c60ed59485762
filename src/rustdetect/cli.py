"""Command-line interface for rustdetect."""

import logging
import sys
from pathlib import Path

import typer

from rustdetect import __version__
from rustdetect.output.console import console, print_results, print_tool_status
from rustdetect.output.json_output import output_json
from rustdetect.scanner.detectors import DETECTORS
from rustdetect.scanner.engine import analyze_binary
from rustdetect.scanner.external_tools import DEFAULT_TIMEOUT, get_available_tools

app = typer.Typer(
    name="rustdetect",
    help="Detect whether a binary was compiled from Rust",
    add_completion=False,
)
logger = logging.getLogger("rustdetect")

USAGE = "Usage: rustdetect <binary_path>"


def configure_logging(verbose: bool = False) -> None:
    """Send rustdetect log records to stdout.

    Args:
        verbose: Log debug detail about each external tool and detector
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"rustdetect v{__version__}")
        raise typer.Exit()


@app.command()
def detect(
    binary_path: Path | None = typer.Argument(
        None,
        help="Binary to analyze",
        show_default=False,
    ),
    timeout: float = typer.Option(
        DEFAULT_TIMEOUT,
        "--timeout",
        "-t",
        envvar="RUSTDETECT_TIMEOUT",
        help="Seconds shared by all external tools (default: 30)",
        min=0.0,
    ),
    parallel: bool = typer.Option(
        False,
        "--parallel/--sequential",
        help="Run detectors concurrently",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output results as JSON to console",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log each external tool invocation",
    ),
    list_tools: bool = typer.Option(
        False,
        "--list-tools",
        help="Show which external analysis tools are installed and exit",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit",
    ),
) -> None:
    """Analyze a binary for Rust compiler fingerprints.

    Runs strings, nm, readelf and objdump against the binary and reports
    which techniques found Rust evidence. The exit code is 0 whatever the
    verdict.

    Examples:
        rustdetect ./target/release/app
        rustdetect /usr/bin/ls --json
        rustdetect ./app --parallel --timeout 10
    """
    configure_logging(verbose)

    if list_tools:
        tools = sorted({detector.tool for detector in DETECTORS})
        console.print("[bold]External analysis tools:[/bold]")
        print_tool_status(get_available_tools(tools))
        raise typer.Exit(0)

    if binary_path is None:
        console.print(USAGE)
        raise typer.Exit(1)

    if not binary_path.exists():
        logger.error("Binary file does not exist: path=%s", binary_path)
        raise typer.Exit(1)

    result = analyze_binary(binary_path, timeout=timeout, parallel=parallel)

    if json_output:
        output_json(result)
    else:
        print_results(result)


if __name__ == "__main__":
    app()
