"""Rich console output for analysis results."""

from rich.console import Console
from rich.markup import escape

from rustdetect.scanner.results import AnalysisResult, Evidence

# Findings are raw tool output and must never be wrapped, styled or emojified
console = Console(soft_wrap=True, highlight=False, emoji=False)

MATCH_ICON = "✅"
NO_MATCH_ICON = "❌"


def print_results(result: AnalysisResult) -> None:
    """Print the verdict followed by the evidence of every technique.

    Args:
        result: Analysis result to report
    """
    path = escape(str(result.binary_path))
    if result.is_rust:
        confidence = result.verdict.confidence.value
        console.print(
            f"{MATCH_ICON} The binary '{path}' appears to be compiled from Rust "
            f"(confidence: {confidence})"
        )
    else:
        console.print(f"{NO_MATCH_ICON} The binary '{path}' does not appear to be compiled from Rust")
    console.print()

    console.print("Detailed analysis:")
    console.print("=================")
    for evidence in result.evidence:
        _print_evidence(evidence)


def _print_evidence(evidence: Evidence) -> None:
    """Print a single technique and its findings."""
    icon = MATCH_ICON if evidence.positive else NO_MATCH_ICON
    console.print(f"{icon} {escape(evidence.technique)}:")
    if evidence.findings:
        for finding in evidence.findings:
            console.print(f"  • {escape(finding)}")
    else:
        console.print("  • No evidence found")
    console.print()


def print_tool_status(tools: dict[str, bool]) -> None:
    """Print which external analysis tools are installed."""
    for tool, available in tools.items():
        status = "[green]installed[/green]" if available else "[red]not found[/red]"
        console.print(f"  {tool}: {status}")
