"""JSON output for analysis results."""

import sys
from typing import TextIO

from rustdetect.scanner.results import AnalysisResult


def output_json(
    result: AnalysisResult,
    file: TextIO | None = None,
    indent: int = 2,
) -> None:
    """Output an analysis result as JSON.

    Args:
        result: Analysis result
        file: Output file (default: stdout)
        indent: JSON indentation level
    """
    file = file or sys.stdout
    file.write(result.to_json(indent=indent))
    file.write("\n")
