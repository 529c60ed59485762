"""Output formatters for analysis results."""

from rustdetect.output.console import print_results
from rustdetect.output.json_output import output_json

__all__ = ["print_results", "output_json"]
