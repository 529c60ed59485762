"""Scanner modules for detecting Rust-compiled binaries.

Architecture:
    External tools (external_tools.py)
        - strings, nm, readelf, objdump
        - One shared deadline, failures returned as values

    Detectors (detectors.py)
        - One per technique, pure scan of one tool's output
        - Tool failure degrades to negative evidence

    Aggregation (aggregator.py)
        - Positive detector count -> confidence tier
"""

from rustdetect.scanner.aggregator import analyse_evidence, confidence_for_count
from rustdetect.scanner.detectors import DETECTORS, Detector, run_detector
from rustdetect.scanner.engine import analyze_binary, collect_evidence
from rustdetect.scanner.external_tools import Deadline, ToolOutput, run_tool
from rustdetect.scanner.results import AnalysisResult, Confidence, Evidence, Verdict

__all__ = [
    # Core analysis
    "analyze_binary",
    "collect_evidence",
    "AnalysisResult",
    "Evidence",
    "Verdict",
    "Confidence",
    # Detectors
    "DETECTORS",
    "Detector",
    "run_detector",
    "analyse_evidence",
    "confidence_for_count",
    # External tools
    "Deadline",
    "ToolOutput",
    "run_tool",
]
