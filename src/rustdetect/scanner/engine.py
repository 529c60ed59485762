"""Analysis engine that runs every detector against a binary.

All detectors share one deadline. They are independent of each other, so
running them in a thread pool produces the same evidence as running them
one after another.
"""

import logging
import time
from collections.abc import Generator, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from rustdetect.scanner.aggregator import analyse_evidence
from rustdetect.scanner.detectors import DETECTORS, Detector, run_detector
from rustdetect.scanner.external_tools import DEFAULT_TIMEOUT, Deadline
from rustdetect.scanner.results import AnalysisResult, Evidence

logger = logging.getLogger(__name__)


def collect_evidence(
    binary_path: Path,
    deadline: Deadline,
    detectors: Sequence[Detector] = DETECTORS,
    parallel: bool = False,
) -> Generator[Evidence, None, None]:
    """Yield evidence from each detector in registration order.

    Args:
        binary_path: Binary to analyze
        deadline: Time budget shared by all external tools
        detectors: Detectors to run
        parallel: Run detectors concurrently

    Yields:
        Evidence, one per detector
    """
    if not parallel:
        for detector in detectors:
            yield run_detector(detector, binary_path, deadline)
        return

    with ThreadPoolExecutor(max_workers=max(1, len(detectors))) as executor:
        futures = [
            executor.submit(run_detector, detector, binary_path, deadline)
            for detector in detectors
        ]
        for future in futures:
            yield future.result()


def analyze_binary(
    binary_path: Path,
    timeout: float = DEFAULT_TIMEOUT,
    parallel: bool = False,
    detectors: Sequence[Detector] = DETECTORS,
) -> AnalysisResult:
    """Analyze a binary for Rust toolchain fingerprints.

    Args:
        binary_path: Path to the binary
        timeout: Seconds shared by all external tool invocations
        parallel: Run detectors concurrently
        detectors: Detectors to run, in report order

    Returns:
        AnalysisResult with per-detector evidence and the verdict
    """
    binary_path = Path(binary_path)
    start_time = time.perf_counter()
    deadline = Deadline(timeout)

    evidence = list(collect_evidence(binary_path, deadline, detectors, parallel=parallel))
    verdict = analyse_evidence(evidence)

    scan_time_ms = (time.perf_counter() - start_time) * 1000
    logger.debug(
        "%s: %d/%d detectors positive in %.1fms",
        binary_path,
        verdict.positive_count,
        len(evidence),
        scan_time_ms,
    )

    return AnalysisResult(
        binary_path=binary_path,
        evidence=evidence,
        verdict=verdict,
        scan_time_ms=scan_time_ms,
    )
