"""Detectors that look for Rust fingerprints in external tool output.

Each detector pairs one external analysis command with a pure scanning
function ``(text) -> Evidence``. The scanning functions share one shape:
walk the output line by line, record a line on its first matching pattern,
and stop with a truncation marker once the findings cap is reached.
"""

import logging
import re
from collections.abc import Callable, Generator, Iterable
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from rustdetect.scanner.external_tools import Deadline, run_tool
from rustdetect.scanner.results import Evidence
from rustdetect.signatures.patterns import (
    ALLOCATOR_CAP,
    ALLOCATOR_SYMBOLS,
    ELF_CAP,
    ELF_PATTERNS,
    PANIC_CAP,
    PANIC_CONTEXT_LABEL,
    PANIC_CONTEXT_RADIUS,
    PANIC_PATTERNS,
    RUST_STRING_PATTERNS,
    RUST_SYMBOL_REGEX,
    STRINGS_CAP,
    SYMBOLS_CAP,
    TRUNCATION_MARKER,
)

logger = logging.getLogger(__name__)


def _collect(technique: str, matches: Iterable[str], cap: int) -> Evidence:
    """Build evidence from matches, truncating at cap."""
    if cap < 1:
        raise ValueError(f"Findings cap must be at least 1, got {cap}")
    findings: list[str] = []
    for finding in matches:
        findings.append(finding)
        if len(findings) >= cap:
            findings.append(TRUNCATION_MARKER)
            break
    return Evidence(technique=technique, findings=tuple(findings), positive=bool(findings))


def _matches_any(line: str, patterns: list[str], lowercase: bool) -> bool:
    haystack = line.lower() if lowercase else line
    return any(pattern in haystack for pattern in patterns)


def scan_substrings(
    technique: str,
    text: str,
    patterns: list[str],
    cap: int,
    lowercase: bool = True,
    strip: bool = False,
) -> Evidence:
    """Scan text line by line for literal substrings.

    Args:
        technique: Name recorded on the evidence
        text: Raw tool output
        patterns: Substrings to look for (lowercase when lowercase=True)
        cap: Maximum number of findings before truncating
        lowercase: Compare against the lowercased line
        strip: Record the matching line without surrounding whitespace

    Returns:
        Evidence with each matching line as a finding
    """
    matches = (
        line.strip() if strip else line
        for line in text.split("\n")
        if _matches_any(line, patterns, lowercase)
    )
    return _collect(technique, matches, cap)


def scan_regex(technique: str, text: str, regex: re.Pattern, cap: int) -> Evidence:
    """Scan text line by line for a regular expression."""
    matches = (line for line in text.split("\n") if regex.search(line))
    return _collect(technique, matches, cap)


def _context_blocks(
    lines: list[str],
    patterns: list[str],
    radius: int,
    label: str,
) -> Generator[str, None, None]:
    for i, line in enumerate(lines):
        if _matches_any(line, patterns, lowercase=True):
            start = max(0, i - radius)
            end = min(len(lines), i + radius + 1)
            yield label + "\n" + "\n".join(lines[start:end])


def scan_with_context(
    technique: str,
    text: str,
    patterns: list[str],
    cap: int,
    radius: int = PANIC_CONTEXT_RADIUS,
    label: str = PANIC_CONTEXT_LABEL,
) -> Evidence:
    """Scan disassembly, recording each match with surrounding lines.

    The window is clamped to the output, so matches on the first or last
    line yield a shorter block.
    """
    blocks = _context_blocks(text.split("\n"), patterns, radius, label)
    return _collect(technique, blocks, cap)


@dataclass(frozen=True)
class Detector:
    """One detection technique: an external command and a scan of its output."""

    technique: str
    argv: tuple[str, ...]
    scan: Callable[[str], Evidence]

    @property
    def tool(self) -> str:
        return self.argv[0]

    def command(self, binary_path: str) -> list[str]:
        """Full argv for running this detector against a binary."""
        return [*self.argv, binary_path]


def _make_detector(
    technique: str,
    argv: list[str],
    scanner: Callable[..., Evidence],
    **scan_options,
) -> Detector:
    return Detector(
        technique=technique,
        argv=tuple(argv),
        scan=partial(scanner, technique, **scan_options),
    )


STRINGS_TECHNIQUE = "Rust-specific strings"
SYMBOLS_TECHNIQUE = "Rust symbol names"
ELF_TECHNIQUE = "ELF headers and sections"
ALLOCATOR_TECHNIQUE = "Rust memory allocator"
PANIC_TECHNIQUE = "Rust panic handlers"

# Registration order is report order
DETECTORS: tuple[Detector, ...] = (
    _make_detector(
        STRINGS_TECHNIQUE,
        ["strings"],
        scan_substrings,
        patterns=RUST_STRING_PATTERNS,
        cap=STRINGS_CAP,
    ),
    _make_detector(
        SYMBOLS_TECHNIQUE,
        ["nm", "-a"],
        scan_regex,
        regex=RUST_SYMBOL_REGEX,
        cap=SYMBOLS_CAP,
    ),
    _make_detector(
        ELF_TECHNIQUE,
        ["readelf", "-a"],
        scan_substrings,
        patterns=ELF_PATTERNS,
        cap=ELF_CAP,
        strip=True,
    ),
    _make_detector(
        ALLOCATOR_TECHNIQUE,
        ["nm", "-D"],
        scan_substrings,
        patterns=ALLOCATOR_SYMBOLS,
        cap=ALLOCATOR_CAP,
        lowercase=False,
    ),
    _make_detector(
        PANIC_TECHNIQUE,
        ["objdump", "-d"],
        scan_with_context,
        patterns=PANIC_PATTERNS,
        cap=PANIC_CAP,
    ),
)


def run_detector(detector: Detector, binary_path: Path | str, deadline: Deadline) -> Evidence:
    """Run one detector against a binary.

    Tool failures are folded into negative evidence and never raised.
    """
    output = run_tool(detector.command(str(binary_path)), deadline)
    if not output.success:
        logger.debug("%s: no output from %s (%s)", detector.technique, output.tool_name, output.error)
        return Evidence.negative(detector.technique)

    evidence = detector.scan(output.stdout)
    logger.debug(
        "%s: %s (%d findings)",
        detector.technique,
        "positive" if evidence.positive else "negative",
        len(evidence.findings),
    )
    return evidence
