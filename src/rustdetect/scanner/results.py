"""Result data structures for detector evidence and the overall verdict."""

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Confidence(Enum):
    """Confidence tiers derived from the number of positive detectors."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very high"


@dataclass(frozen=True)
class Evidence:
    """Findings from a single detection technique."""

    technique: str
    findings: tuple[str, ...] = ()
    positive: bool = False

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so the record stays immutable
        object.__setattr__(self, "findings", tuple(self.findings))
        if self.positive and not self.findings:
            raise ValueError(f"Positive evidence for {self.technique!r} has no findings")
        if not self.positive and self.findings:
            raise ValueError(f"Negative evidence for {self.technique!r} carries findings")

    @classmethod
    def negative(cls, technique: str) -> "Evidence":
        """Evidence for a technique that failed or matched nothing."""
        return cls(technique=technique)

    def to_dict(self) -> dict:
        """Convert evidence to dictionary."""
        return {
            "technique": self.technique,
            "positive": self.positive,
            "findings": list(self.findings),
        }


@dataclass(frozen=True)
class Verdict:
    """Overall classification of a binary."""

    is_match: bool
    confidence: Confidence
    positive_count: int = 0


@dataclass
class AnalysisResult:
    """Complete result of analyzing a single binary."""

    binary_path: Path
    evidence: list[Evidence] = field(default_factory=list)
    verdict: Verdict = field(default_factory=lambda: Verdict(False, Confidence.NONE))
    scan_time_ms: float = 0.0

    @property
    def is_rust(self) -> bool:
        return self.verdict.is_match

    def to_dict(self) -> dict:
        """Convert analysis result to dictionary."""
        return {
            "binary": str(self.binary_path),
            "is_rust": self.verdict.is_match,
            "confidence": self.verdict.confidence.value,
            "positive_count": self.verdict.positive_count,
            "scan_time_ms": self.scan_time_ms,
            "evidence": [e.to_dict() for e in self.evidence],
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert analysis result to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
