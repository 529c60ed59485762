"""Combine detector evidence into a single verdict."""

from collections.abc import Iterable

from rustdetect.scanner.results import Confidence, Evidence, Verdict

# Positive detector count -> confidence; anything above the last entry plateaus
_CONFIDENCE_STEPS = [
    Confidence.NONE,
    Confidence.LOW,
    Confidence.MEDIUM,
    Confidence.HIGH,
    Confidence.VERY_HIGH,
]


def confidence_for_count(positive_count: int) -> Confidence:
    """Map a number of positive detectors to a confidence tier."""
    if positive_count < 0:
        raise ValueError(f"Positive count cannot be negative: {positive_count}")
    return _CONFIDENCE_STEPS[min(positive_count, len(_CONFIDENCE_STEPS) - 1)]


def analyse_evidence(evidence: Iterable[Evidence]) -> Verdict:
    """Decide whether the binary is Rust from the collected evidence.

    Every technique carries equal weight, and a single positive detector is
    enough for a match at the lowest confidence tier.
    """
    positive_count = sum(1 for e in evidence if e.positive)
    return Verdict(
        is_match=positive_count > 0,
        confidence=confidence_for_count(positive_count),
        positive_count=positive_count,
    )
