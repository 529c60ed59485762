"""Fingerprint patterns for Rust toolchain artifacts."""

from rustdetect.signatures.patterns import (
    ALLOCATOR_SYMBOLS,
    ELF_PATTERNS,
    PANIC_PATTERNS,
    RUST_STRING_PATTERNS,
    RUST_SYMBOL_REGEX,
    TRUNCATION_MARKER,
)

__all__ = [
    "RUST_STRING_PATTERNS",
    "RUST_SYMBOL_REGEX",
    "ELF_PATTERNS",
    "ALLOCATOR_SYMBOLS",
    "PANIC_PATTERNS",
    "TRUNCATION_MARKER",
]
