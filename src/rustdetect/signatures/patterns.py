"""Rust fingerprints searched for in external tool output."""

import re

# Appended once a detector reaches its findings cap
TRUNCATION_MARKER = "... (more findings omitted)"

# Printable strings (strings). Compared against the lowercased line.
RUST_STRING_PATTERNS: list[str] = [
    "rust",
    "rustc",
    "cargo",
    "core::result::result",
    "core::option::option",
    "std::panic",
    "alloc::",
    "thread 'main' panicked",
]

# Full symbol table (nm -a). Itanium-mangled names mentioning rust anywhere;
# deliberately broad, so unrelated mangled names can match too.
RUST_SYMBOL_REGEX: re.Pattern = re.compile(r"_ZN.*rust.*")

# Headers and sections (readelf -a). Compared against the lowercased line.
ELF_PATTERNS: list[str] = [
    "rust",
    "rustc",
    ".rust_",
    "core::fmt",
    "core::panicking",
]

# Dynamic exports (nm -D). Case-sensitive, symbol names are exact.
ALLOCATOR_SYMBOLS: list[str] = [
    "__rdl_alloc",
    "__rdl_dealloc",
    "__rdl_realloc",
    "__rdl_alloc_zeroed",
    "__rust_alloc",
    "__rust_dealloc",
    "__rust_realloc",
]

# Disassembly (objdump -d). Compared against the lowercased line.
PANIC_PATTERNS: list[str] = [
    "panic",
    "core::panicking",
    "rust_panic",
    "rust_begin_unwind",
]

# Findings caps per artifact
STRINGS_CAP = 5
SYMBOLS_CAP = 5
ELF_CAP = 5
ALLOCATOR_CAP = 5
PANIC_CAP = 3

# Lines of disassembly kept on each side of a panic match
PANIC_CONTEXT_RADIUS = 2
PANIC_CONTEXT_LABEL = "Found panic-related code:"
