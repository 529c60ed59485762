"""rustdetect - Heuristic detection of Rust-compiled binaries."""

__version__ = "0.1.0"
