"""Pytest fixtures for rustdetect tests."""

import pytest

from rustdetect.scanner.external_tools import ToolOutput

# Canned tool output, keyed by the command without the binary path
RUST_STRINGS_OUTPUT = "\n".join(
    [
        "/lib64/ld-linux-x86-64.so.2",
        "thread 'main' panicked at src/main.rs:4:5",
        "called `Option::unwrap()` on a `None` value",
        "/rustc/90b35a6239c3d8bdabc530a6a0816f7ff89a0aaf/library/std/src/io/mod.rs",
        "GLIBC_2.34",
        "",
    ]
)

RUST_SYMBOLS_OUTPUT = "\n".join(
    [
        "0000000000004010 B __bss_start",
        "0000000000008a50 T _ZN3std2rt10lang_start17h5e0c8e1cbd8ae3b1E",
        "0000000000009c30 t _ZN12rust_runtime4main17h0123456789abcdefE",
        "                 U malloc@GLIBC_2.2.5",
        "",
    ]
)

RUST_READELF_OUTPUT = "\n".join(
    [
        "ELF Header:",
        "  Magic:   7f 45 4c 46 02 01 01 00 00 00 00 00 00 00 00 00",
        "  [27] .comment          PROGBITS         0000000000000000  0003b0b8",
        "String dump of section '.comment':",
        "  [     0]  rustc version 1.75.0 (82e1608df 2023-12-21)",
        "",
    ]
)

RUST_DYNAMIC_OUTPUT = "\n".join(
    [
        "                 w __cxa_finalize@GLIBC_2.2.5",
        "0000000000012340 T __rust_alloc",
        "0000000000012350 T __rust_dealloc",
        "                 U free@GLIBC_2.2.5",
        "",
    ]
)

RUST_OBJDUMP_OUTPUT = "\n".join(
    [
        "0000000000008a50 <main>:",
        "    8a50:\t48 83 ec 18          \tsub    $0x18,%rsp",
        "    8a54:\t48 8d 3d 05 00 00 00 \tlea    0x5(%rip),%rdi",
        "    8a5b:\te8 a0 1f 00 00       \tcall   aa00 <_ZN4core9panicking5panic17h1a2b3c4dE>",
        "    8a60:\t0f 0b                \tud2",
        "    8a62:\t66 90                \txchg   %ax,%ax",
        "",
    ]
)

STRINGS = "strings"
SYMBOLS = "nm -a"
READELF = "readelf -a"
DYNAMIC = "nm -D"
OBJDUMP = "objdump -d"

ALL_TOOLS = [STRINGS, SYMBOLS, READELF, DYNAMIC, OBJDUMP]


@pytest.fixture
def fake_binary(tmp_path):
    """Create a file standing in for the binary under analysis."""
    filepath = tmp_path / "app"
    filepath.write_bytes(b"\x7fELF\x02\x01\x01" + b"\x00" * 57)
    return filepath


@pytest.fixture
def empty_outputs():
    """Every tool succeeds with no output."""
    return {tool: "" for tool in ALL_TOOLS}


@pytest.fixture
def rust_outputs():
    """Tool output for a typical Rust binary."""
    return {
        STRINGS: RUST_STRINGS_OUTPUT,
        SYMBOLS: RUST_SYMBOLS_OUTPUT,
        READELF: RUST_READELF_OUTPUT,
        DYNAMIC: RUST_DYNAMIC_OUTPUT,
        OBJDUMP: RUST_OBJDUMP_OUTPUT,
    }


@pytest.fixture
def fake_tools(monkeypatch):
    """Replace external tool invocations with canned output.

    Returns an installer taking a dict of command -> stdout and an optional
    collection of commands that fail. Commands missing from the dict fail
    too. The installer returns the list of commands that were run.
    """

    def install(outputs, failing=()):
        calls = []

        def fake_run_tool(command, deadline):
            key = " ".join(command[:-1])
            calls.append(key)
            if key in failing or key not in outputs:
                return ToolOutput(command=tuple(command), success=False, error="tool not installed")
            return ToolOutput(command=tuple(command), success=True, stdout=outputs[key])

        monkeypatch.setattr("rustdetect.scanner.detectors.run_tool", fake_run_tool)
        return calls

    return install
