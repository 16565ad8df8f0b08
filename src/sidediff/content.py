"""Pure helpers for turning file blobs into line sequences."""

from __future__ import annotations

DEFAULT_SNIFF_BYTES = 8000


def is_binary(data: bytes, *, sniff_bytes: int = DEFAULT_SNIFF_BYTES) -> bool:
    """Treat a blob as binary if a NUL byte appears in its first `sniff_bytes` bytes."""

    return b"\0" in data[:sniff_bytes]


def decode_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def split_lines(text: str) -> list[str]:
    """Split text into lines without newline markers.

    A trailing newline does not produce an empty final line, and one `\\r` is
    stripped from each line so CRLF files align with LF files.
    """

    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
