"""Read ``Name: value`` header blocks from host package files."""

import re
from pathlib import Path
from typing import Iterable

# The host only looks at the start of a file for its header block.
HEADER_READ_BYTES = 8192

_TRAILING_COMMENT = re.compile(r"\s*(?:\*/|\?>).*$")


def _cleanup_header_value(value: str) -> str:
    return _TRAILING_COMMENT.sub("", value).strip()


def parse_header_block(text: str, names: Iterable[str]) -> dict[str, str]:
    """Extract the requested headers from a block of text.

    Lines may carry comment markers before the name (`` * ``, ``#``, ``//``).
    Matching is case-insensitive; missing headers map to an empty string.
    """
    headers = {}
    for name in names:
        pattern = re.compile(
            r"^[ \t/*#@]*" + re.escape(name) + r":(.*)$",
            re.IGNORECASE | re.MULTILINE,
        )
        match = pattern.search(text)
        headers[name] = _cleanup_header_value(match.group(1)) if match else ""
    return headers


def read_file_headers(path: Path | str, names: Iterable[str]) -> dict[str, str]:
    """Read the header block at the top of a file."""
    with open(path, "rb") as f:
        raw = f.read(HEADER_READ_BYTES)
    text = raw.decode("utf-8", errors="ignore").replace("\r\n", "\n").replace("\r", "\n")
    return parse_header_block(text, names)
