"""Reading text files that may start with a UTF-8 byte order mark."""

from __future__ import annotations

import os
from pathlib import Path

_UTF8_BOM = b"\xef\xbb\xbf"


def read_file_without_bom(path: str | os.PathLike[str]) -> str:
    """Read a file as UTF-8, dropping a leading BOM and replacing bad bytes."""
    data = Path(path).read_bytes()
    return data.removeprefix(_UTF8_BOM).decode("utf-8", errors="replace")