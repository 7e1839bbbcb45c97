"""Atomic file replacement helpers.

Content is staged in a sibling temporary file, flushed to disk and moved over the
destination with :meth:`pathlib.Path.replace`, so readers only ever see the previous or
the new complete file.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO

TEMP_SUFFIX = ".tmp"


def _replace_via_temp(dest: Path, fill: Callable[[BinaryIO], None]) -> Path:
    tmp_path = dest.with_name(f".{dest.name}{TEMP_SUFFIX}")
    try:
        with tmp_path.open("wb") as handle:
            fill(handle)
            handle.flush()
            os.fsync(handle.fileno())
        tmp_path.replace(dest)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    return dest


def atomic_write_bytes(dest: Path, payload: bytes) -> Path:
    """Write ``payload`` to ``dest`` atomically."""
    return _replace_via_temp(dest, lambda handle: handle.write(payload))


def atomic_copy_stream(source: BinaryIO, dest: Path, *, chunk_size: int = 8192) -> Path:
    """Copy everything readable from ``source`` into ``dest`` atomically."""
    return _replace_via_temp(dest, lambda handle: shutil.copyfileobj(source, handle, chunk_size))


__all__ = ["TEMP_SUFFIX", "atomic_copy_stream", "atomic_write_bytes"]
