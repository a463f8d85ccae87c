"""CSV Source Resolution — default-file auto-detection and paste buffering.

Invariants:
    - find_default_csv returns the FIRST existing regular file, in search order
    - paste_buffer always deletes its temporary file, even if loading fails
"""

import os
import tempfile
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path


def candidate_paths(
    name: str, search_dirs: Iterable[str], base: Path | None = None,
) -> list[Path]:
    root = base or Path.cwd()
    return [root / directory / name for directory in search_dirs]


def find_default_csv(
    name: str, search_dirs: Iterable[str], base: Path | None = None,
) -> Path | None:
    """Locate *name* in the usual relative locations (cwd, src/, parents)."""
    for path in candidate_paths(name, search_dirs, base):
        if path.is_file():
            return path
    return None


@contextmanager
def paste_buffer(lines: Iterable[str]) -> Iterator[Path]:
    """Write pasted lines to a temporary .csv file and yield its path."""
    fd, name = tempfile.mkstemp(prefix="movies_paste_", suffix=".csv")
    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            for line in lines:
                fh.write(line + "\n")
        yield path
    finally:
        path.unlink(missing_ok=True)
