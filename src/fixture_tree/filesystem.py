"""Filesystem backend for operation trees.

The RealFileSystem implementation wraps standard library operations.
Errors raised by pathlib and shutil propagate unmodified.
"""

from __future__ import annotations

import shutil
from pathlib import Path


class RealFileSystem:
    """Production storage backend.

    Wraps standard library Path and shutil operations.
    Satisfies the StorageBackend protocol structurally.
    """

    def read_text(self, path: Path) -> str:
        """Read UTF-8 text from a file, keeping line endings as written."""
        with path.open(encoding="utf-8", newline="") as f:
            return f.read()

    def write_text(self, path: Path, content: str) -> None:
        """Write UTF-8 text to a file without translating line endings."""
        path.write_text(content, encoding="utf-8", newline="")

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        path.mkdir(parents=parents, exist_ok=exist_ok)

    def unlink(self, path: Path, missing_ok: bool = False) -> None:
        """Remove a file."""
        path.unlink(missing_ok=missing_ok)

    def rmtree(self, path: Path, missing_ok: bool = False) -> None:
        """Remove a directory tree."""
        if missing_ok and not path.exists():
            return
        shutil.rmtree(path)
