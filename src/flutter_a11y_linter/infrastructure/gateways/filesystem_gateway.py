"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

import shutil
from fnmatch import fnmatchcase
from pathlib import Path

from flutter_a11y_linter.domain.protocols import FileSystemProtocol

# Undecodable bytes round-trip unchanged through read_text/write_text.
_ERRORS = "surrogateescape"


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def resolve_path(self, path: str) -> str:
        """Resolve and normalize a path string."""
        return str(Path(path).resolve())

    def is_directory(self, path: str) -> bool:
        """Check if path is a directory."""
        return Path(path).is_dir()

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def glob_dart_files(
        self, path: str, include: str, exclude: list[str], limit: int
    ) -> list[str]:
        """Get candidate files under path (recursive if directory), sorted and capped at limit."""
        path_obj = Path(path).resolve()
        if limit <= 0:
            return []
        if not path_obj.is_dir():
            return [str(path_obj)] if path_obj.is_file() else []
        found: list[str] = []
        for candidate in sorted(path_obj.glob(include)):
            if not candidate.is_file():
                continue
            relative = "/" + candidate.relative_to(path_obj).as_posix()
            if any(fnmatchcase(relative, pattern) for pattern in exclude):
                continue
            found.append(str(candidate))
            if len(found) >= limit:
                break
        return found

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read file content as text."""
        with open(path, encoding=encoding, errors=_ERRORS, newline="") as f:
            return f.read()

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        with open(path, "w", encoding=encoding, errors=_ERRORS, newline="") as f:
            f.write(content)

    def copy_file(self, source: str, destination: str) -> None:
        shutil.copy2(source, destination)

    def basename(self, path: str) -> str:
        return Path(path).name
