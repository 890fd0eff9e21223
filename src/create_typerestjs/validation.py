# src/create_typerestjs/validation.py
from __future__ import annotations
import re
from pathlib import Path

DEFAULT_TARGET_DIR = "typerestjs-project"


class PackageNameValidator:
    """Validates and derives npm package names."""

    # Registry naming rules: optional "@scope/" followed by the bare name
    VALID_NAME_RE = re.compile(r"(?:@[a-z0-9\-*~][a-z0-9\-*._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*")

    @classmethod
    def is_valid(cls, name: str) -> bool:
        """Check whether a name is accepted by the package registry."""
        return cls.VALID_NAME_RE.fullmatch(name) is not None

    @staticmethod
    def to_valid(name: str) -> str:
        """Derive a package name candidate from an arbitrary directory name.

        The result is not guaranteed to be valid (an empty or all-symbol input
        yields an empty string or hyphens), so callers still run ``is_valid``.
        """
        name = name.strip().lower()
        name = re.sub(r"\s+", "-", name)
        name = re.sub(r"^[._]", "", name, count=1)
        return re.sub(r"[^a-z0-9\-~]+", "-", name)

    @staticmethod
    def normalize_target_dir(raw: str | None, default: str = DEFAULT_TARGET_DIR) -> str:
        """Turn a raw project-name answer into the target directory name."""
        value = (raw or "").strip().rstrip("/")
        return value or default

    @staticmethod
    def target_path(cwd: Path, target_dir: str) -> Path:
        """Join the target directory onto *cwd*; absolute names stay under *cwd*."""
        return cwd / target_dir.lstrip("/")


class DirectoryInspector:
    """Read-only queries about the target directory."""

    VCS_MARKERS = {".git"}

    @classmethod
    def is_empty(cls, path: Path) -> bool:
        """Check whether a directory is empty, ignoring a lone VCS marker.

        Raises OSError when the path is missing or unreadable.
        """
        entries = [entry.name for entry in Path(path).iterdir()]
        return not entries or (len(entries) == 1 and entries[0] in cls.VCS_MARKERS)

    @staticmethod
    def exists(path: Path) -> bool:
        return Path(path).exists()

    @classmethod
    def has_conflict(cls, path: Path) -> bool:
        """A target conflicts when it exists and already has content."""
        return cls.exists(path) and not cls.is_empty(path)
