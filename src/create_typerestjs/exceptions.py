# src/create_typerestjs/exceptions.py
from __future__ import annotations
from pathlib import Path
from typing import Sequence


class GeneratorError(Exception):
    """Base exception for create-typerestjs errors."""
    pass


class TemplateNotFoundError(GeneratorError):
    """Bundled template tree not found or inaccessible."""
    def __init__(self, template_path: str | Path):
        self.template_path = template_path
        super().__init__(f"Template not found: {template_path}")


class ManifestError(GeneratorError):
    """Manifest file missing from the materialized project."""
    def __init__(self, manifest_path: Path):
        self.manifest_path = manifest_path
        super().__init__(f"Manifest file not found: {manifest_path}")


class ConfigurationError(GeneratorError):
    """Configuration file is invalid or corrupted."""
    pass


class InstallerError(GeneratorError):
    """Dependency installer exited with a non-zero status."""
    def __init__(self, command: Sequence[str], returncode: int):
        self.command = list(command)
        self.returncode = returncode
        super().__init__(f"Command '{' '.join(self.command)}' failed with exit code {returncode}")
