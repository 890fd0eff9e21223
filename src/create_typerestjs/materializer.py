# src/create_typerestjs/materializer.py
"""Copies the bundled project template into a target directory."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, Field

from .exceptions import ManifestError, TemplateNotFoundError

BUNDLED_TEMPLATE_DIR = Path(__file__).parent / "template"


class TemplateMaterializer(BaseModel):
    """Materializes the template tree and fills in its manifest placeholders."""

    template_dir: Path = Field(default_factory=lambda: BUNDLED_TEMPLATE_DIR, description="Template tree")
    manifest_name: str = "package.json"
    # Dotfiles cannot ship inside the template, so they are staged under another name
    staging_name: str = "_gitignore"
    dotfile_name: str = ".gitignore"

    def clear(self, target: Path) -> None:
        """Remove everything inside *target*.

        The directory itself is kept so that ``.`` stays a valid working
        directory. Nothing happens if *target* does not exist.
        """
        if not target.exists():
            return
        for entry in target.iterdir():
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()

    def materialize(self, target: Path) -> None:
        """Recursively copy the template tree into *target*, creating it if absent."""
        if not self.template_dir.is_dir():
            raise TemplateNotFoundError(self.template_dir)
        shutil.copytree(self.template_dir, target, dirs_exist_ok=True)

    def manifest_path(self, target: Path) -> Path:
        return target / self.manifest_name

    def apply_substitutions(self, manifest_path: Path, substitutions: Mapping[str, str]) -> None:
        """Replace the first occurrence of each placeholder token in place.

        Templates must contain each token at most once; later occurrences
        are left untouched.
        """
        if not manifest_path.is_file():
            raise ManifestError(manifest_path)

        content = manifest_path.read_text(encoding="utf-8")
        for token, value in substitutions.items():
            content = content.replace(token, value, 1)
        manifest_path.write_text(content, encoding="utf-8")

    def finalize_dotfiles(self, target: Path) -> Path:
        """Rename the staged dotfile to its conventional name."""
        return (target / self.staging_name).rename(target / self.dotfile_name)
