# src/create_typerestjs/models.py
from __future__ import annotations
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from .validation import PackageNameValidator


class PackageManager(str, Enum):
    """Supported dependency installers, in prompt order."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"

    @property
    def install_command(self) -> List[str]:
        return [self.value, "install"]

    def run_command(self, script: str) -> str:
        return f"{self.value} run {script}"


class Answers(BaseModel):
    """Finalized answers collected from the operator."""

    model_config = ConfigDict(frozen=True)

    project_name: str
    package_name: str
    overwrite: Optional[bool] = None
    package_manager: PackageManager = PackageManager.NPM

    # Target directory as typed and its resolved location
    target_dir: str
    root: Path

    @field_validator("package_name")
    @classmethod
    def validate_package_name(cls, v: str) -> str:
        if not PackageNameValidator.is_valid(v):
            raise ValueError(f"Invalid package.json name: {v!r}")
        return v

    @property
    def is_current_directory(self) -> bool:
        return self.target_dir == "."


class Cancelled(BaseModel):
    """Elicitation ended without answers; nothing should be written."""

    model_config = ConfigDict(frozen=True)

    message: str = "Operation cancelled"


ElicitationResult = Union[Answers, Cancelled]
