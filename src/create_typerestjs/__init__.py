# src/create_typerestjs/__init__.py
from __future__ import annotations

__all__ = ["__version__", "Answers", "GeneratorConfig", "Provisioner"]
__version__ = "0.1.0"

from .models import Answers, Cancelled, PackageManager
from .config import GeneratorConfig
from .provisioner import Provisioner
from .exceptions import (
    GeneratorError,
    TemplateNotFoundError,
    ManifestError,
    ConfigurationError,
    InstallerError,
)
