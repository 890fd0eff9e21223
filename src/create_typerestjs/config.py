# src/create_typerestjs/config.py
from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigurationError
from .validation import DEFAULT_TARGET_DIR

CONFIG_ENV_VAR = "CREATE_TYPERESTJS_CONFIG"


class GeneratorConfig(BaseModel):
    """User configuration for the generator."""

    default_project_name: str = DEFAULT_TARGET_DIR
    fallback_version: str = "1.0.0"

    # Version lookup
    registry_url: str = "https://registry.npmjs.org"
    registry_package: str = "typerestjs"
    registry_timeout: float = Field(default=3.0, gt=0)

    # Provisioning
    template_dir: Optional[Path] = None
    run_install: bool = True
    init_git: bool = True
    strict_install: bool = False
    dev_script: str = "dev"

    verbose: bool = False

    @classmethod
    def get_config_paths(cls) -> list[Path]:
        """Get possible configuration file locations in order of precedence.

        The working directory is not searched: it may be the project target.
        """
        paths = []

        if env_path := os.getenv(CONFIG_ENV_VAR):
            paths.append(Path(env_path))

        if xdg_config := os.getenv("XDG_CONFIG_HOME"):
            paths.append(Path(xdg_config) / "create-typerestjs" / "config.yml")
        else:
            paths.append(Path.home() / ".config" / "create-typerestjs" / "config.yml")

        paths.append(Path.home() / ".create-typerestjs.yml")

        return paths

    @classmethod
    def load(cls) -> GeneratorConfig:
        """Load config from standard locations."""
        for config_path in cls.get_config_paths():
            if config_path.exists():
                try:
                    data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
                    if data is None:
                        continue  # Empty file
                    return cls.model_validate(data)
                except yaml.YAMLError as e:
                    raise ConfigurationError(f"Invalid YAML in config file {config_path}: {e}") from e
                except ValidationError as e:
                    raise ConfigurationError(f"Invalid settings in config file {config_path}: {e}") from e
                except OSError as e:
                    raise ConfigurationError(f"Error reading config file {config_path}: {e}") from e

        return cls()
