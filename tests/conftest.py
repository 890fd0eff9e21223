# tests/conftest.py
from __future__ import annotations
from pathlib import Path
from typing import Any, List, Sequence
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from rich.console import Console

from create_typerestjs.config import GeneratorConfig


class ScriptedPrompter:
    """Prompter that replays canned answers and records every question."""

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.asked: List[dict] = []
        self.errors: List[str] = []

    def _next(self, kind: str, message: str, default: Any, choices: Sequence[str] = ()) -> Any:
        self.asked.append({"kind": kind, "message": message, "default": default, "choices": list(choices)})
        if not self.responses:
            raise AssertionError(f"Unexpected {kind} prompt: {message}")
        response = self.responses.pop(0)
        if isinstance(response, type) and issubclass(response, BaseException):
            raise response()
        return default if response is None else response

    def text(self, message: str, default: str) -> str:
        return self._next("text", message, default)

    def confirm(self, message: str, default: bool = False) -> bool:
        return self._next("confirm", message, default)

    def select(self, message: str, choices: Sequence[str], default: str) -> str:
        return self._next("select", message, default, choices)

    def error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def kinds(self) -> List[str]:
        return [q["kind"] for q in self.asked]


@pytest.fixture
def console():
    """Console that records output instead of writing to the terminal."""
    return Console(record=True, width=120, force_terminal=False)


@pytest.fixture
def template_dir(tmp_path):
    """A small template tree with a manifest and a staged dotfile."""
    template = tmp_path / "template"
    (template / "src").mkdir(parents=True)
    (template / "package.json").write_text(
        '{\n\t"name": "{{name}}",\n\t"version": "{{version}}",\n\t"private": true\n}\n',
        encoding="utf-8",
    )
    (template / "_gitignore").write_text("node_modules\n", encoding="utf-8")
    (template / "src" / "index.ts").write_text("export {}\n", encoding="utf-8")
    return template


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Working directory in which projects get generated."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def offline_config(template_dir):
    """Config pointing at the test template, with installer and git disabled."""
    return GeneratorConfig(template_dir=template_dir, run_install=False, init_git=False)


@pytest.fixture
def registry_unreachable():
    """Make every registry request fail with a connection error."""
    mock_client = AsyncMock()
    mock_client.get = AsyncMock(side_effect=httpx.ConnectError("Connection refused"))
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)

    with patch("httpx.AsyncClient", return_value=mock_client) as mock_cls:
        yield mock_cls


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Isolate configuration lookup to a temporary directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_dir))
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("CREATE_TYPERESTJS_CONFIG", raising=False)

    return config_dir


def make_project(root: Path, *names: str) -> Path:
    """Create a directory containing the given empty files."""
    root.mkdir(parents=True, exist_ok=True)
    for name in names:
        (root / name).write_text("", encoding="utf-8")
    return root
