# src/create_typerestjs/provisioner.py
from __future__ import annotations
import asyncio
import shutil
import subprocess
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .config import GeneratorConfig
from .exceptions import InstallerError
from .materializer import TemplateMaterializer
from .models import Answers, Cancelled
from .prompts import Elicitor, Prompter, RichPrompter
from .registry import resolve_configured_version

NAME_TOKEN = "{{name}}"
VERSION_TOKEN = "{{version}}"


class Provisioner:
    """Runs one interactive generation: elicit, materialize, install."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        *,
        console: Optional[Console] = None,
        prompter: Optional[Prompter] = None,
        cwd: Optional[Path] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.console = console or Console()
        self.prompter = prompter or RichPrompter(self.console)
        self.cwd = cwd or Path.cwd()

        materializer_args = {}
        if self.config.template_dir is not None:
            materializer_args["template_dir"] = self.config.template_dir
        self.materializer = TemplateMaterializer(**materializer_args)

    def run(self) -> bool:
        """Run the whole pipeline; return True only when the project was created."""
        try:
            result = Elicitor(
                self.prompter,
                cwd=self.cwd,
                default_project_name=self.config.default_project_name,
            ).run()

            if isinstance(result, Cancelled):
                self.console.print(f"[red]✖[/red] {result.message}")
                return False

            self.provision(result)
        except Exception as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return False

        return True

    def provision(self, answers: Answers) -> None:
        """Write the project for already-collected answers."""
        root = answers.root

        if answers.overwrite:
            self._status(f"Removing existing files in {root}")
            self.materializer.clear(root)

        version = asyncio.run(self._materialize_and_resolve(root))

        self._status(f"Writing {self.materializer.manifest_name}")
        self.materializer.apply_substitutions(
            self.materializer.manifest_path(root),
            {NAME_TOKEN: answers.package_name, VERSION_TOKEN: version},
        )
        self.materializer.finalize_dotfiles(root)

        if self.config.run_install:
            self._install(answers, root)
        if self.config.init_git:
            self._init_git(root)

        self._print_next_steps(answers)

    async def _materialize_and_resolve(self, root: Path) -> str:
        """Copy the template while the version lookup is in flight."""
        self._status(f"Copying template into {root}")
        version, _ = await asyncio.gather(
            resolve_configured_version(self.config),
            asyncio.to_thread(self.materializer.materialize, root),
        )
        self._status(f"Using typerestjs version {version}")
        return version

    def _install(self, answers: Answers, root: Path) -> None:
        command = answers.package_manager.install_command
        self._status(f"Running {' '.join(command)}")
        executable = shutil.which(command[0])
        if executable is None:
            self.console.print(f"[yellow]{command[0]} not found, skipping dependency installation[/yellow]")
            return

        completed = subprocess.run([executable, *command[1:]], cwd=root)

        if completed.returncode != 0:
            if self.config.strict_install:
                raise InstallerError(command, completed.returncode)
            self.console.print(f"[yellow]{' '.join(command)} exited with code {completed.returncode}[/yellow]")

    def _init_git(self, root: Path) -> None:
        self._status("Initializing git repository")
        try:
            subprocess.run(["git", "init"], cwd=root, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except FileNotFoundError:
            self.console.print("[yellow]git not found, skipping repository initialization[/yellow]")

    def _print_next_steps(self, answers: Answers) -> None:
        lines = ["", "[green]Done.[/green] Now run:", ""]
        if not answers.is_current_directory:
            lines.append(f"  cd {answers.target_dir.lstrip('/')}")
        lines.append(f"  {answers.package_manager.run_command(self.config.dev_script)}")
        lines.append("")
        self.console.print("\n".join(lines))

    def _status(self, message: str) -> None:
        if self.config.verbose:
            self.console.print(f"[dim]{message}[/dim]")
