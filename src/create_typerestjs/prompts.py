# src/create_typerestjs/prompts.py
"""Interactive elicitation of project settings.

The questions are an ordered list of :class:`PromptStep` descriptors. Each
step carries an applicability predicate evaluated against the answers given
so far; :class:`Elicitor` walks the list once, skipping steps whose predicate
is false. Answers are final once accepted.

Cancellation (Ctrl-C, end of input, or declining the overwrite confirmation)
is returned as a :class:`~create_typerestjs.models.Cancelled` value instead of
being raised, so callers decide what to do before anything touches disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Literal, Optional, Protocol, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field
from rich.console import Console
from rich.prompt import Confirm, Prompt

from .models import Answers, Cancelled, ElicitationResult, PackageManager
from .validation import DEFAULT_TARGET_DIR, DirectoryInspector, PackageNameValidator

StepKind = Literal["text", "confirm", "select", "gate"]


class Prompter(Protocol):
    """Renders questions to the operator."""

    def text(self, message: str, default: str) -> str: ...

    def confirm(self, message: str, default: bool = False) -> bool: ...

    def select(self, message: str, choices: Sequence[str], default: str) -> str: ...

    def error(self, message: str) -> None: ...


class RichPrompter:
    """Prompter backed by ``rich.prompt``."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def text(self, message: str, default: str) -> str:
        return Prompt.ask(message, default=default, console=self.console)

    def confirm(self, message: str, default: bool = False) -> bool:
        return Confirm.ask(message, default=default, console=self.console)

    def select(self, message: str, choices: Sequence[str], default: str) -> str:
        return Prompt.ask(message, choices=list(choices), default=default, console=self.console)

    def error(self, message: str) -> None:
        self.console.print(f"[red]{message}[/red]")


class ElicitationContext(BaseModel):
    """Mutable state for a single elicitation run."""

    cwd: Path
    default_project_name: str = DEFAULT_TARGET_DIR
    target_dir: str = DEFAULT_TARGET_DIR
    answers: Dict[str, Any] = Field(default_factory=dict)

    @property
    def root(self) -> Path:
        return PackageNameValidator.target_path(self.cwd, self.target_dir)

    @property
    def is_current_directory(self) -> bool:
        return self.target_dir == "."

    def derived_name(self) -> str:
        """Package name implied by the target directory."""
        if self.is_current_directory:
            return self.cwd.resolve().name
        return self.target_dir


def _always(ctx: ElicitationContext) -> bool:
    return True


def _no_default(ctx: ElicitationContext) -> Any:
    return None


def _accept(value: Any) -> Union[bool, str]:
    return True


class PromptStep(BaseModel):
    """One question in the elicitation sequence."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    kind: StepKind
    message: Callable[[ElicitationContext], str] = lambda ctx: ""
    applies: Callable[[ElicitationContext], bool] = _always
    default: Callable[[ElicitationContext], Any] = _no_default
    # Returns True to accept, or an error message to re-prompt with
    validator: Callable[[Any], Union[bool, str]] = _accept
    choices: List[str] = Field(default_factory=list)
    on_answer: Optional[Callable[[ElicitationContext, Any], None]] = None


def _update_target_dir(ctx: ElicitationContext, value: str) -> None:
    ctx.target_dir = PackageNameValidator.normalize_target_dir(value, ctx.default_project_name)


def _overwrite_message(ctx: ElicitationContext) -> str:
    where = "Current directory" if ctx.is_current_directory else f'Target directory "{ctx.target_dir}"'
    return f"{where} is not empty. Remove existing files and continue?"


def _validate_package_name(value: str) -> Union[bool, str]:
    return PackageNameValidator.is_valid(value) or "Invalid package.json name"


def build_steps() -> List[PromptStep]:
    """The fixed question sequence."""
    return [
        PromptStep(
            name="project_name",
            kind="text",
            message=lambda ctx: "Project name",
            default=lambda ctx: ctx.default_project_name,
            on_answer=_update_target_dir,
        ),
        PromptStep(
            name="overwrite",
            kind="confirm",
            message=_overwrite_message,
            applies=lambda ctx: DirectoryInspector.has_conflict(ctx.root),
            default=lambda ctx: False,
        ),
        # Not a question: ends the run when overwriting was declined
        PromptStep(
            name="overwrite_checker",
            kind="gate",
            applies=lambda ctx: ctx.answers.get("overwrite") is False,
        ),
        PromptStep(
            name="package_name",
            kind="text",
            message=lambda ctx: "Package name",
            applies=lambda ctx: not PackageNameValidator.is_valid(ctx.derived_name()),
            default=lambda ctx: PackageNameValidator.to_valid(ctx.derived_name()),
            validator=_validate_package_name,
        ),
        PromptStep(
            name="package_manager",
            kind="select",
            message=lambda ctx: "Select a package manager",
            choices=[pm.value for pm in PackageManager],
            default=lambda ctx: PackageManager.NPM.value,
        ),
    ]


class Elicitor:
    """Drives the prompt steps and builds the final :class:`Answers`."""

    def __init__(
        self,
        prompter: Prompter,
        *,
        cwd: Path | None = None,
        default_project_name: str = DEFAULT_TARGET_DIR,
        steps: List[PromptStep] | None = None,
    ) -> None:
        self.prompter = prompter
        self.cwd = cwd or Path.cwd()
        self.default_project_name = default_project_name
        self.steps = steps if steps is not None else build_steps()

    def run(self) -> ElicitationResult:
        """Ask every applicable question in order.

        Filesystem errors raised while checking the target directory propagate.
        """
        ctx = ElicitationContext(
            cwd=self.cwd,
            default_project_name=self.default_project_name,
            target_dir=self.default_project_name,
        )

        try:
            for step in self.steps:
                if not step.applies(ctx):
                    continue
                if step.kind == "gate":
                    return Cancelled()

                value = self._ask(step, ctx)
                ctx.answers[step.name] = value
                if step.on_answer is not None:
                    step.on_answer(ctx, value)
        except (KeyboardInterrupt, EOFError):
            return Cancelled()

        return self._finalize(ctx)

    def _ask(self, step: PromptStep, ctx: ElicitationContext) -> Any:
        message = step.message(ctx)
        default = step.default(ctx)

        while True:
            if step.kind == "text":
                value = self.prompter.text(message, default)
            elif step.kind == "confirm":
                value = self.prompter.confirm(message, default=bool(default))
            elif step.kind == "select":
                value = self.prompter.select(message, step.choices, default)
            else:
                raise ValueError(f"Unknown prompt kind: {step.kind}")

            verdict = step.validator(value)
            if verdict is True:
                return value
            self.prompter.error(verdict if isinstance(verdict, str) else f"Invalid value for {step.name}")

    def _finalize(self, ctx: ElicitationContext) -> Answers:
        return Answers(
            project_name=ctx.answers.get("project_name", ctx.target_dir),
            package_name=ctx.answers.get("package_name", ctx.derived_name()),
            overwrite=ctx.answers.get("overwrite"),
            package_manager=PackageManager(ctx.answers["package_manager"]),
            target_dir=ctx.target_dir,
            root=ctx.root,
        )
