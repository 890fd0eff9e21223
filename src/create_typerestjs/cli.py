# src/create_typerestjs/cli.py
from __future__ import annotations
import sys

import typer
from rich.console import Console

from .config import GeneratorConfig
from .exceptions import ConfigurationError
from .provisioner import Provisioner

app = typer.Typer(name="create-typerestjs", help="Scaffold a new TypeRESTjs project", add_completion=False)
console = Console()


@app.command()
def main() -> None:
    """Interactively create a new TypeRESTjs project."""
    try:
        config = GeneratorConfig.load()
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        sys.exit(1)

    try:
        created = Provisioner(config, console=console).run()
    except KeyboardInterrupt:
        console.print("\n[red]✖[/red] Operation cancelled")
        sys.exit(1)

    if not created:
        sys.exit(1)


if __name__ == "__main__":
    app()
