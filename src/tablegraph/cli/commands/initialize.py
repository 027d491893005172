"""
Init Command - Project setup.

Writes `.tablegraph/config.yaml` with the default table options so a team
can pin its class names and structure flags once instead of passing them
on every build.
"""

from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from ...config import CONFIG_DIR, CONFIG_FILE, DEFAULT_CONFIG

console = Console()


def create_gitignore(config_dir: Path):
    """Ensure the config directory is ignored by git."""
    gitignore = config_dir.parent / ".gitignore"
    entry = f"\n# tablegraph\n{CONFIG_DIR}/\n"

    if not gitignore.exists():
        with open(gitignore, "w") as f:
            f.write(entry)
    else:
        content = gitignore.read_text()
        if CONFIG_DIR not in content:
            with open(gitignore, "a") as f:
                f.write(entry)


def _init_project(root_dir: Path, gitignore: bool) -> Path:
    config_dir = root_dir / CONFIG_DIR
    config_file = config_dir / CONFIG_FILE

    config = {**DEFAULT_CONFIG, "table": dict(DEFAULT_CONFIG["table"])}

    config_dir.mkdir(exist_ok=True)
    with open(config_file, "w") as f:
        f.write("# tablegraph defaults; CLI flags override these values.\n")
        yaml.dump(config, f, sort_keys=False, default_flow_style=False)

    if gitignore:
        create_gitignore(config_dir)
    return config_file


@click.command()
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
@click.option("--gitignore/--no-gitignore", default=False, help="Add the config directory to .gitignore")
def init(force: bool, gitignore: bool):
    """
    Initialize tablegraph in the current directory.
    """
    console.print(Panel.fit("[bold blue]tablegraph init[/bold blue]", border_style="blue"))

    root_dir = Path.cwd()
    config_file = root_dir / CONFIG_DIR / CONFIG_FILE

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {config_file}[/yellow]")
        if not Confirm.ask("Do you want to overwrite it?"):
            console.print("Aborted.")
            return

    written = _init_project(root_dir, gitignore)
    console.print("\n✨ [bold green]Initialized successfully![/bold green]")
    console.print(f"   Config created at: [dim]{written}[/dim]")
