"""Version information for commit-guard."""

import importlib.metadata
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from . import __version__

console = Console()


def get_current_version() -> str:
    """Get the current version of commit-guard."""
    return __version__


def get_installed_version() -> str:
    """Get the installed version from pip metadata."""
    try:
        return importlib.metadata.version("commit-guard")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def get_installation_path() -> Optional[Path]:
    return Path(__file__).parent


def get_version_summary() -> str:
    """Get a brief version summary for CLI output."""
    current_version = get_current_version()
    installed_version = get_installed_version()

    if current_version == installed_version:
        return f"commit-guard {current_version}"
    else:
        return f"commit-guard {current_version} (installed: {installed_version})"


def display_version_info(target: Optional[Console] = None) -> None:
    """Display version information."""
    out = target or console
    current_version = get_current_version()
    installed_version = get_installed_version()

    version_text = Text()
    version_text.append("commit-guard\n", style="bold blue")
    version_text.append(f"Current version: {current_version}\n", style="green")
    version_text.append(f"Installed version: {installed_version}\n", style="cyan")
    version_text.append(f"Installation path: {get_installation_path()}\n", style="yellow")

    if current_version != installed_version:
        version_text.append("\nVersion mismatch detected!\n", style="red")
        version_text.append("Consider reinstalling: pip install -e .\n", style="yellow")

    panel = Panel(
        version_text,
        title="Version Information",
        border_style="blue"
    )
    out.print(panel)
