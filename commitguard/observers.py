"""Observer pattern for validation runs."""

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .errors import ConfigError
from .models import ParsedMessage, ValidationResult


class ValidationObserver(ABC):
    """Abstract base class for validation run observers."""

    @abstractmethod
    def on_message_checked(
        self, parsed: Optional[ParsedMessage], result: ValidationResult
    ) -> None:
        """Called after a message has been validated."""
        pass

    @abstractmethod
    def on_config_error(self, error: ConfigError) -> None:
        """Called when the type specification could not be parsed."""
        pass


class ConsoleLogObserver(ValidationObserver):
    """Observer that logs validation runs to the console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def on_message_checked(
        self, parsed: Optional[ParsedMessage], result: ValidationResult
    ) -> None:
        header = escape(parsed.header) if parsed else "<unparsable header>"
        if result.is_valid:
            self.console.print(f"[green]Commit message OK: {header}[/green]")
        else:
            self.console.print(
                f"[yellow]Commit message has {len(result.violations)} problem(s): {header}[/yellow]"
            )

    def on_config_error(self, error: ConfigError) -> None:
        self.console.print(f"[red]Invalid type specification: {escape(str(error))}[/red]")


class FileLogObserver(ValidationObserver):
    """Observer that logs validation runs to a file."""

    def __init__(self, log_file: str):
        self.log_file = Path(log_file)
        # Ensure the parent directory exists
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.log_file.open("a") as f:
            f.write(f"{timestamp} - {message}\n")

    def on_message_checked(
        self, parsed: Optional[ParsedMessage], result: ValidationResult
    ) -> None:
        header = parsed.header if parsed else "<unparsable header>"
        status = "Valid" if result.is_valid else f"Invalid ({len(result.violations)} violations)"
        self._log(f"{status} commit message: {header}")
        for violation in result.violations:
            self._log(f"  {violation.kind.value}: type={violation.commit_type} field={violation.field}")

    def on_config_error(self, error: ConfigError) -> None:
        self._log(f"Config error: {error}")
