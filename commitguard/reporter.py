"""Formatting of validation results and the exit code policy."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .errors import ConfigError
from .models import ParsedMessage, ValidationResult, Violation, ViolationKind

EXIT_OK = 0
EXIT_FAILURE = 1


def format_violation(violation: Violation) -> str:
    """Format a violation as a single line of text.

    Args:
        violation: The violation to describe

    Returns:
        str: The rule name followed by a description of the offending part
    """
    if violation.kind is ViolationKind.UNKNOWN_TYPE:
        text = f"commit type '{violation.commit_type}' is not allowed"
    elif violation.kind is ViolationKind.MISSING_FIELD:
        text = f"commit type '{violation.commit_type}' requires a {violation.field}, but none given"
    else:
        text = violation.detail or "expected format 'TYPE(SCOPE): DESCRIPTION'"
    return f"{violation.kind.value}: {text}"


class ResultReporter:
    """Prints violations and decides how the process should exit.

    Attributes:
        console (Console): Rich console for output
        continue_on_error (bool): Report violations but exit successfully
    """

    def __init__(self, console: Optional[Console] = None, continue_on_error: bool = False):
        self.console = console or Console()
        self.continue_on_error = continue_on_error

    def report(self, result: ValidationResult) -> int:
        """Print the violations of a result.

        Returns:
            int: The process exit code
        """
        if result.is_valid:
            return EXIT_OK
        for violation in result.violations:
            self.console.print(
                f"[red]Error![/red] {escape(format_violation(violation))}", soft_wrap=True
            )
        return EXIT_OK if self.continue_on_error else EXIT_FAILURE

    def report_config_error(self, error: ConfigError) -> int:
        """Print a configuration error; these always fail the run."""
        self.console.print(f"[red]Error![/red] {escape(str(error))}", soft_wrap=True)
        return EXIT_FAILURE

    def render_table(self, parsed: Optional[ParsedMessage], result: ValidationResult) -> None:
        """Print the parsed fields and the verdict as a table."""
        table = Table(title="Commit message")
        for column in ("Type", "Scope", "Description", "Body", "Footer", "Valid"):
            table.add_column(column)
        if parsed is None:
            table.add_row("", "", "", "", "", str(result.is_valid))
        else:
            table.add_row(
                escape(parsed.type),
                escape(parsed.scope or ""),
                escape(parsed.description),
                escape(parsed.body or ""),
                escape(parsed.footer or ""),
                str(result.is_valid),
            )
        self.console.print(table)
