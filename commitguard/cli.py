#!/usr/bin/env python3
import sys
from pathlib import Path
from typing import List, Optional, TextIO

import click
from rich.console import Console
from rich.markup import escape

from .commit_message import CommitMessageValidator
from .config import DEFAULT_CONFIG_FILENAME, Config
from .observers import ConsoleLogObserver, FileLogObserver, ValidationObserver
from .registry import TypeRegistry, parse_type_spec
from .reporter import ResultReporter
from .version import display_version_info, get_version_summary

console = Console()


def read_message(message_file: Optional[TextIO]) -> str:
    """Read the commit message from the hook's file argument or stdin.

    Git writes help text as '#' comment lines into the message file; those
    are dropped before validation.
    """
    if message_file is None:
        return click.get_text_stream("stdin").read()
    lines = message_file.read().splitlines()
    return "\n".join(line for line in lines if not line.startswith("#"))


def show_config(config: Config, repo_path: Path) -> None:
    config_path = repo_path / DEFAULT_CONFIG_FILENAME
    source = "config" if config_path.exists() else "default"

    console.print("\n[bold]Current Configuration Settings:[/bold]")
    console.print(f"[dim]{get_version_summary()}[/dim]")
    if config_path.exists():
        console.print(f"[dim]Config file: {config_path.as_posix()}[/dim]")
    else:
        console.print("[dim]Using default values (no config file found)[/dim]")

    console.print(f"\n{'Setting':<20} {'Value':<30} {'Source':<10}")
    console.print("-" * 60)

    def print_setting(name: str, value: object):
        console.print(f"{name:<20} {escape(str(value)):<30} {source:<10}", soft_wrap=True)

    print_setting("ignore_case", config.ignore_case)
    print_setting("continue_on_error", config.continue_on_error)
    print_setting("types", config.types or "None")
    print_setting("show_table", config.show_table)
    print_setting("always_log", config.always_log)
    print_setting("log_file", config.log_file or "None")

    result = parse_type_spec(config.types, config.ignore_case) if config.types is not None else None
    if result is not None and not result.ok:
        console.print(f"\n[red]Type specification is invalid: {escape(str(result.error))}[/red]")
    else:
        registry = result.registry if result is not None else TypeRegistry.default()
        console.print(f"\nEffective commit types: {escape(registry.to_spec())}", soft_wrap=True)

    console.print(
        f"\nTo modify these settings, create or edit {DEFAULT_CONFIG_FILENAME} in your repository root"
    )


@click.command()
@click.argument("message_file", type=click.File("r"), required=False)
@click.option(
    "-c",
    "--allow-caps-types",
    is_flag=True,
    help="Compare commit types without regard to case (overrides config setting)",
)
@click.option(
    "-e",
    "--dont-exit-on-errors",
    is_flag=True,
    help="Print violations but exit successfully (overrides config setting)",
)
@click.option(
    "-t",
    "--types",
    help="Allowed types and required fields, e.g. 'feat=scope,description;fix=;docs=' (replaces the defaults)",
)
@click.option(
    "-p",
    "--path",
    default=".",
    help="Directory containing the config file (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-s", "--show-table", is_flag=True, help="Print the parsed message fields as a table"
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log validation runs to (overrides config setting)",
)
@click.option("-v", "--verbose", is_flag=True, help="Also report successful validations")
@click.option(
    "--config-list", is_flag=True, help="Display current configuration settings"
)
@click.option(
    "--init-config",
    is_flag=True,
    help=f"Write the current settings to {DEFAULT_CONFIG_FILENAME}",
)
@click.option("--version", is_flag=True, help="Display version information and exit")
def main(
    message_file: Optional[TextIO],
    allow_caps_types: bool,
    dont_exit_on_errors: bool,
    types: Optional[str],
    path: Path,
    show_table: bool,
    log_file: Optional[Path],
    verbose: bool,
    config_list: bool,
    init_config: bool,
    version: bool,
):
    """
    Validate a commit message against the 'type(scope): description' format.

    The message is read from MESSAGE_FILE (as passed to commit-msg hooks)
    or from standard input. Each commit type may require a scope, a body or
    a footer in addition to the description.

    Configuration can be set in .commitguard.toml in the repository root.
    Command line options override configuration file settings.
    """
    try:
        if version:
            display_version_info(console)
            return

        repo_path = path.absolute()
        config = Config.load(repo_path)

        # Command line options override config
        if allow_caps_types:
            config.ignore_case = True
        if dont_exit_on_errors:
            config.continue_on_error = True
        if types is not None:
            config.types = types
        if show_table:
            config.show_table = True
        if log_file is not None:
            config.log_file = str(log_file)

        if config_list:
            show_config(config, repo_path)
            return

        if init_config:
            config_path = config.save(repo_path)
            console.print(f"[green]Config written to:[/green] {config_path.as_posix()}")
            return

        observers: List[ValidationObserver] = []
        if verbose:
            observers.append(ConsoleLogObserver(console))
        log_file_path = log_file or config.get_log_file()
        if log_file_path:
            observers.append(FileLogObserver(str(log_file_path)))

        reporter = ResultReporter(console, continue_on_error=config.continue_on_error)

        if config.types is None:
            registry = TypeRegistry.default()
        else:
            parsed_types = parse_type_spec(config.types, ignore_case=config.ignore_case)
            if not parsed_types.ok:
                for observer in observers:
                    observer.on_config_error(parsed_types.error)
                sys.exit(reporter.report_config_error(parsed_types.error))
            registry = parsed_types.registry

        validator = CommitMessageValidator(registry, ignore_case=config.ignore_case)
        parsed, result = validator.check_parsed(read_message(message_file))

        for observer in observers:
            observer.on_message_checked(parsed, result)

        exit_code = reporter.report(result)
        if config.show_table:
            reporter.render_table(parsed, result)
        sys.exit(exit_code)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort()


if __name__ == "__main__":
    main()
