"""Configuration management for commit-guard."""
from pathlib import Path
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from rich.console import Console
import tomli
import tomli_w
import os
import re

DEFAULT_CONFIG_FILENAME = ".commitguard.toml"
CONFIG_SECTION = "commitguard"

console = Console(stderr=True)

class Config(BaseModel):
    """Configuration settings for commit-guard.

    Values come from the ``[commitguard]`` table of the config file,
    from ``COMMIT_GUARD_*`` environment variables, or from keyword
    arguments. Command line options are applied on top by the CLI.
    """

    ignore_case: bool = Field(
        default=False,
        description="Compare commit types without regard to case"
    )

    continue_on_error: bool = Field(
        default=False,
        description="Report violations but exit successfully"
    )

    types: Optional[str] = Field(
        default=None,
        description="Type specification replacing the defaults, e.g. 'feat=scope;fix=;docs='"
    )

    show_table: bool = Field(
        default=False,
        description="Print the parsed message fields as a table"
    )

    always_log: bool = Field(
        default=False,
        description="Whether to always generate log files"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)"
    )

    @staticmethod
    def _sanitize_string(value: str, max_length: Optional[int] = 1000) -> str:
        """Strip control characters and surrounding whitespace.

        Type specifications are passed with no length limit so that no
        entries are cut off.
        """
        if not value:
            return value

        # Remove control characters and null bytes
        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)

        if max_length is not None and len(value) > max_length:
            value = value[:max_length]

        return value.strip()

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a path is safe (no path traversal)."""
        if not path:
            return False

        if '..' in path or path.startswith('/') or '\\' in path:
            return False

        if os.path.isabs(path):
            return False

        return True

    @classmethod
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration from the config file.

        Args:
            repo_path: Directory containing the config file

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)

            section = dict(config_data.get(CONFIG_SECTION, {}))

            for key in ['types', 'log_file']:
                if key in section and isinstance(section[key], str):
                    section[key] = cls._sanitize_string(
                        section[key], max_length=None if key == 'types' else 1000
                    )

            if section.get('log_file') and not cls._is_safe_path(section['log_file']):
                console.print(f"[yellow]Warning: Unsafe log file path '{section['log_file']}', ignoring it[/yellow]")
                section['log_file'] = None

            return cls(**section)
        except Exception as e:
            # If there's any error reading the config, use defaults
            console.print(f"[yellow]Warning: Error reading config file: {e}[/yellow]")
            return cls()

    def save(self, repo_path: Path) -> Path:
        """Save configuration to the config file.

        Args:
            repo_path: Directory to write the config file to

        Returns:
            Path: The written config file
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        # TOML has no null, so unset values are left out
        section = {k: v for k, v in self.model_dump().items() if v is not None}

        if section.get('log_file') and not self._is_safe_path(section['log_file']):
            console.print(f"[yellow]Warning: Unsafe log file path '{section['log_file']}', not saving[/yellow]")
            del section['log_file']

        with config_path.open('wb') as f:
            tomli_w.dump({CONFIG_SECTION: section}, f)
        return config_path

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name.
        Otherwise, returns the configured log_file path if set.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            return Path(f"commitguard-{timestamp}.log")
        elif self.log_file:
            if self._is_safe_path(self.log_file):
                return Path(self.log_file)
            console.print(f"[yellow]Warning: Unsafe log file path '{self.log_file}', logging disabled[/yellow]")
        return None

    def __init__(self, **data):
        """Initialize config with environment variable support."""
        env_data = {}

        env_mapping = {
            'COMMIT_GUARD_IGNORE_CASE': 'ignore_case',
            'COMMIT_GUARD_CONTINUE_ON_ERROR': 'continue_on_error',
            'COMMIT_GUARD_TYPES': 'types',
            'COMMIT_GUARD_SHOW_TABLE': 'show_table',
            'COMMIT_GUARD_ALWAYS_LOG': 'always_log',
            'COMMIT_GUARD_LOG_FILE': 'log_file',
        }

        for env_var, field_name in env_mapping.items():
            if env_var in os.environ:
                value = self._sanitize_string(
                    os.environ[env_var], max_length=None if field_name == 'types' else 1000
                )

                if field_name in ['ignore_case', 'continue_on_error', 'show_table', 'always_log']:
                    value = value.lower() in ['true', '1', 'yes', 'on']

                env_data[field_name] = value

        # Explicit values win over the environment
        merged_data = {**env_data, **data}

        super().__init__(**merged_data)
