"""Exceptions raised by commit-guard."""


class CommitGuardError(Exception):
    """Base class for commit-guard errors."""


class ConfigError(CommitGuardError):
    """Raised when the commit type specification cannot be parsed.

    Configuration errors are fatal: no message can be validated without a
    registry, so they are never subject to the continue-on-error policy.
    """

    def __init__(self, message: str, entry: str = ""):
        super().__init__(message)
        self.entry = entry


class FormatError(CommitGuardError):
    """Raised when no ``type(scope): description`` header can be found."""

    def __init__(self, message: str, header: str = ""):
        super().__init__(message)
        self.header = header
