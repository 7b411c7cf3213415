"""commit-guard: structural commit message validation."""

__version__ = "0.1.0"
