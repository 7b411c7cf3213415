"""Commit message validation."""
from typing import Optional, Tuple

from ..errors import FormatError
from ..models import ParsedMessage, ValidationResult, Violation, ViolationKind
from ..registry import TypeRegistry
from .tokenizer import tokenize
from .validation import validate

class CommitMessageValidator:
    """Validates raw commit messages against a type registry."""

    def __init__(self, registry: Optional[TypeRegistry] = None, ignore_case: bool = False):
        self.registry = registry if registry is not None else TypeRegistry.default()
        self.ignore_case = ignore_case

    def check_parsed(self, message: str) -> Tuple[Optional[ParsedMessage], ValidationResult]:
        """Tokenize and validate, returning the parsed message as well.

        A message without a recognisable header yields ``None`` and a single
        malformed-header violation.
        """
        try:
            parsed = tokenize(message)
        except FormatError as e:
            violation = Violation(kind=ViolationKind.MALFORMED_HEADER, detail=str(e))
            return None, ValidationResult.invalid([violation])
        return parsed, validate(parsed, self.registry, self.ignore_case)

    def check(self, message: str) -> ValidationResult:
        """Validate a raw commit message."""
        return self.check_parsed(message)[1]
