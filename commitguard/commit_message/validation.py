"""Commit message validation using Chain of Responsibility pattern.

Unlike a fail-fast chain, every handler contributes its violations to a
shared list. A handler may halt the chain when later checks would be
meaningless, e.g. field checks after the type could not be resolved.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from ..models import CommitTypeSpec, ParsedMessage, ValidationResult, Violation, ViolationKind
from ..registry import TypeRegistry


@dataclass
class ValidationContext:
    """State passed along the chain for one message."""

    message: ParsedMessage
    registry: TypeRegistry
    ignore_case: bool = False
    resolved: Optional[CommitTypeSpec] = None
    violations: List[Violation] = field(default_factory=list)


class ValidationHandler(ABC):
    """Abstract base class for validation handlers."""

    def __init__(self, next_handler: Optional['ValidationHandler'] = None):
        self.next_handler = next_handler

    def handle(self, context: ValidationContext) -> ValidationContext:
        """Run this check and continue down the chain unless halted."""
        if self.validate(context) and self.next_handler:
            return self.next_handler.handle(context)
        return context

    @abstractmethod
    def validate(self, context: ValidationContext) -> bool:
        """Append violations to the context.

        Returns:
            bool: False to stop the remaining handlers from running
        """
        pass


class TypeLookupHandler(ValidationHandler):
    """Resolves the header type against the registry."""

    def validate(self, context: ValidationContext) -> bool:
        spec = context.registry.lookup(context.message.type, context.ignore_case)
        if spec is None:
            context.violations.append(
                Violation(kind=ViolationKind.UNKNOWN_TYPE, commit_type=context.message.type)
            )
            return False
        context.resolved = spec
        return True


def field_is_satisfied(message: ParsedMessage, name: str) -> bool:
    """Check that a required field is present and non-empty."""
    if name == "type":
        return True
    value = message.field_value(name)
    return value is not None and bool(value.strip())


class RequiredFieldsHandler(ValidationHandler):
    """Checks the resolved type's required fields in declared order."""

    def validate(self, context: ValidationContext) -> bool:
        spec = context.resolved
        if spec is None:
            return True
        for name in spec.required:
            if not field_is_satisfied(context.message, name):
                context.violations.append(
                    Violation(kind=ViolationKind.MISSING_FIELD, commit_type=spec.name, field=name)
                )
        return True


def create_validation_chain() -> ValidationHandler:
    """Create the default validation chain."""
    required_fields = RequiredFieldsHandler()
    return TypeLookupHandler(required_fields)


def validate(message: ParsedMessage, registry: TypeRegistry, ignore_case: bool = False) -> ValidationResult:
    """Validate a parsed message against the registry.

    Args:
        message: The tokenized commit message
        registry: Allowed commit types and their required fields
        ignore_case: Compare the type token without case

    Returns:
        ValidationResult: Violations in the order they were detected
    """
    context = ValidationContext(message=message, registry=registry, ignore_case=ignore_case)
    create_validation_chain().handle(context)
    if not context.violations:
        return ValidationResult.valid()
    return ValidationResult.invalid(context.violations)
