"""Commit message tokenizing and validation package."""

from .tokenizer import tokenize, parse_header
from .validation import (
    ValidationHandler,
    TypeLookupHandler,
    RequiredFieldsHandler,
    create_validation_chain,
    validate,
)
from .validator import CommitMessageValidator

__all__ = [
    'tokenize',
    'parse_header',
    'ValidationHandler',
    'TypeLookupHandler',
    'RequiredFieldsHandler',
    'create_validation_chain',
    'validate',
    'CommitMessageValidator',
]
