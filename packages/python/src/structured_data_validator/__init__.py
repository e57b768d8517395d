"""
structured-data-validator: rule-based checks for extracted structured data

Validates JSON-LD, microdata and RDFa entities extracted from web pages
against per-type rule-sets and, optionally, the schema.org vocabulary.
Uses PyLD to load the vocabulary graph.
"""

__version__ = "0.3.0"

from structured_data_validator.base import (
    BaseRuleSet,
    RuleSetContext,
    value_by_path,
)
from structured_data_validator.checks import check_type
from structured_data_validator.issues import (
    ERROR,
    WARNING,
    Issue,
    PathSegment,
    make_path,
)
from structured_data_validator.resolver import HandlerResolver
from structured_data_validator.types import DEFAULT_HANDLERS, SchemaOrgRuleSet
from structured_data_validator.validator import (
    DATA_FORMATS,
    Validator,
    validate_structured_data,
)
from structured_data_validator.vocabulary import VocabularyGraph

__all__ = [
    "BaseRuleSet",
    "RuleSetContext",
    "value_by_path",
    "check_type",
    "ERROR",
    "WARNING",
    "Issue",
    "PathSegment",
    "make_path",
    "HandlerResolver",
    "DEFAULT_HANDLERS",
    "SchemaOrgRuleSet",
    "DATA_FORMATS",
    "Validator",
    "validate_structured_data",
    "VocabularyGraph",
]
