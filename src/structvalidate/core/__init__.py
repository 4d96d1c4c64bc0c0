"""structvalidate core - Directives, registry, schemas and the engine."""

from structvalidate.core.directives import Directive, parse_directives
from structvalidate.core.engine import ValidationReport, Validator
from structvalidate.core.errors import (
    BadField,
    InvalidRecordError,
    StructValidateError,
    UndefinedValidatorError,
    ValidationFailure,
)
from structvalidate.core.registry import (
    RegisteredValidator,
    ValidatorKind,
    ValidatorRegistry,
)
from structvalidate.core.schema import FieldSpec, RecordSchema, SchemaBuilder, describe

__all__ = [
    "BadField",
    "Directive",
    "FieldSpec",
    "InvalidRecordError",
    "RecordSchema",
    "RegisteredValidator",
    "SchemaBuilder",
    "StructValidateError",
    "UndefinedValidatorError",
    "ValidationFailure",
    "ValidationReport",
    "Validator",
    "ValidatorKind",
    "ValidatorRegistry",
    "describe",
    "parse_directives",
]
