"""structvalidate - Validate record fields with named, tag-driven validators."""

from structvalidate.core import (
    BadField,
    Directive,
    FieldSpec,
    InvalidRecordError,
    RecordSchema,
    RegisteredValidator,
    SchemaBuilder,
    StructValidateError,
    UndefinedValidatorError,
    ValidationFailure,
    ValidationReport,
    Validator,
    ValidatorKind,
    ValidatorRegistry,
    describe,
    parse_directives,
)

__version__ = "0.1.0"

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
    "__version__",
]
