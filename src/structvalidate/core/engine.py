"""
Validation engine - Walk a record's fields and run their validators.

For every exported field carrying a directive, the engine parses the
directive, resolves each named validator in the registry and records one
BadField per failure. The reserved ``struct`` directive recurses into the
field's value, prefixing nested paths with the field's own path:

    Outer.Inner.Leaf

Every failure is collected; validation never stops at the first one. A
fault raised inside a validator function is not caught.
"""

import logging
import weakref
from dataclasses import dataclass, field
from typing import Any

from structvalidate.config import STRUCT_TOKEN, TAG_KEY, Settings, get_settings
from structvalidate.core.directives import parse_directives
from structvalidate.core.errors import (
    BadField,
    InvalidRecordError,
    UndefinedValidatorError,
    ValidationFailure,
)
from structvalidate.core.registry import Failure, ValidatorKind, ValidatorRegistry
from structvalidate.core.schema import RecordSchema, describe

logger = logging.getLogger(__name__)


@dataclass
class ValidationReport:
    """Result of validating one record."""

    valid: bool
    errors: list[BadField] = field(default_factory=list)


class Validator:
    """
    Validate records against a registry of named validators.

    Records are dataclass instances, pydantic model instances, or any
    object paired with an explicit RecordSchema. Anything else validates
    successfully, since it has no fields to check.

    Directives are read from the "validate" metadata key and "struct" is
    the nested-record directive, unless a Settings object passed here
    says otherwise. The environment never changes either.
    """

    def __init__(
        self,
        registry: ValidatorRegistry,
        settings: Settings | None = None,
    ):
        self.registry = registry
        self.settings = settings
        if settings is not None:
            self.tag_key = settings.tag_key
            self.struct_token = settings.struct_token
        else:
            self.tag_key = TAG_KEY
            self.struct_token = STRUCT_TOKEN
        self.log_undefined = (settings or get_settings()).log_undefined_validators

    def validate(
        self, record: Any, schema: RecordSchema | None = None
    ) -> list[BadField]:
        """
        Validate a record, reporting errors under declared field names.

        Args:
            record: Record instance, or a weakref.ref or weakref.proxy to one
            schema: Explicit schema to use instead of deriving one

        Returns:
            Errors in field order, then directive order; empty when valid
        """
        return self._validate(record, "", "", schema)

    def validate_with_field_naming(
        self,
        record: Any,
        name_key: str,
        schema: RecordSchema | None = None,
    ) -> list[BadField]:
        """
        Validate a record, reporting errors under a metadata-supplied name.

        With ``field(metadata={"json": "height", "validate": "nonzero"})``
        and name_key "json", errors for the field are reported as "height".
        A field without the name_key metadata is reported under an empty
        name. When name_key is empty this behaves like validate with
        declared names.
        """
        return self._validate(record, name_key, "", schema)

    def report(
        self,
        record: Any,
        name_key: str = "",
        schema: RecordSchema | None = None,
    ) -> ValidationReport:
        """Validate a record and wrap the errors in a ValidationReport."""
        errors = self._validate(record, name_key, "", schema)
        return ValidationReport(valid=not errors, errors=errors)

    def ensure_valid(
        self,
        record: Any,
        name_key: str = "",
        schema: RecordSchema | None = None,
    ) -> None:
        """
        Raise InvalidRecordError if any field of the record is invalid.

        Raises:
            InvalidRecordError: carrying every BadField found
        """
        errors = self._validate(record, name_key, "", schema)
        if errors:
            raise InvalidRecordError(errors)

    def _validate(
        self,
        record: Any,
        name_key: str,
        prefix: str,
        schema: RecordSchema | None,
    ) -> list[BadField]:
        if isinstance(record, weakref.ReferenceType):
            record = record()

        if isinstance(record, weakref.ProxyTypes):
            # Proxies forward __class__ to the referent
            try:
                record_type = record.__class__
            except ReferenceError:
                return []
        else:
            if record is None or isinstance(record, type):
                return []
            record_type = type(record)

        if schema is None:
            schema = describe(record_type)
            if schema is None:
                return []

        tag_key = self.tag_key
        errors: list[BadField] = []

        for spec in schema.fields:
            if not spec.exported:
                continue

            tag = spec.tag(tag_key)
            if not tag:
                continue

            value = spec.value(record)

            for directive in parse_directives(tag):
                name = spec.tag(name_key) if name_key else spec.name
                if prefix:
                    name = f"{prefix}.{name}"

                if directive.name == self.struct_token:
                    logger.debug(f"Validating nested record at {name}")
                    errors.extend(self._validate(value, name_key, name, spec.nested))
                    continue

                registered = self.registry.get(directive.name)
                if registered is None:
                    if self.log_undefined:
                        logger.warning(
                            f"Undefined validator {directive.name!r} on field {name}"
                        )
                    errors.append(BadField(name, UndefinedValidatorError(directive.name)))
                    continue

                if directive.bracketed and registered.kind == ValidatorKind.PLAIN:
                    logger.warning(
                        f"Validator {directive.name!r} takes no parameters; "
                        f"ignoring {list(directive.params)} on field {name}"
                    )

                err = _as_error(registered(value, directive.params))
                if err is not None:
                    errors.append(BadField(name, err))

        return errors


def _as_error(failure: Failure) -> Exception | None:
    """Normalize a validator's return value to an exception or None."""
    if failure is None:
        return None
    if isinstance(failure, Exception):
        return failure
    if isinstance(failure, str):
        return ValidationFailure(failure) if failure else None
    raise TypeError(
        f"Validator must return an Exception, a str or None, got: {type(failure).__name__}"
    )
