"""
Record schemas - Static description of a record type's fields.

A RecordSchema lists each field's name, how to read its value, its metadata
tags (including the directive string) and, for nested records, the nested
type's own schema. Schemas are derived once per type from dataclasses and
pydantic models, or written by hand with RecordSchema.builder() for any
other object.
"""

import dataclasses
from dataclasses import dataclass, field
from functools import lru_cache
from operator import attrgetter
from types import MappingProxyType
from typing import Any, Callable, Mapping

from pydantic import BaseModel


@dataclass(frozen=True)
class FieldSpec:
    """Description of one record field. Tags are stored read-only."""

    name: str
    accessor: Callable[[Any], Any]
    tags: Mapping[str, str] = field(default_factory=dict)
    exported: bool = True  # False for fields hidden from outside access
    nested: "RecordSchema | None" = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))

    def tag(self, key: str) -> str:
        """Get a metadata value, or an empty string when the key is absent."""
        return self.tags.get(key, "")

    def value(self, record: Any) -> Any:
        """Read this field's current value from a record."""
        return self.accessor(record)


@dataclass(frozen=True)
class RecordSchema:
    """Ordered, immutable field table for one record type."""

    fields: tuple[FieldSpec, ...] = ()
    record_type: type | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    @classmethod
    def builder(cls, record_type: type | None = None) -> "SchemaBuilder":
        """Start building a schema by hand."""
        return SchemaBuilder(record_type)

    def field_names(self) -> list[str]:
        """Get declared field names in order."""
        return [f.name for f in self.fields]


class SchemaBuilder:
    """
    Fluent builder for hand-written schemas.

    Example:
        schema = (
            RecordSchema.builder()
            .field("height", validate="nonzero", json="h")
            .nested("address", ADDRESS_SCHEMA, validate="struct")
            .build()
        )
    """

    def __init__(self, record_type: type | None = None) -> None:
        self._record_type = record_type
        self._fields: list[FieldSpec] = []

    def field(
        self,
        name: str,
        accessor: Callable[[Any], Any] | None = None,
        *,
        exported: bool | None = None,
        nested: RecordSchema | None = None,
        **tags: str,
    ) -> "SchemaBuilder":
        """
        Add a field.

        Args:
            name: Declared field name
            accessor: Reads the value from a record; defaults to attribute access
            exported: Whether the field may be inspected; defaults to
                names without a leading underscore
            nested: Schema of the nested record held by this field
            **tags: Metadata such as validate="long,short" or json="height"
        """
        self._fields.append(
            FieldSpec(
                name=name,
                accessor=accessor or attrgetter(name),
                tags=dict(tags),
                exported=_is_exported(name) if exported is None else exported,
                nested=nested,
            )
        )
        return self

    def nested(
        self,
        name: str,
        schema: RecordSchema,
        accessor: Callable[[Any], Any] | None = None,
        **tags: str,
    ) -> "SchemaBuilder":
        """Add a field holding a nested record described by schema."""
        return self.field(name, accessor, nested=schema, **tags)

    def build(self) -> RecordSchema:
        """Finish the schema."""
        return RecordSchema(fields=tuple(self._fields), record_type=self._record_type)


def _is_exported(name: str) -> bool:
    return not name.startswith("_")


def _string_tags(metadata: Mapping[Any, Any] | None) -> dict[str, str]:
    if not metadata:
        return {}
    return {k: v for k, v in metadata.items() if isinstance(k, str) and isinstance(v, str)}


def _describe_dataclass(cls: type) -> RecordSchema:
    return RecordSchema(
        fields=tuple(
            FieldSpec(
                name=f.name,
                accessor=attrgetter(f.name),
                tags=_string_tags(f.metadata),
                exported=_is_exported(f.name),
            )
            for f in dataclasses.fields(cls)
        ),
        record_type=cls,
    )


def _describe_model(cls: type[BaseModel]) -> RecordSchema:
    fields: list[FieldSpec] = []
    for name, info in cls.model_fields.items():
        extra = info.json_schema_extra if isinstance(info.json_schema_extra, dict) else None
        tags = _string_tags(extra)
        if info.alias:
            tags.setdefault("alias", info.alias)
        fields.append(
            FieldSpec(
                name=name,
                accessor=attrgetter(name),
                tags=tags,
                exported=_is_exported(name),
            )
        )
    return RecordSchema(fields=tuple(fields), record_type=cls)


@lru_cache(maxsize=512)
def _describe_type(cls: type) -> RecordSchema | None:
    if dataclasses.is_dataclass(cls):
        return _describe_dataclass(cls)
    if issubclass(cls, BaseModel):
        return _describe_model(cls)
    return None


def describe(record: Any) -> RecordSchema | None:
    """
    Derive the schema of a dataclass or pydantic model.

    Args:
        record: A record instance or record class

    Returns:
        The cached schema for the record's type, or None when the type
        is not record-shaped
    """
    cls = record if isinstance(record, type) else type(record)
    return _describe_type(cls)
