"""Externally tagged union support for pydantic models.

Every closed sum in the domain (notices, time scopes, class frequencies,
date-to-day mappings) is encoded on the wire the same way::

    "everyCycleWithAll"                  # unit variant
    {"everyCycleWith": 2}                # newtype variant
    {"classOff": {"date": ..., ...}}     # struct variant

Each variant is a frozen model subclassing one of the three bases below and
naming its wire ``tag``.  The union itself is declared with :func:`tagged_union`,
which builds a pydantic callable discriminator so that validation dispatches
on the tag instead of trying every member.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    SerializerFunctionWrapHandler,
    Tag,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel

CAMEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    validate_by_name=True,
    validate_by_alias=True,
    serialize_by_alias=True,
)


def _is_tagged(data: Any, tag: str) -> bool:
    return isinstance(data, Mapping) and len(data) == 1 and tag in data


class Variant(BaseModel):
    """Common base: a frozen, camelCase model carrying a wire tag."""

    model_config = CAMEL_CONFIG

    tag: ClassVar[str]


class UnitVariant(Variant):
    """Variant without payload, serialized as its bare tag string."""

    @model_validator(mode="before")
    @classmethod
    def _unwrap(cls, data: Any) -> Any:
        if data == cls.tag:
            return {}
        if _is_tagged(data, cls.tag) and data[cls.tag] is None:
            return {}
        return data

    @model_serializer(mode="plain")
    def _wrap(self) -> str:
        return self.tag


class NewtypeVariant(Variant):
    """Variant wrapping exactly one value: ``{tag: value}``.

    Subclasses declare a single field; it may also be passed positionally.
    """

    def __init__(self, *args: Any, **data: Any) -> None:
        if args:
            (value,) = args
            data[self._payload_field()] = value
        super().__init__(**data)

    @classmethod
    def _payload_field(cls) -> str:
        (name,) = cls.model_fields
        return name

    @model_validator(mode="before")
    @classmethod
    def _unwrap(cls, data: Any) -> Any:
        if _is_tagged(data, cls.tag):
            return {cls._payload_field(): data[cls.tag]}
        return data

    @model_serializer(mode="wrap")
    def _wrap(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        payload = handler(self)
        return {self.tag: next(iter(payload.values()))}


class StructVariant(Variant):
    """Variant with named fields: ``{tag: {field: value, ...}}``."""

    @model_validator(mode="before")
    @classmethod
    def _unwrap(cls, data: Any) -> Any:
        if _is_tagged(data, cls.tag):
            return data[cls.tag]
        return data

    @model_serializer(mode="wrap")
    def _wrap(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        return {self.tag: self._payload(handler(self))}

    def _payload(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Hook for subclasses that elide fields from the wire form."""
        return fields


def variant_tag(value: Any) -> str | None:
    """Extract the wire tag from raw data or a variant instance."""
    if isinstance(value, Variant):
        return value.tag
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping) and len(value) == 1:
        (key,) = value
        return key if isinstance(key, str) else None
    return None


def tagged_union(*variants: type[Variant]) -> Any:
    """Build an ``Annotated`` union discriminated by each variant's tag."""
    members = tuple(Annotated[v, Tag(v.tag)] for v in variants)
    return Annotated[Union[members], Discriminator(variant_tag)]
