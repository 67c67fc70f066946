"""Holidays and the result of resolving a date against the academic calendar.

Holidays are written flat in calendar files::

    - for: Eid
      on: 2020-05-24
    - for: Winter
      from: 2020-12-20
      to: 2021-01-02

The span is untagged: a single day is recognised by ``on``, a range by
``from``/``to``.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from typing import Annotated, Any, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    SerializerFunctionWrapHandler,
    Tag,
    model_serializer,
    model_validator,
)

from unbusy.core.enums import Day
from unbusy.core.errors import InvalidSpan
from unbusy.domain.notice import Notice
from unbusy.domain.variants import (
    NewtypeVariant,
    UnitVariant,
    tagged_union,
)

# ---------------------------------------------------------------------------
# Spans
# ---------------------------------------------------------------------------

_SPAN_CONFIG = ConfigDict(frozen=True, validate_by_name=True, serialize_by_alias=True)


class SingleDay(BaseModel):
    """One single holiday."""

    model_config = _SPAN_CONFIG

    on: dt.date

    def start(self) -> dt.date:
        return self.on

    def end(self) -> dt.date:
        return self.on

    def contains(self, needle: dt.date) -> bool:
        return needle == self.on


class MultiDays(BaseModel):
    """Inclusive range of holidays."""

    model_config = _SPAN_CONFIG

    from_: dt.date = Field(alias="from")
    to: dt.date

    @model_validator(mode="after")
    def from_not_after_to(self) -> MultiDays:
        if self.from_ > self.to:
            raise InvalidSpan(self.from_, self.to)
        return self

    def start(self) -> dt.date:
        return self.from_

    def end(self) -> dt.date:
        return self.to

    def contains(self, needle: dt.date) -> bool:
        return self.from_ <= needle <= self.to


def _span_kind(value: Any) -> str | None:
    if isinstance(value, SingleDay):
        return "single"
    if isinstance(value, MultiDays):
        return "multi"
    if isinstance(value, Mapping):
        if "on" in value:
            return "single"
        if "from" in value or "from_" in value:
            return "multi"
    return None


HolidaySpan = Annotated[
    Union[Annotated[SingleDay, Tag("single")], Annotated[MultiDays, Tag("multi")]],
    Discriminator(_span_kind),
]


def span_of(start: dt.date, end: dt.date | None = None) -> SingleDay | MultiDays:
    """Build a span; ``end`` omitted means a single day.

    Raises ``InvalidSpan`` when *end* is before *start*.
    """
    if end is None:
        return SingleDay(on=start)
    if start > end:
        raise InvalidSpan(start, end)
    return MultiDays(from_=start, to=end)


# ---------------------------------------------------------------------------
# Holiday
# ---------------------------------------------------------------------------

_SPAN_KEYS = ("on", "from", "from_", "to")


class Holiday(BaseModel):
    """Describes an official holiday in RUET."""

    model_config = _SPAN_CONFIG

    reason: str = Field(alias="for")
    span: HolidaySpan

    @model_validator(mode="before")
    @classmethod
    def _gather_span(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and "span" not in data:
            data = dict(data)
            data["span"] = {k: data.pop(k) for k in _SPAN_KEYS if k in data}
        return data

    @model_serializer(mode="wrap")
    def _flatten_span(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        fields = handler(self)
        span = fields.pop("span")
        return {**fields, **span}

    def contains(self, needle: dt.date) -> bool:
        return self.span.contains(needle)


# ---------------------------------------------------------------------------
# Date-to-day mapping
# ---------------------------------------------------------------------------

class ClassDay(NewtypeVariant):
    """A regular class day of the cycle."""

    tag = "day"

    day: Day


class Weekend(UnitVariant):
    tag = "weekend"


class OnHoliday(NewtypeVariant):
    """An official holiday."""

    tag = "holiday"

    holiday: Holiday


class OffDay(NewtypeVariant):
    """A day removed from the cycle by a notice."""

    tag = "offDay"

    notice: Notice


DateDayMapping = tagged_union(ClassDay, Weekend, OnHoliday, OffDay)
