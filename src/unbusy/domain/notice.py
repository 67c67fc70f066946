"""Notices: calendar overrides published for a series-department.

Notices are an externally tagged union::

    {"classOff": {"date": "2020-03-01", "time": {"allDay": null}, "dayOff": true}}
    {"exam": {"date": "2020-03-10", "course": "EEE 2105", "extraInfo": "..."}}

``ClassOff`` is the only variant with a conditional field: ``forWhom`` is left
out of the wire form when it targets everyone.
"""

from __future__ import annotations

import datetime as dt
from typing import Annotated, Any

from pydantic import BaseModel, Field, field_validator

from unbusy.core.enums import Day, Section
from unbusy.domain.roll import Roll, Thirty
from unbusy.domain.variants import (
    CAMEL_CONFIG,
    NewtypeVariant,
    StructVariant,
    tagged_union,
)

U8 = Annotated[int, Field(ge=0, le=255)]


# ---------------------------------------------------------------------------
# Scopes
# ---------------------------------------------------------------------------

class WhoScope(BaseModel):
    """Students a notice applies to.  The default means everyone."""

    model_config = CAMEL_CONFIG

    section: Section | None = None
    thirty: Thirty = Thirty(0)

    def is_default(self) -> bool:
        return self.section is None and self.thirty == Thirty(0)

    def covers(self, roll: Roll) -> bool:
        """Whether *roll* falls inside this scope."""
        if self.section is not None and self.section != roll.section:
            return False
        return self.thirty.is_unspecified() or self.thirty == roll.thirty


class AllDay(NewtypeVariant):
    """The whole day; ``until`` optionally extends it to an inclusive range."""

    tag = "allDay"

    until: dt.date | None = None


class Period(NewtypeVariant):
    """A single numbered period of the day."""

    tag = "period"

    period: U8


TimeScope = tagged_union(AllDay, Period)


# ---------------------------------------------------------------------------
# Notice variants
# ---------------------------------------------------------------------------

class ClassOff(StructVariant):
    """Class suspension.  ``day_off`` removes the day from the cycle calendar."""

    tag = "classOff"

    date: dt.date
    time: TimeScope
    for_whom: WhoScope = Field(default_factory=WhoScope)
    day_off: bool

    def _payload(self, fields: dict[str, Any]) -> dict[str, Any]:
        if self.for_whom.is_default():
            fields.pop("forWhom", None)
            fields.pop("for_whom", None)
        return fields


class ExtraClass(StructVariant):
    """Additional class at a wall-clock time."""

    tag = "extraClass"

    date: dt.date
    time: dt.datetime
    for_whom: WhoScope

    @field_validator("time")
    @classmethod
    def time_in_local_zone(cls, v: dt.datetime) -> dt.datetime:
        # Naive input is local wall-clock time; aware input is converted.
        return v.astimezone()


class ClassTest(StructVariant):
    """Class test, scheduled in cycle/day space rather than on a date."""

    tag = "classTest"

    day: Day
    cycle: U8
    period: U8
    course: str
    teacher: str
    extra_info: str  # syllabus


class Exam(StructVariant):
    tag = "exam"

    date: dt.date
    course: str
    extra_info: str  # syllabus


class Others(StructVariant):
    """Any other kind of notice."""

    tag = "others"

    date: dt.date
    message: str


Notice = tagged_union(ClassOff, ExtraClass, ClassTest, Exam, Others)
