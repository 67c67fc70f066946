"""Weekly class routine: which class sits when, and for whom."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated

from pydantic import BaseModel, Field, RootModel

from unbusy.core.enums import Day
from unbusy.domain.roll import Roll, Thirty
from unbusy.domain.variants import (
    CAMEL_CONFIG,
    NewtypeVariant,
    UnitVariant,
    tagged_union,
)

U8 = Annotated[int, Field(ge=0, le=255)]


# ---------------------------------------------------------------------------
# Class frequency
# ---------------------------------------------------------------------------

class EveryCycleWithAll(UnitVariant):
    """All sixty students of a section gather every cycle."""

    tag = "everyCycleWithAll"


class EveryCycleWith(NewtypeVariant):
    """Only the named thirty gathers, every cycle."""

    tag = "everyCycleWith"

    thirty: Thirty


class OddCyclesWithAll(UnitVariant):
    """All sixty students gather on odd cycles."""

    tag = "oddCyclesWithAll"


class EvenCyclesWithAll(UnitVariant):
    """All sixty students gather on even cycles."""

    tag = "evenCyclesWithAll"


class OddCyclesWith(NewtypeVariant):
    """The named thirty gathers on odd cycles.

    The other thirty is meant to gather on even cycles, but ``would_sit_for``
    answers False for every even cycle.
    """

    tag = "oddCyclesWith"

    thirty: Thirty


ClassFrequency = tagged_union(
    EveryCycleWithAll,
    EveryCycleWith,
    OddCyclesWithAll,
    EvenCyclesWithAll,
    OddCyclesWith,
)


# ---------------------------------------------------------------------------
# Routine entries
# ---------------------------------------------------------------------------

class ClassInRoutine(BaseModel):
    """A class on the routine."""

    model_config = CAMEL_CONFIG

    course: str
    teacher: str
    period: U8
    class_room: str
    contact_hours: U8 = 1
    frequency: ClassFrequency = Field(default_factory=EveryCycleWithAll)
    comment: str = ""  # e.g. the topic to be discussed

    def would_sit_for(self, roll: Roll, cycle: int) -> bool:
        """Check if the class would sit for *roll* on *cycle*."""
        odd = cycle % 2 != 0
        match self.frequency:
            case EveryCycleWithAll():
                return True
            case EveryCycleWith(thirty=thirty):
                return roll.thirty == thirty
            case OddCyclesWithAll():
                return odd
            case EvenCyclesWithAll():
                return not odd
            case OddCyclesWith(thirty=thirty):
                return odd and roll.thirty == thirty
        return False


class ClassRoutine(RootModel[dict[Day, list[ClassInRoutine]]]):
    """Routine of a section, keyed by cycle day.

    Key order carries no meaning; the order of classes within a day is the
    presentation order and is kept as written.
    """

    root: dict[Day, list[ClassInRoutine]] = Field(default_factory=dict)

    def __getitem__(self, day: Day) -> list[ClassInRoutine]:
        return self.root[day]

    def __contains__(self, day: object) -> bool:
        return day in self.root

    def __iter__(self) -> Iterator[Day]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def get(self, day: Day) -> list[ClassInRoutine]:
        return self.root.get(day, [])

    def classes_for(self, day: Day, roll: Roll, cycle: int) -> list[ClassInRoutine]:
        """Classes on *day* that *roll* sits for in *cycle*, in routine order."""
        return [c for c in self.get(day) if c.would_sit_for(roll, cycle)]


# ---------------------------------------------------------------------------
# Day cursor
# ---------------------------------------------------------------------------

class DayCursor:
    """Mutable position in the day/cycle sequence.

    Enum members cannot change in place, so stepping through the calendar
    is done on a cursor.  Wrapping from E back to A starts the next cycle.
    """

    def __init__(self, day: Day = Day.A, cycle: int = 1) -> None:
        self.day = day
        self.cycle = cycle

    def succ_mut(self) -> Day:
        """Advance to the next day and return it."""
        self.day = self.day.succ()
        if self.day is Day.A:
            self.cycle += 1
        return self.day

    def __repr__(self) -> str:
        return f"DayCursor(day={self.day.value}, cycle={self.cycle})"
