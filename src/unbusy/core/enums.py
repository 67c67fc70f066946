"""Enumerations used across the Unbusy domain model."""

from __future__ import annotations

from enum import Enum, IntEnum

from .errors import ParseError


class Department(IntEnum):
    """Academic department of a RUETian.

    The integer tags are part of the external contract and never change:
    engineering departments use 0-13, basic science and humanities 100-103.
    """

    CE = 0
    EEE = 1
    ME = 2
    CSE = 3
    ETE = 4
    IPE = 5
    GCE = 6
    URP = 7
    MTE = 8
    Arch = 9
    ECE = 10
    CFPE = 11
    BECM = 12
    MSE = 13

    Chem = 100
    Math = 101
    Phy = 102
    Hum = 103

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        # IntEnum formats as the integer unless told otherwise.
        return format(self.name, format_spec)

    @property
    def tag(self) -> int:
        return int(self)

    @classmethod
    def from_tag(cls, tag: int) -> Department | None:
        """Return the department carrying *tag*, or ``None``."""
        try:
            return cls(tag)
        except ValueError:
            return None

    @classmethod
    def parse(cls, name: str) -> Department:
        """Parse the identifier spelling (``"EEE"``, ``"cfpe"``)."""
        wanted = name.strip().lower()
        for member in cls:
            if member.name.lower() == wanted:
                return member
        raise ParseError(f"Unknown department: '{name}'")

    def get_course_name(self, code: str) -> tuple[str, str]:
        """Get official and colloquial name of a course.

        Raises ``CourseNotFound`` when the default catalogue has no entry.
        """
        from unbusy.domain.courses import default_catalogue

        return default_catalogue().lookup(self, code)


class Section(str, Enum):
    A = "A"
    B = "B"
    C = "C"


class Day(str, Enum):
    """Slot in the five-day academic cycle (not a calendar weekday)."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"

    def succ(self) -> Day:
        """Return the next day, wrapping E back to A."""
        members = list(Day)
        return members[(members.index(self) + 1) % len(members)]
