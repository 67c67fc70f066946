"""Roll numbers and the sub-groups derived from them.

A RUET roll number packs three facts into seven digits::

    1 6 0 1 0 4 5
    └┬┘ └┬┘ └─┬─┘
     │   │    └── roll in department (1-180)
     │   └─────── department tag (see ``Department``)
     └─────────── series (admission year)

A section holds sixty students and splits into two thirties of thirty.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import ConfigDict, Field, GetCoreSchemaHandler, RootModel
from pydantic_core import core_schema

from unbusy.core.enums import Department, Section
from unbusy.core.errors import InvalidRoll, InvariantViolated, ParseError

MAX_ROLL = 10_000_000
STUDENTS_PER_DEPT = 180
SECTION_SIZE = 60
THIRTY_SIZE = 30
U32_MAX = 2**32 - 1
U32_DIGITS = len(str(U32_MAX))


class Thirty(RootModel[int]):
    """Half of a section.

    ``Thirty(1)`` and ``Thirty(2)`` name real sub-groups; ``Thirty(0)`` is the
    "unspecified" sentinel used by ``WhoScope``.
    """

    model_config = ConfigDict(frozen=True)

    root: Annotated[int, Field(ge=0, le=2)]

    @property
    def value(self) -> int:
        return self.root

    def is_unspecified(self) -> bool:
        return self.root == 0

    def __int__(self) -> int:
        return self.root

    def __repr__(self) -> str:
        return f"Thirty({self.root})"


def _is_valid_roll(value: int) -> bool:
    return (
        0 <= value < MAX_ROLL
        and Department.from_tag((value // 1000) % 100) is not None
        and 1 <= value % 1000 <= STUDENTS_PER_DEPT
    )


@dataclass(frozen=True, order=True)
class Roll:
    """Validated roll number of a RUETian.

    Construction always validates; an invalid number raises ``InvalidRoll``
    so the derived views below never fail.
    """

    value: int

    def __post_init__(self) -> None:
        if (
            not isinstance(self.value, int)
            or isinstance(self.value, bool)
            or not _is_valid_roll(self.value)
        ):
            raise InvalidRoll(self.value)

    @classmethod
    def new(cls, value: int) -> Roll:
        """Create a new valid roll."""
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> Roll:
        """Parse a 32-bit unsigned decimal string, then validate it.

        An optional leading ``+`` is accepted; whitespace is not.  Text that
        is not a u32 raises ``ParseError``; a u32 that is not a roll raises
        ``InvalidRoll``.
        """
        digits = text[1:] if text.startswith("+") else text
        if not (digits.isascii() and digits.isdigit()):
            raise ParseError(f"Not an unsigned integer: '{text}'")
        if len(digits.lstrip("0")) > U32_DIGITS:
            raise ParseError(f"Number too large for a roll: {len(digits)} digits")
        try:
            value = int(digits)
        except ValueError as exc:
            raise ParseError(f"Not an unsigned integer: '{text}'") from exc
        if value > U32_MAX:
            raise ParseError(f"Number too large for a roll: {value}")
        return cls(value)

    # -- derived views ---------------------------------------------------

    @property
    def series(self) -> int:
        """Admission-year series, e.g. 16 for 1610045."""
        return self.value // 100_000

    @property
    def department(self) -> Department:
        department = Department.from_tag((self.value // 1000) % 100)
        if department is None:
            raise InvariantViolated(f"Invalid department in roll: {self.value}")
        return department

    @property
    def roll_in_dept(self) -> int:
        return self.value % 1000

    @property
    def section(self) -> Section:
        n = self.roll_in_dept
        if 1 <= n <= 60:
            return Section.A
        if 61 <= n <= 120:
            return Section.B
        if 121 <= n <= 180:
            return Section.C
        raise InvariantViolated(f"Invalid roll in department: {n}")

    @property
    def thirty(self) -> Thirty:
        n = self.roll_in_dept
        if not 1 <= n <= STUDENTS_PER_DEPT:
            raise InvariantViolated(f"Invalid roll in department: {n}")
        # First half of every sixty is thirty 1, second half thirty 2.
        return Thirty(1) if (n - 1) % SECTION_SIZE < THIRTY_SIZE else Thirty(2)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    # -- pydantic integration --------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_int = core_schema.no_info_after_validator_function(
            cls.new, core_schema.int_schema(strict=True)
        )
        return core_schema.json_or_python_schema(
            json_schema=from_int,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_int]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(int),
        )
