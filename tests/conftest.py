"""Shared fixtures for the unbusy test suite."""

from __future__ import annotations

from datetime import date

import pytest

from unbusy.core.enums import Day
from unbusy.domain.calendar import Holiday, span_of
from unbusy.domain.roll import Roll, Thirty
from unbusy.domain.routine import (
    ClassInRoutine,
    ClassRoutine,
    EveryCycleWith,
    OddCyclesWithAll,
)


# ---------------------------------------------------------------------------
# Rolls
# ---------------------------------------------------------------------------

@pytest.fixture
def first_thirty_roll() -> Roll:
    """EEE 16 series, section A, thirty 1."""
    return Roll(1610001)


@pytest.fixture
def second_thirty_roll() -> Roll:
    """EEE 16 series, section A, thirty 2."""
    return Roll(1610045)


# ---------------------------------------------------------------------------
# Routine
# ---------------------------------------------------------------------------

@pytest.fixture
def lab_class() -> ClassInRoutine:
    """A three-hour lab for the second thirty only."""
    return ClassInRoutine(
        course="EEE 2104",
        teacher="MFH",
        period=1,
        class_room="EEE 201",
        contact_hours=3,
        frequency=EveryCycleWith(Thirty(2)),
    )


@pytest.fixture
def sample_routine(lab_class) -> ClassRoutine:
    return ClassRoutine(
        {
            Day.A: [
                lab_class,
                ClassInRoutine(
                    course="EEE 2105", teacher="SCM", period=4, class_room="EEE 201"
                ),
                ClassInRoutine(
                    course="Math 2101",
                    teacher="MSA",
                    period=5,
                    class_room="EEE 201",
                    frequency=OddCyclesWithAll(),
                ),
            ],
            Day.C: [
                ClassInRoutine(
                    course="ME 2101", teacher="RIS", period=6, class_room="EEE 201"
                ),
            ],
        }
    )


ROUTINE_YAML = """\
A:
  - course: EEE 2105
    teacher: SCM
    period: 4
    classRoom: EEE 201
  - course: Math 2101
    teacher: MSA
    period: 5
    classRoom: EEE 201
    frequency:
      everyCycleWith: 2
  - course: ME 2101
    teacher: RIS
    period: 6
    classRoom: EEE 201
    frequency: oddCyclesWithAll
    comment: Thermodynamics
"""


@pytest.fixture
def routine_yaml(tmp_path):
    """Path to a routine document written the way users write them."""
    path = tmp_path / "routine.yaml"
    path.write_text(ROUTINE_YAML, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Holidays
# ---------------------------------------------------------------------------

@pytest.fixture
def winter_vacation() -> Holiday:
    return Holiday(reason="Winter", span=span_of(date(2020, 12, 20), date(2021, 1, 2)))
