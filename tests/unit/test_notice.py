"""Tests for WhoScope, TimeScope and the Notice union."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import TypeAdapter, ValidationError

from unbusy.core.enums import Day, Section
from unbusy.domain.notice import (
    AllDay,
    ClassOff,
    ClassTest,
    Exam,
    ExtraClass,
    Notice,
    Others,
    Period,
    TimeScope,
    WhoScope,
)
from unbusy.domain.roll import Roll, Thirty

NOTICE = TypeAdapter(Notice)
TIME_SCOPE = TypeAdapter(TimeScope)


# ---------------------------------------------------------------------------
# WhoScope
# ---------------------------------------------------------------------------


class TestWhoScope:
    def test_default_is_everyone(self):
        scope = WhoScope()
        assert scope.section is None
        assert scope.thirty == Thirty(0)
        assert scope.is_default()

    def test_section_makes_it_non_default(self):
        assert not WhoScope(section=Section.B).is_default()

    def test_thirty_makes_it_non_default(self):
        assert not WhoScope(thirty=Thirty(1)).is_default()

    def test_covers_everyone_by_default(self, first_thirty_roll, second_thirty_roll):
        assert WhoScope().covers(first_thirty_roll)
        assert WhoScope().covers(second_thirty_roll)

    def test_covers_section(self):
        scope = WhoScope(section=Section.B)
        assert scope.covers(Roll(1610061))
        assert not scope.covers(Roll(1610001))

    def test_covers_thirty(self, first_thirty_roll, second_thirty_roll):
        scope = WhoScope(section=Section.A, thirty=Thirty(2))
        assert scope.covers(second_thirty_roll)
        assert not scope.covers(first_thirty_roll)

    def test_wire_form(self):
        data = WhoScope(section=Section.C, thirty=Thirty(1)).model_dump(mode="json")
        assert data == {"section": "C", "thirty": 1}


# ---------------------------------------------------------------------------
# TimeScope
# ---------------------------------------------------------------------------


class TestTimeScope:
    def test_all_day_without_end(self):
        assert TIME_SCOPE.dump_python(AllDay(), mode="json") == {"allDay": None}

    def test_all_day_with_end(self):
        scope = AllDay(date(2020, 3, 5))
        assert scope.until == date(2020, 3, 5)
        assert TIME_SCOPE.dump_python(scope, mode="json") == {"allDay": "2020-03-05"}

    def test_period(self):
        assert TIME_SCOPE.dump_python(Period(3), mode="json") == {"period": 3}

    def test_parse(self):
        assert TIME_SCOPE.validate_python({"allDay": None}) == AllDay()
        assert TIME_SCOPE.validate_python({"allDay": "2020-03-05"}) == AllDay(date(2020, 3, 5))
        assert TIME_SCOPE.validate_python({"period": 2}) == Period(2)

    def test_unknown_tag(self):
        with pytest.raises(ValidationError):
            TIME_SCOPE.validate_python({"halfDay": None})


# ---------------------------------------------------------------------------
# ClassOff and default elision
# ---------------------------------------------------------------------------


class TestClassOff:
    def test_default_who_scope_is_elided(self):
        notice = ClassOff(date=date(2020, 3, 1), time=AllDay(), day_off=True)
        data = NOTICE.dump_python(notice, mode="json")
        assert list(data) == ["classOff"]
        assert data["classOff"] == {
            "date": "2020-03-01",
            "time": {"allDay": None},
            "dayOff": True,
        }

    def test_non_default_who_scope_is_kept(self):
        notice = ClassOff(
            date=date(2020, 3, 1),
            time=Period(2),
            for_whom=WhoScope(section=Section.A),
            day_off=False,
        )
        payload = NOTICE.dump_python(notice, mode="json")["classOff"]
        assert payload["forWhom"] == {"section": "A", "thirty": 0}

    def test_missing_who_scope_is_reconstituted(self):
        notice = NOTICE.validate_python(
            {"classOff": {"date": "2020-03-01", "time": {"allDay": None}, "dayOff": True}}
        )
        assert isinstance(notice, ClassOff)
        assert notice.for_whom == WhoScope()
        assert notice.day_off is True

    def test_explicit_default_scope_round_trips_to_elided(self):
        notice = NOTICE.validate_python(
            {
                "classOff": {
                    "date": "2020-03-01",
                    "time": {"period": 1},
                    "forWhom": {"section": None, "thirty": 0},
                    "dayOff": False,
                }
            }
        )
        assert "forWhom" not in NOTICE.dump_python(notice, mode="json")["classOff"]

    def test_day_off_is_required(self):
        with pytest.raises(ValidationError):
            NOTICE.validate_python({"classOff": {"date": "2020-03-01", "time": {"allDay": None}}})


# ---------------------------------------------------------------------------
# Other variants
# ---------------------------------------------------------------------------


class TestExtraClass:
    def test_time_carries_local_offset(self):
        notice = ExtraClass(
            date=date(2020, 3, 2),
            time=datetime(2020, 3, 2, 4, 0, tzinfo=timezone.utc),
            for_whom=WhoScope(),
        )
        assert notice.time.tzinfo is not None
        assert notice.time == datetime(2020, 3, 2, 4, 0, tzinfo=timezone.utc)

    def test_naive_time_is_local(self):
        notice = ExtraClass(
            date=date(2020, 3, 2), time=datetime(2020, 3, 2, 10, 0), for_whom=WhoScope()
        )
        assert notice.time.tzinfo is not None
        assert notice.time.replace(tzinfo=None) == datetime(2020, 3, 2, 10, 0)

    def test_for_whom_is_always_emitted(self):
        notice = ExtraClass(
            date=date(2020, 3, 2),
            time=datetime(2020, 3, 2, 10, 0, tzinfo=timezone(timedelta(hours=6))),
            for_whom=WhoScope(),
        )
        payload = NOTICE.dump_python(notice, mode="json")["extraClass"]
        assert payload["forWhom"] == {"section": None, "thirty": 0}

    def test_for_whom_is_required(self):
        with pytest.raises(ValidationError):
            NOTICE.validate_python(
                {"extraClass": {"date": "2020-03-02", "time": "2020-03-02T10:00:00+06:00"}}
            )


class TestClassTest:
    def test_wire_form(self):
        notice = ClassTest(
            day=Day.C, cycle=3, period=2, course="EEE 2105", teacher="SCM",
            extra_info="Chapters 1-3",
        )
        assert NOTICE.dump_python(notice, mode="json") == {
            "classTest": {
                "day": "C",
                "cycle": 3,
                "period": 2,
                "course": "EEE 2105",
                "teacher": "SCM",
                "extraInfo": "Chapters 1-3",
            }
        }

    def test_cycle_is_u8(self):
        with pytest.raises(ValidationError):
            ClassTest(day=Day.A, cycle=300, period=1, course="", teacher="", extra_info="")


class TestExamAndOthers:
    def test_exam(self):
        notice = NOTICE.validate_python(
            {"exam": {"date": "2020-06-01", "course": "Math 2101", "extraInfo": "Full syllabus"}}
        )
        assert notice == Exam(date=date(2020, 6, 1), course="Math 2101", extra_info="Full syllabus")

    def test_others(self):
        notice = Others(date=date(2020, 6, 2), message="Convocation")
        assert NOTICE.dump_python(notice, mode="json") == {
            "others": {"date": "2020-06-02", "message": "Convocation"}
        }

    def test_untagged_payload_rejected(self):
        with pytest.raises(ValidationError):
            NOTICE.validate_python({"date": "2020-06-02", "message": "Convocation"})
