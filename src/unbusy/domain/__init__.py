"""Domain layer: rolls, routines, notices, holidays and courses.

Every value here is immutable once constructed and serializes to one stable
camelCase wire form.
"""

from unbusy.domain.calendar import (  # noqa: F401
    ClassDay,
    DateDayMapping,
    Holiday,
    HolidaySpan,
    MultiDays,
    OffDay,
    OnHoliday,
    SingleDay,
    Weekend,
    span_of,
)
from unbusy.domain.courses import CourseCatalogue, CourseName, default_catalogue  # noqa: F401
from unbusy.domain.notice import (  # noqa: F401
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
from unbusy.domain.roll import Roll, Thirty  # noqa: F401
from unbusy.domain.routine import (  # noqa: F401
    ClassFrequency,
    ClassInRoutine,
    ClassRoutine,
    DayCursor,
    EvenCyclesWithAll,
    EveryCycleWith,
    EveryCycleWithAll,
    OddCyclesWith,
    OddCyclesWithAll,
)

__all__ = [
    "AllDay",
    "ClassDay",
    "ClassFrequency",
    "ClassInRoutine",
    "ClassOff",
    "ClassRoutine",
    "ClassTest",
    "CourseCatalogue",
    "CourseName",
    "DateDayMapping",
    "DayCursor",
    "EvenCyclesWithAll",
    "EveryCycleWith",
    "EveryCycleWithAll",
    "Exam",
    "ExtraClass",
    "Holiday",
    "HolidaySpan",
    "MultiDays",
    "Notice",
    "OddCyclesWith",
    "OddCyclesWithAll",
    "OffDay",
    "OnHoliday",
    "Others",
    "Period",
    "Roll",
    "SingleDay",
    "Thirty",
    "TimeScope",
    "Weekend",
    "WhoScope",
    "default_catalogue",
    "span_of",
]
