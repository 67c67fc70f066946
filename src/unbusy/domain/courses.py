"""Course catalogue: official and colloquial names per department and code.

The catalogue is data.  A single built-in entry ships with the library;
more are registered at runtime or loaded from a TOML file::

    [[courses]]
    department = "EEE"
    code = "EEE 2100"
    official = "Electrical Shop Practice"
    colloquial = "Electrical Shop"
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, NamedTuple

from unbusy.core.enums import Department
from unbusy.core.errors import CourseNotFound, ParseError


class CourseName(NamedTuple):
    official: str
    colloquial: str


BUILTIN_COURSES: dict[tuple[Department, str], CourseName] = {
    (Department.EEE, "EEE 2100"): CourseName(
        "Electrical Shop Practice", "Electrical Shop"
    ),
}


def _parse_record(
    index: int, record: Any
) -> tuple[tuple[Department, str], CourseName]:
    if not isinstance(record, Mapping):
        raise ParseError(f"Course record {index} is not a table")
    try:
        department = Department.parse(str(record["department"]))
        key = (department, str(record["code"]))
        return key, CourseName(str(record["official"]), str(record["colloquial"]))
    except KeyError as exc:
        raise ParseError(f"Course record {index} missing field {exc}") from exc


class CourseCatalogue:
    """Lookup table keyed by ``(Department, code)``."""

    def __init__(
        self, entries: dict[tuple[Department, str], CourseName] | None = None
    ) -> None:
        self._entries: dict[tuple[Department, str], CourseName] = dict(entries or {})

    def register(
        self, department: Department, code: str, official: str, colloquial: str
    ) -> None:
        self._entries[(department, code)] = CourseName(official, colloquial)

    def extend(self, records: Iterable[Mapping[str, Any]]) -> int:
        """Register catalogue records (``department``, ``code``, ``official``,
        ``colloquial``).  Returns the number of records added.

        Every record is checked before any is registered, so a bad record
        leaves the catalogue unchanged.
        """
        if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Iterable):
            raise ParseError("Course records must be a list of tables")
        parsed = [_parse_record(i, record) for i, record in enumerate(records)]
        for key, name in parsed:
            self._entries[key] = name
        return len(parsed)

    def lookup(self, department: Department, code: str) -> CourseName:
        try:
            return self._entries[(department, code)]
        except KeyError:
            raise CourseNotFound(department, code) from None

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[tuple[Department, str]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


_default = CourseCatalogue(BUILTIN_COURSES)


def default_catalogue() -> CourseCatalogue:
    """The process-wide catalogue used by ``Department.get_course_name``."""
    return _default
