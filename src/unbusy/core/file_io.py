"""Document I/O for routines, holidays, notices and course catalogues.

Every domain type has one wire form (camelCase JSON/YAML, see
``unbusy.domain``).  These helpers move values between that form and
files, turning pydantic validation failures into ``ParseError`` so callers
deal with a single error taxonomy.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, TypeAdapter, ValidationError

from unbusy.core.errors import ParseError
from unbusy.domain.calendar import Holiday
from unbusy.domain.courses import CourseCatalogue, default_catalogue
from unbusy.domain.notice import Notice
from unbusy.domain.routine import ClassRoutine

logger = logging.getLogger(__name__)

T = TypeVar("T")

_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


class _Loader(yaml.SafeLoader):
    """SafeLoader that reads ``on``/``off``/``yes``/``no`` as strings.

    Holiday documents use ``on`` as a key; YAML 1.1 would turn it into True.
    """


_BOOL_TAG = "tag:yaml.org,2002:bool"
_Loader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_Loader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


# ---------------------------------------------------------------------------
# Data <-> domain values
# ---------------------------------------------------------------------------

def _one_line(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return f"{exc.title}: " + "; ".join(parts)


def to_data(value: Any, type_: Any = None) -> Any:
    """Convert a domain value to JSON-compatible data in wire form."""
    if type_ is None and isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    adapter = TypeAdapter(type_ if type_ is not None else type(value))
    return adapter.dump_python(value, mode="json", by_alias=True)


def from_data(type_: type[T] | Any, data: Any) -> T:
    """Validate wire-form data into *type_*.

    Raises ``ParseError`` carrying every validation message on one line.
    """
    try:
        return TypeAdapter(type_).validate_python(data)
    except ValidationError as exc:
        raise ParseError(_one_line(exc)) from exc


def dumps(value: Any, format: str = "json", type_: Any = None) -> str:
    data = to_data(value, type_)
    if format == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    if format == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise ParseError(f"Unknown document format: '{format}'")


def loads(type_: type[T] | Any, text: str, format: str = "json") -> T:
    if format == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Malformed JSON: {exc}") from exc
    elif format == "yaml":
        try:
            data = yaml.load(text, Loader=_Loader)
        except yaml.YAMLError as exc:
            raise ParseError(f"Malformed YAML: {' '.join(str(exc).split())}") from exc
    else:
        raise ParseError(f"Unknown document format: '{format}'")
    return from_data(type_, data)


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

def format_for(path: Path) -> str:
    """Pick the document format from the file suffix."""
    try:
        return _FORMATS[path.suffix.lower()]
    except KeyError:
        raise ParseError(f"Unsupported document type: '{path.name}'") from None


def _count(value: Any) -> int:
    try:
        return len(value)
    except TypeError:
        return 1


def load_document(path: str | Path, type_: type[T] | Any) -> T:
    path = Path(path)
    fmt = format_for(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"Document {path.name} is not UTF-8: {exc.reason}") from exc
    value = loads(type_, text, fmt)
    logger.debug(
        "document_loaded",
        extra={"path": str(path), "format": fmt, "items": _count(value)},
    )
    return value


def dump_document(path: str | Path, value: Any, type_: Any = None) -> None:
    """Write *value* to *path* in the format implied by its suffix.

    The caller is responsible for creating parent directories.
    """
    path = Path(path)
    fmt = format_for(path)
    path.write_text(dumps(value, fmt, type_), encoding="utf-8")
    logger.debug(
        "document_dumped",
        extra={"path": str(path), "format": fmt, "items": _count(value)},
    )


def load_routine(path: str | Path) -> ClassRoutine:
    return load_document(path, ClassRoutine)


def load_holidays(path: str | Path) -> list[Holiday]:
    return load_document(path, list[Holiday])


def load_notices(path: str | Path) -> list[Notice]:
    return load_document(path, list[Notice])


def load_catalogue(
    path: str | Path, catalogue: CourseCatalogue | None = None
) -> CourseCatalogue:
    """Extend *catalogue* (default: the process-wide one) from a TOML file."""
    import tomli

    path = Path(path)
    catalogue = catalogue if catalogue is not None else default_catalogue()
    try:
        with open(path, "rb") as f:
            data = tomli.load(f)
    except (tomli.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(f"Malformed course catalogue {path.name}: {exc}") from exc

    added = catalogue.extend(data.get("courses", []))
    logger.info("catalogue_loaded", extra={"path": str(path), "items": added})
    return catalogue
