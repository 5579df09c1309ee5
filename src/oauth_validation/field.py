"""Field-scoped validation errors.

Every validator in this package reports problems as a list of FieldError
values rather than raising. Each error carries the wire path of the offending
field (``scopeRestrictions[0].clusterRole.roleNames``), the offending value and
a human-readable detail, so an API layer can return the complete defect list
in a single response.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from oauth_validation.errors import FieldValidationError


class ErrorType(str, Enum):
    """Kind of a field error."""

    REQUIRED = "FieldValueRequired"
    INVALID = "FieldValueInvalid"
    NOT_SUPPORTED = "FieldValueNotSupported"
    FORBIDDEN = "FieldValueForbidden"
    TOO_LONG = "FieldValueTooLong"

    @property
    def text(self) -> str:
        return _ERROR_TYPE_TEXT[self]


_ERROR_TYPE_TEXT = {
    ErrorType.REQUIRED: "Required value",
    ErrorType.INVALID: "Invalid value",
    ErrorType.NOT_SUPPORTED: "Unsupported value",
    ErrorType.FORBIDDEN: "Forbidden",
    ErrorType.TOO_LONG: "Too long",
}


class Path:
    """Immutable path to a field.

    Child paths are new objects; a parent path is never modified, so the same
    path can be handed to several validators.
    """

    __slots__ = ("_name", "_index", "_parent")

    def __init__(
        self, name: str = "", parent: Path | None = None, index: int | str | None = None
    ):
        self._name = name
        self._index = index
        self._parent = parent

    def child(self, name: str, *more: str) -> Path:
        path = Path(name, self)
        for extra in more:
            path = Path(extra, path)
        return path

    def index(self, i: int) -> Path:
        return Path("", self, i)

    def key(self, k: str) -> Path:
        return Path("", self, k)

    def __str__(self) -> str:
        segments: list[Path] = []
        path: Path | None = self
        while path is not None:
            segments.append(path)
            path = path._parent

        rendered = ""
        for segment in reversed(segments):
            if segment._index is not None:
                rendered += f"[{segment._index}]"
            elif segment._name:
                rendered = f"{rendered}.{segment._name}" if rendered else segment._name
        return rendered

    def __repr__(self) -> str:
        return f"Path({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))


def new_path(name: str, *more: str) -> Path:
    """Build a root path, e.g. ``new_path("metadata", "name")``."""
    return Path(name).child(*more) if more else Path(name)


@dataclass(frozen=True)
class FieldError:
    """A single problem with a single field."""

    type: ErrorType
    field: str
    bad_value: Any = None
    detail: str = ""

    def error_body(self) -> str:
        body = self.type.text
        if self.type in (ErrorType.INVALID, ErrorType.NOT_SUPPORTED, ErrorType.TOO_LONG):
            body += f": {_quote(self.bad_value)}"
        if self.detail:
            body += f": {self.detail}"
        return body

    def __str__(self) -> str:
        if not self.field:
            return self.error_body()
        return f"{self.field}: {self.error_body()}"


def _quote(value: Any) -> str:
    if isinstance(value, str):
        return f'"{value}"'
    return repr(value)


class ErrorList(list):
    """Ordered collection of FieldError. Empty means valid."""

    def filter(self, *types: ErrorType) -> ErrorList:
        """Return the errors whose type is not in ``types``."""
        return ErrorList(err for err in self if err.type not in types)

    def fields(self) -> list[str]:
        return [err.field for err in self]

    def to_aggregate(self) -> FieldValidationError | None:
        """Fold the list into one exception, or None when there is nothing to report."""
        if not self:
            return None
        return FieldValidationError(list(self))


def required(path: Path, detail: str = "") -> FieldError:
    return FieldError(ErrorType.REQUIRED, str(path), "", detail)


def invalid(path: Path, value: Any, detail: str) -> FieldError:
    return FieldError(ErrorType.INVALID, str(path), value, detail)


def not_supported(path: Path, value: Any, valid_values: Iterable[str]) -> FieldError:
    detail = ""
    quoted = [f'"{v}"' for v in valid_values]
    if quoted:
        detail = "supported values: " + ", ".join(quoted)
    return FieldError(ErrorType.NOT_SUPPORTED, str(path), value, detail)


def forbidden(path: Path, detail: str) -> FieldError:
    return FieldError(ErrorType.FORBIDDEN, str(path), "", detail)


def too_long(path: Path, value: Any, limit: int) -> FieldError:
    return FieldError(
        ErrorType.TOO_LONG, str(path), value, f"must have at most {limit} bytes"
    )
