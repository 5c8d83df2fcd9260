"""
Grade entry validation.

Rules run in a fixed order and the first rule that fails decides the
outcome: presence, then range, then format. Within one rule every field is
checked, so a candidate missing two fields reports both, in the order they
were checked.

The presence rule (required fields and their types) is the strict parse of
``GradeCreate`` / ``GradeUpdate``; range and format are checked here on the
parsed record.

Validation is pure: it never raises for bad input and never touches the
store. Callers receive either a ``GradeCreate`` / ``GradeUpdate`` or an
``InvalidGrade`` describing what went wrong.
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from academics.core.config import (
    ACADEMIC_YEAR_MESSAGE,
    ACADEMIC_YEAR_PATTERN,
    GRADE_MAX,
    GRADE_MIN,
)
from academics.schemas.grade import GradeCreate, GradeUpdate

# ASCII digits only; fullmatch so a trailing newline is not accepted
_ACADEMIC_YEAR_RE = re.compile(ACADEMIC_YEAR_PATTERN, re.ASCII)

_MESSAGES = {
    "missing": "Required",
    "string_too_short": "Required",
    "int_type": "Expected an integer",
    "int_from_float": "Expected an integer",
    "int_parsing": "Expected an integer",
    "greater_than": "Expected a positive integer",
    "less_than_equal": "Id is out of range",
    "float_type": "Expected a number",
    "float_parsing": "Expected a number",
    "finite_number": "Expected a number",
    "string_type": "Expected a string",
}


@dataclass(frozen=True)
class FieldIssue:
    field: str
    message: str

    def as_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class InvalidGrade:
    rule: str  # "presence" | "range" | "format"
    issues: tuple[FieldIssue, ...]

    def as_list(self) -> list[dict]:
        return [issue.as_dict() for issue in self.issues]


def is_valid_academic_year(value: str) -> bool:
    return _ACADEMIC_YEAR_RE.fullmatch(value) is not None


def _issue_from_error(error: dict) -> FieldIssue:
    field = ".".join(str(part) for part in error["loc"]) or "body"
    if error["type"] != "missing" and error.get("input", ...) is None:
        return FieldIssue(field, "Required")
    if error["type"] == "string_too_long":
        return FieldIssue(field, f"Must be at most {error['ctx']['max_length']} characters")
    return FieldIssue(field, _MESSAGES.get(error["type"], error["msg"]))


def _check_presence(model, candidate: Mapping[str, Any]):
    try:
        return model.model_validate(candidate, strict=True), []
    except PydanticValidationError as exc:
        return None, [_issue_from_error(err) for err in exc.errors()]


def _check_range(grade: float) -> list[FieldIssue]:
    if grade < GRADE_MIN:
        return [FieldIssue("grade", f"Grade must be greater than or equal to {GRADE_MIN}")]
    if grade > GRADE_MAX:
        return [FieldIssue("grade", f"Grade must be less than or equal to {GRADE_MAX}")]
    return []


def validate_grade_create(candidate: Mapping[str, Any]) -> GradeCreate | InvalidGrade:
    record, issues = _check_presence(GradeCreate, candidate)
    if issues:
        return InvalidGrade("presence", tuple(issues))

    issues = _check_range(record.grade)
    if issues:
        return InvalidGrade("range", tuple(issues))

    if not is_valid_academic_year(record.academic_year):
        return InvalidGrade("format", (FieldIssue("academicYear", ACADEMIC_YEAR_MESSAGE),))

    return record


def validate_grade_update(candidate: Mapping[str, Any]) -> GradeUpdate | InvalidGrade:
    record, issues = _check_presence(GradeUpdate, candidate)
    if issues:
        return InvalidGrade("presence", tuple(issues))

    issues = _check_range(record.grade)
    if issues:
        return InvalidGrade("range", tuple(issues))

    return record
