# Map a generic JSON value onto the typed shape for a prompt kind.
#
# Each validator returns a ShapeCheck (value or failing field) instead of
# raising; map_result() is the single place that turns a failed check into
# ShapeMismatch. Missing arrays default to empty, missing or mistyped
# required scalars fail.

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from pydantic import StrictStr, TypeAdapter, ValidationError

from .errors import ShapeMismatch
from .shapes import CourseRecommendations, Project, RepoStructure, SemesterPlan, TypedResult
from .types import PromptKind


@dataclass
class ShapeCheck:
    value: Any = None
    field: Optional[str] = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.field is None

    @classmethod
    def passed(cls, value: Any) -> "ShapeCheck":
        return cls(value=value)

    @classmethod
    def failed(cls, field: str, reason: str) -> "ShapeCheck":
        return cls(field=field, reason=reason)


def _path(loc: Sequence[Union[str, int]], prefix: str = "") -> str:
    out = prefix
    for part in loc:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out = f"{out}.{part}" if out else str(part)
    return out


def _describe(err: ValidationError, root: str, prefix: str = "") -> Tuple[str, str]:
    first = err.errors()[0]
    return _path(first["loc"], prefix) or root, first["msg"]


def _check_model(model, value: Any, root: str) -> ShapeCheck:
    try:
        return ShapeCheck.passed(model.model_validate(value))
    except ValidationError as e:
        field, reason = _describe(e, root)
        return ShapeCheck.failed(field, reason)


# ------------------------------------------------------------
# Validators
# ------------------------------------------------------------
def check_semester_plans(value: Any) -> ShapeCheck:
    if isinstance(value, dict):
        value = [value]
    if not isinstance(value, list):
        return ShapeCheck.failed("semesters", f"expected a list of semester objects, got {type(value).__name__}")

    plans: List[SemesterPlan] = []
    for i, entry in enumerate(value):
        check = _check_model(SemesterPlan, entry, root=f"semesters[{i}]")
        if not check.ok:
            return ShapeCheck.failed(check.field, f"semester entry {i}: {check.reason}")
        plans.append(check.value)
    return ShapeCheck.passed(plans)


def check_project(value: Any) -> ShapeCheck:
    return _check_model(Project, value, root="project")


def check_repo_structure(value: Any) -> ShapeCheck:
    return _check_model(RepoStructure, value, root="repoStructure")


_SUGGESTIONS = TypeAdapter(List[StrictStr])


def check_suggestions(value: Any) -> ShapeCheck:
    if isinstance(value, dict) and "suggestions" in value:
        value = value["suggestions"]
    try:
        return ShapeCheck.passed(_SUGGESTIONS.validate_python(value))
    except ValidationError as e:
        field, reason = _describe(e, root="suggestions", prefix="suggestions")
        return ShapeCheck.failed(field, reason)


def check_course_recommendations(value: Any) -> ShapeCheck:
    return _check_model(CourseRecommendations, value, root="recommendations")


def check_plain_text(value: Any) -> ShapeCheck:
    if not isinstance(value, str):
        return ShapeCheck.failed("text", f"expected a string, got {type(value).__name__}")
    text = value.strip()
    if not text:
        return ShapeCheck.failed("text", "model returned an empty response")
    return ShapeCheck.passed(text)


VALIDATORS: Dict[PromptKind, Callable[[Any], ShapeCheck]] = {
    PromptKind.SEMESTER_PLAN: check_semester_plans,
    PromptKind.PROJECT_DETAILS: check_project,
    PromptKind.REPO_STRUCTURE: check_repo_structure,
    PromptKind.NOTE_SUGGESTIONS: check_suggestions,
    PromptKind.NOTE_SUMMARY: check_plain_text,
    PromptKind.PROGRESS_NUDGE: check_plain_text,
    PromptKind.COURSE_RECOMMENDATIONS: check_course_recommendations,
}


def map_result(kind: PromptKind, value: Any) -> TypedResult:
    check = VALIDATORS[kind](value)
    if not check.ok:
        raise ShapeMismatch(check.field, check.reason)
    return check.value
