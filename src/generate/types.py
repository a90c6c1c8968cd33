# Transient data passed between pipeline steps.
# Every object here lives for exactly one generation call.

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict


class PromptKind(str, Enum):
    """What the caller wants generated; selects template and result shape."""
    SEMESTER_PLAN = "semester_plan"
    PROJECT_DETAILS = "project_details"
    REPO_STRUCTURE = "repo_structure"
    NOTE_SUGGESTIONS = "note_suggestions"
    NOTE_SUMMARY = "note_summary"
    PROGRESS_NUDGE = "progress_nudge"
    COURSE_RECOMMENDATIONS = "course_recommendations"

    @property
    def expects_json(self) -> bool:
        return self not in (PromptKind.NOTE_SUMMARY, PromptKind.PROGRESS_NUDGE)


class GenerationStage(str, Enum):
    BUILDING = "building"
    SENT = "sent"
    EXTRACTING = "extracting"
    PARSING = "parsing"
    MAPPED = "mapped"


@dataclass
class GenerationRequest:
    """Prompt kind plus the named values its template interpolates."""
    prompt_kind: PromptKind
    parameters: Dict[str, Any] = field(default_factory=dict)


@dataclass
class RawModelResponse:
    """Text exactly as returned by the relay."""
    text: str


@dataclass
class ExtractedPayload:
    """Best-effort substring believed to hold JSON."""
    candidate: str
    was_fenced: bool = False


@dataclass
class RepairedPayload:
    """Generic JSON value; `repaired` is True when strict parsing failed first."""
    value: Any
    repaired: bool = False
