# Caller-facing generation service.
# Runs one linear pass per call: build prompt -> send -> extract -> repair -> map.
# Nothing is kept between calls; errors propagate as GatewayError,
# PayloadUnparseable or ShapeMismatch.

from __future__ import annotations
from typing import Any, Dict, List, Optional

from src.log import get_logger
from .errors import GenerationError
from .extractor import extract_payload
from .gateway import GatewayConfig, ModelGateway, TokenProvider
from .mapper import map_result
from .prompts import build_prompt
from .repairer import parse_payload
from .shapes import CourseRecommendations, Project, RepoStructure, SemesterPlan, TypedResult, UserProfile
from .types import GenerationRequest, GenerationStage, PromptKind, RawModelResponse

logger = get_logger(__name__)


def _profile_params(profile: UserProfile) -> Dict[str, Any]:
    return {
        "name": profile.name,
        "academic_level": profile.academic_level,
        "career_goals": profile.career_goals,
        "interests": profile.interests,
        "current_skills": profile.current_skills,
        "weekly_study_hours": profile.weekly_study_hours,
    }


class PlannerGenerator:
    def __init__(self, gateway):
        self.gateway = gateway

    # -------------------------
    # Pipeline
    # -------------------------
    def generate(self, request: GenerationRequest) -> TypedResult:
        kind = request.prompt_kind
        logger.debug("%s: %s", kind.value, GenerationStage.BUILDING.value)
        prompt = build_prompt(request)

        logger.debug("%s: %s (%d chars)", kind.value, GenerationStage.SENT.value, len(prompt))
        raw = self.gateway.send(prompt)
        return self.interpret(kind, raw)

    def interpret(self, kind: PromptKind, raw: RawModelResponse) -> TypedResult:
        """Turn relay text into the typed result for `kind` (no network)."""
        if not kind.expects_json:
            # prose kinds skip extraction and repair entirely
            return map_result(kind, raw.text)

        logger.debug("%s: %s", kind.value, GenerationStage.EXTRACTING.value)
        payload = extract_payload(raw.text)

        logger.debug("%s: %s (fenced=%s)", kind.value, GenerationStage.PARSING.value, payload.was_fenced)
        parsed = parse_payload(payload, raw.text)
        if parsed.repaired:
            logger.info("%s: response needed JSON repair", kind.value)

        try:
            result = map_result(kind, parsed.value)
        except GenerationError as e:
            logger.warning("%s: %s", kind.value, e)
            raise
        logger.debug("%s: %s", kind.value, GenerationStage.MAPPED.value)
        return result

    # -------------------------
    # One entry point per prompt kind
    # -------------------------
    def semester_plan(self, profile: UserProfile) -> List[SemesterPlan]:
        return self.generate(GenerationRequest(PromptKind.SEMESTER_PLAN, _profile_params(profile)))

    def project_details(self, project_id: str, project_title: str = "") -> Project:
        params = {"project_id": project_id, "project_title": project_title}
        return self.generate(GenerationRequest(PromptKind.PROJECT_DETAILS, params))

    def repo_structure(self, project_id: str, project_title: str = "") -> RepoStructure:
        params = {"project_id": project_id, "project_title": project_title}
        return self.generate(GenerationRequest(PromptKind.REPO_STRUCTURE, params))

    def note_suggestions(self, notes_text: str) -> List[str]:
        return self.generate(GenerationRequest(PromptKind.NOTE_SUGGESTIONS, {"notes_text": notes_text}))

    def note_summary(self, notes_text: str) -> str:
        return self.generate(GenerationRequest(PromptKind.NOTE_SUMMARY, {"notes_text": notes_text}))

    def progress_nudge(self, profile: UserProfile, completed_goals: int = 0, total_goals: int = 0) -> str:
        params = _profile_params(profile)
        params.update(completed_goals=completed_goals, total_goals=total_goals)
        return self.generate(GenerationRequest(PromptKind.PROGRESS_NUDGE, params))

    def course_recommendations(self, course_title: str, course_description: Optional[str] = "") -> CourseRecommendations:
        params = {"course_title": course_title, "course_description": course_description or ""}
        return self.generate(GenerationRequest(PromptKind.COURSE_RECOMMENDATIONS, params))


def build_generator(settings, token_provider: Optional[TokenProvider] = None) -> PlannerGenerator:
    """Wire a generator to the relay described by `settings`."""
    return PlannerGenerator(ModelGateway(GatewayConfig.from_settings(settings, token_provider)))
