# Generation pipeline package

# Makes generate/ importable and exposes the caller-facing interfaces.

from .generator import PlannerGenerator, build_generator
from .gateway import GatewayConfig, ModelGateway
from .errors import GenerationError, GatewayError, GatewayErrorKind, PayloadUnparseable, ShapeMismatch
from .types import GenerationRequest, PromptKind, RawModelResponse
from .shapes import UserProfile, SemesterPlan, Project, RepoStructure, CourseRecommendations

__all__ = [
    "PlannerGenerator",
    "build_generator",
    "GatewayConfig",
    "ModelGateway",
    "GenerationError",
    "GatewayError",
    "GatewayErrorKind",
    "PayloadUnparseable",
    "ShapeMismatch",
    "GenerationRequest",
    "PromptKind",
    "RawModelResponse",
    "UserProfile",
    "SemesterPlan",
    "Project",
    "RepoStructure",
    "CourseRecommendations",
]
