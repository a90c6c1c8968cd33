# Typed shapes handed back to the application.
# JSON field names are camelCase (the frontend's contract); Python attributes are snake_case.

from __future__ import annotations
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Shape(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data):
        # null is treated like an absent field so list defaults apply
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


# ------------------------------------------------------------
# Inputs
# ------------------------------------------------------------
class UserProfile(Shape):
    name: str = ""
    academic_level: str = ""
    career_goals: str = ""
    interests: List[str] = Field(default_factory=list)
    current_skills: str = ""
    weekly_study_hours: int = 10


# ------------------------------------------------------------
# Semester plans
# ------------------------------------------------------------
class Resource(Shape):
    type: str = ""
    title: str
    link: str = "#"


class Course(Shape):
    title: str
    link: str = "#"
    description: Optional[str] = None
    learning_objectives: List[str] = Field(default_factory=list)
    prerequisites: List[str] = Field(default_factory=list)
    recommended_resources: List[Resource] = Field(default_factory=list)


class Certification(Shape):
    title: str
    platform: str = ""
    difficulty: str = ""
    link: Optional[str] = None


class RepoFile(Shape):
    name: str
    content: str = ""


class RepoStructure(Shape):
    folders: List[str] = Field(default_factory=list)
    files: List[RepoFile] = Field(default_factory=list)


class Project(Shape):
    id: str
    title: str
    description: str
    difficulty: str
    semester: int = Field(strict=True)
    steps: List[str] = Field(default_factory=list)
    repo_structure: Optional[RepoStructure] = None


class ResearchPaper(Shape):
    title: str
    link: str = "#"
    abstract: str = ""


class SemesterPlan(Shape):
    semester: int = Field(strict=True)
    courses: List[Course] = Field(default_factory=list)
    certifications: List[Certification] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    research_papers: List[ResearchPaper] = Field(default_factory=list)


# ------------------------------------------------------------
# Course page recommendations
# ------------------------------------------------------------
class ProjectIdea(Shape):
    title: str
    description: str = ""


class CourseRecommendations(Shape):
    study_plan: str
    certifications: List[Certification] = Field(default_factory=list)
    project_ideas: List[ProjectIdea] = Field(default_factory=list)


TypedResult = Union[List[SemesterPlan], Project, RepoStructure, List[str], str, CourseRecommendations]
