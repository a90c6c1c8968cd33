# Prompt templates, one per PromptKind.
# Structured prompts spell out the exact JSON shape and embed a worked example;
# prose prompts ask for plain text with no markdown.

from __future__ import annotations
import json
from string import Template
from typing import Any, Dict, Mapping

from src.log import get_logger
from .types import GenerationRequest, PromptKind

logger = get_logger(__name__)

JSON_ONLY = (
    "Respond with ONLY valid JSON matching the shape below. "
    "Do not include any other text, comments or explanations."
)

PLAIN_TEXT_ONLY = (
    "Respond in plain text only. Do not use markdown, headings, bullet points, "
    "code blocks or any other formatting."
)

# ------------------------------------------------------------
# Worked examples embedded in the prompts
# ------------------------------------------------------------
SEMESTER_PLAN_EXAMPLE: Dict[str, Any] = {
    "semester": 1,
    "courses": [
        {"title": "Introduction to Computer Science", "link": "#"},
        {"title": "Calculus I", "link": "#"},
    ],
    "certifications": [
        {"title": "Python for Everybody", "platform": "Coursera", "difficulty": "Beginner"},
    ],
    "projects": [
        {
            "id": "project-1-1",
            "title": "Personal Portfolio Website",
            "description": "Create a personal portfolio website to showcase your skills and projects.",
            "difficulty": "Easy",
            "semester": 1,
            "steps": [
                "Plan the layout",
                "Write the HTML and CSS",
                "Add JavaScript for interactivity",
                "Deploy the website",
            ],
        }
    ],
    "researchPapers": [],
}

PROJECT_DETAILS_EXAMPLE: Dict[str, Any] = {
    "id": "project-2-1",
    "title": "Weather Dashboard",
    "description": "Build a dashboard that shows a five-day forecast from a public weather API.",
    "difficulty": "Medium",
    "semester": 2,
    "steps": [
        "Pick a weather API and get a key",
        "Fetch and parse forecast data",
        "Render the forecast as cards and charts",
        "Add city search and error states",
    ],
}

REPO_STRUCTURE_EXAMPLE: Dict[str, Any] = {
    "folders": ["src", "src/components", "tests"],
    "files": [
        {"name": "README.md", "content": "# Weather Dashboard\n\nShows a five-day forecast."},
        {"name": "src/main.py", "content": "def main():\n    print('hello')\n"},
    ],
}

NOTE_SUGGESTIONS_EXAMPLE = [
    "Add a concrete example for the definition of recursion.",
    "Link this topic to last week's notes on stacks.",
    "Write two practice questions to test yourself.",
]

COURSE_RECOMMENDATIONS_EXAMPLE: Dict[str, Any] = {
    "studyPlan": "Week 1: Review the syllabus and core definitions. Week 2: Work through the first problem set.",
    "certifications": [
        {"title": "Machine Learning Specialization", "platform": "Coursera", "difficulty": "Intermediate", "link": "#"},
    ],
    "projectIdeas": [
        {"title": "Spam Classifier", "description": "Train a naive Bayes model on a public email dataset."},
    ],
}

EXAMPLES: Dict[PromptKind, Any] = {
    PromptKind.SEMESTER_PLAN: SEMESTER_PLAN_EXAMPLE,
    PromptKind.PROJECT_DETAILS: PROJECT_DETAILS_EXAMPLE,
    PromptKind.REPO_STRUCTURE: REPO_STRUCTURE_EXAMPLE,
    PromptKind.NOTE_SUGGESTIONS: NOTE_SUGGESTIONS_EXAMPLE,
    PromptKind.COURSE_RECOMMENDATIONS: COURSE_RECOMMENDATIONS_EXAMPLE,
}


def example_json(kind: PromptKind) -> str:
    """Example payload for a structured kind, exactly as it appears in the prompt."""
    return json.dumps(EXAMPLES[kind], indent=2)


# ------------------------------------------------------------
# Templates ($name placeholders; JSON braces need no escaping)
# ------------------------------------------------------------
TEMPLATES: Dict[PromptKind, Template] = {
    PromptKind.SEMESTER_PLAN: Template("""\
Generate a semester plan for a $academic_level student interested in $interests.
Career goals: $career_goals
Available study time: $weekly_study_hours hours per week.

The output MUST be a valid JSON array of objects. $json_only
Each object in the array represents a semester and must have the following properties:
- "semester": number
- "courses": array of objects with "title" (string) and "link" (string, use "#" as a placeholder)
- "certifications": array of objects with "title" (string), "platform" (string), and "difficulty" (string)
- "projects": array of objects with "id" (string), "title" (string), "description" (string), "difficulty" (string), "semester" (number), and "steps" (array of strings)
- "researchPapers": array of objects with "title" (string), "link" (string, use "#" as a placeholder), and "abstract" (string)

Example of a single semester object:
$example
"""),
    PromptKind.PROJECT_DETAILS: Template("""\
Generate detailed project information for the project with ID $project_id.
Project title: $project_title

The output MUST be a single JSON object. $json_only
The object must have the following properties:
- "id": string (use "$project_id")
- "title": string
- "description": string
- "difficulty": string, one of "Easy", "Medium", "Hard"
- "semester": number
- "steps": array of strings, in the order they should be done

Example:
$example
"""),
    PromptKind.REPO_STRUCTURE: Template("""\
Generate a GitHub repository structure for the project with ID $project_id.
Project title: $project_title

The output MUST be a single JSON object. $json_only
The object must have the following properties:
- "folders": array of strings, each a folder path relative to the repository root
- "files": array of objects with "name" (string, path relative to the repository root) and "content" (string, starter file content)

Example:
$example
"""),
    PromptKind.NOTE_SUGGESTIONS: Template("""\
Suggest improvements and follow-up study actions for the following notes:

$notes_text

The output MUST be a JSON array of strings, one suggestion per string. $json_only

Example:
$example
"""),
    PromptKind.NOTE_SUMMARY: Template("""\
Summarize the following notes in a short paragraph for a student reviewing them later:

$notes_text

$plain_text_only
"""),
    PromptKind.PROGRESS_NUDGE: Template("""\
Write a short motivational nudge (two or three sentences) for a $academic_level student.
Their goals: $career_goals
Progress this week: $completed_goals of $total_goals goals completed.

$plain_text_only
"""),
    PromptKind.COURSE_RECOMMENDATIONS: Template("""\
Create study recommendations for the course "$course_title".
Course description: $course_description

The output MUST be a single JSON object. $json_only
The object must have the following properties:
- "studyPlan": string, a week-by-week plan where every week starts with "Week N:"
- "certifications": array of objects with "title" (string), "platform" (string), "difficulty" (string) and "link" (string, use "#" as a placeholder)
- "projectIdeas": array of objects with "title" (string) and "description" (string)

Example:
$example
"""),
}


class _Params(dict):
    """Template mapping: lists are comma-joined, missing names become empty text."""

    def __init__(self, kind: PromptKind, values: Mapping[str, Any]):
        super().__init__(values)
        self.kind = kind

    def __getitem__(self, key: str) -> str:
        return _render_value(super().__getitem__(key))

    def __missing__(self, key: str) -> str:
        logger.warning("prompt %s: no value for '%s', interpolating empty text", self.kind.value, key)
        return ""


def _render_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple, set)):
        return ", ".join(str(v) for v in value)
    return str(value)


def build_prompt(request: GenerationRequest) -> str:
    kind = request.prompt_kind
    values: Dict[str, Any] = dict(request.parameters)
    values["json_only"] = JSON_ONLY
    values["plain_text_only"] = PLAIN_TEXT_ONLY
    if kind in EXAMPLES:
        values["example"] = example_json(kind)
    return TEMPLATES[kind].substitute(_Params(kind, values))
