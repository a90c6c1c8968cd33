# cli.py
# ============================================================
# Run one generation against a relay from the shell and print the
# typed result as JSON.
#
#   python -m src.cli semester-plan --level undergrad --interests "AI,Robotics"
#   python -m src.cli course --title "Linear Algebra" --description "Vectors and matrices"
#   python -m src.cli summarize --notes-file notes.txt
#
# Exit code 1 on any generation error (message on stderr).
# ============================================================

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence

from src.settings import settings
from src.generate import GenerationError, PlannerGenerator, UserProfile, build_generator


def _split_csv(raw: str) -> List[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _notes_text(args: argparse.Namespace) -> str:
    if args.notes_file:
        return Path(args.notes_file).read_text(encoding="utf-8")
    return args.notes or ""


def _profile(args: argparse.Namespace) -> UserProfile:
    return UserProfile(
        name=args.name,
        academic_level=args.level,
        career_goals=args.goals,
        interests=_split_csv(args.interests),
        weekly_study_hours=args.hours,
    )


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, list):
        return [_to_jsonable(r) for r in result]
    if hasattr(result, "to_json_dict"):
        return result.to_json_dict()
    return result


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="planner-ai", description="Generate academic planning content through the AI relay.")
    ap.add_argument("--api-base", default=settings.AI_API_BASE_URL, help="Relay base URL (default: AI_API_BASE_URL)")
    ap.add_argument("--token", default=settings.AI_API_TOKEN, help="Bearer token for the relay")
    ap.add_argument("--timeout", type=float, default=settings.AI_API_TIMEOUT)
    sub = ap.add_subparsers(dest="command", required=True)

    def profile_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--name", default="")
        p.add_argument("--level", default="undergrad", help="high-school | undergrad | postgrad")
        p.add_argument("--interests", default="", help="Comma-separated interests")
        p.add_argument("--goals", default="", help="Career goals")
        p.add_argument("--hours", type=int, default=10, help="Weekly study hours")

    def notes_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--notes", default="", help="Note text")
        p.add_argument("--notes-file", default=None, help="Read note text from a file")

    profile_args(sub.add_parser("semester-plan", help="Semester-by-semester plan"))

    p = sub.add_parser("project", help="Project details")
    p.add_argument("--id", required=True)
    p.add_argument("--title", default="")

    p = sub.add_parser("repo", help="Repository structure for a project")
    p.add_argument("--id", required=True)
    p.add_argument("--title", default="")

    notes_args(sub.add_parser("suggest", help="Suggestions for notes"))
    notes_args(sub.add_parser("summarize", help="Summary of notes"))

    p = sub.add_parser("nudge", help="Motivational progress nudge")
    profile_args(p)
    p.add_argument("--completed", type=int, default=0)
    p.add_argument("--total", type=int, default=0)

    p = sub.add_parser("course", help="Study recommendations for a course")
    p.add_argument("--title", required=True)
    p.add_argument("--description", default="")
    return ap


def run(args: argparse.Namespace, gen: PlannerGenerator) -> Any:
    cmd = args.command
    if cmd == "semester-plan":
        return gen.semester_plan(_profile(args))
    if cmd == "project":
        return gen.project_details(args.id, args.title)
    if cmd == "repo":
        return gen.repo_structure(args.id, args.title)
    if cmd == "suggest":
        return gen.note_suggestions(_notes_text(args))
    if cmd == "summarize":
        return gen.note_summary(_notes_text(args))
    if cmd == "nudge":
        return gen.progress_nudge(_profile(args), completed_goals=args.completed, total_goals=args.total)
    if cmd == "course":
        return gen.course_recommendations(args.title, args.description)
    raise ValueError(f"unknown command: {cmd}")


def main(argv: Optional[Sequence[str]] = None, gen: Optional[PlannerGenerator] = None) -> int:
    args = build_parser().parse_args(argv)
    if gen is None:
        cfg = settings.model_copy(update={
            "AI_API_BASE_URL": args.api_base,
            "AI_API_TOKEN": args.token,
            "AI_API_TIMEOUT": args.timeout,
        })
        gen = build_generator(cfg)

    try:
        result = run(args, gen)
    except GenerationError as e:
        print(f"generation failed: {e}", file=sys.stderr)
        return 1

    print(json.dumps(_to_jsonable(result), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
