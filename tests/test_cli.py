# ===============================================
# tests/test_cli.py
# planner-ai command line: argument wiring and exit codes
# ===============================================
import json

from src.cli import build_parser, main
from src.generate import GatewayError, GatewayErrorKind, PlannerGenerator
from conftest import FakeGateway


def _run(capsys, argv, gateway):
    code = main(argv, gen=PlannerGenerator(gateway))
    out, err = capsys.readouterr()
    return code, out, err


def test_course_command_prints_camel_case_json(capsys):
    gw = FakeGateway('{"studyPlan": "Week 1: vectors", "projectIdeas": [{"title": "Image compression"}]}')
    code, out, _ = _run(capsys, ["course", "--title", "Linear Algebra"], gw)
    assert code == 0
    body = json.loads(out)
    assert body["studyPlan"] == "Week 1: vectors"
    assert body["projectIdeas"][0]["title"] == "Image compression"
    assert "Linear Algebra" in gw.prompts[0]


def test_semester_plan_command_uses_profile_flags(capsys):
    gw = FakeGateway('[{"semester": 1, "courses": [{"title": "Intro to AI"}]}]')
    code, out, _ = _run(capsys, ["semester-plan", "--level", "postgrad", "--interests", "AI, Robotics", "--hours", "12"], gw)
    assert code == 0
    assert json.loads(out)[0]["courses"][0]["link"] == "#"
    assert "postgrad" in gw.prompts[0]
    assert "AI, Robotics" in gw.prompts[0]


def test_summarize_reads_notes_file(tmp_path, capsys):
    notes = tmp_path / "notes.txt"
    notes.write_text("Eigenvalues are scalars.", encoding="utf-8")
    gw = FakeGateway("Eigenvalues scale eigenvectors.")
    code, out, _ = _run(capsys, ["summarize", "--notes-file", str(notes)], gw)
    assert code == 0
    assert json.loads(out) == "Eigenvalues scale eigenvectors."
    assert "Eigenvalues are scalars." in gw.prompts[0]


def test_generation_error_exits_1(capsys):
    gw = FakeGateway(error=GatewayError(GatewayErrorKind.UNAUTHORIZED, "relay answered HTTP 401", 401))
    code, out, err = _run(capsys, ["nudge", "--completed", "2", "--total", "5"], gw)
    assert code == 1
    assert out == ""
    assert "generation failed" in err


def test_unparseable_response_exits_1(capsys):
    code, _, err = _run(capsys, ["project", "--id", "p1"], FakeGateway("no json here at all"))
    assert code == 1
    assert err


def test_parser_global_flags():
    args = build_parser().parse_args(["--api-base", "http://relay:9000", "--token", "t", "repo", "--id", "p7"])
    assert args.api_base == "http://relay:9000"
    assert args.token == "t"
    assert args.command == "repo"
    assert args.id == "p7"
