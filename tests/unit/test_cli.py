from __future__ import annotations

import json
from pathlib import Path

import yaml


def _write_json(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def _output(capsys) -> object:
    return json.loads(capsys.readouterr().out)


def test_cli_without_command_prints_help(capsys) -> None:
    from src.__main__ import main

    assert main([]) == 0
    assert "career-engine" in capsys.readouterr().out


def test_cli_parser_supports_scoring_subcommands() -> None:
    from src.__main__ import create_parser

    parser = create_parser()

    assert parser.parse_args(["traits", "answers.yaml"]).command == "traits"

    match_args = parser.parse_args(["match", "in.json", "--kind", "job", "--top", "3"])
    assert match_args.kind == "job"
    assert match_args.top == 3

    gaps_args = parser.parse_args(["gaps", "in.json", "--sector", "Finance", "--shortages"])
    assert gaps_args.sector == "Finance"
    assert gaps_args.shortages is True

    content_args = parser.parse_args(["content", "resume.txt", "--job", "job.txt"])
    assert content_args.job == Path("job.txt")

    cluster_args = parser.parse_args(["cluster", "in.json"])
    assert cluster_args.kind == "role"
    assert cluster_args.window is None

    trend_args = parser.parse_args(["trend", "15", "10", "--total", "120"])
    assert (trend_args.recent, trend_args.previous, trend_args.total) == (15, 10, 120)

    forecast_args = parser.parse_args(["forecast", "Nurse", "--industry", "healthcare"])
    assert forecast_args.seed is None

    assert parser.parse_args(["assess", "in.yaml"]).top == 10
    assert parser.parse_args(["profile", "in.json"]).command == "profile"


def test_cli_traits_scores_yaml_document(tmp_path, capsys, analytical_responses) -> None:
    from src.__main__ import main

    document = tmp_path / "answers.yaml"
    document.write_text(yaml.safe_dump({"responses": analytical_responses}), encoding="utf-8")

    assert main(["traits", str(document)]) == 0

    output = _output(capsys)
    assert output["traits"]["analytical"] == 88
    assert output["archetype"]["label"] == "Analytical Thinker"


def test_cli_match_scores_requirements(tmp_path, capsys) -> None:
    from src.__main__ import main

    document = _write_json(
        tmp_path / "match.json",
        {
            "attributes": {"leadership": 80},
            "requirements": [{"name": "leadership", "minScore": 60}],
        },
    )

    assert main(["match", str(document)]) == 0

    output = _output(capsys)
    assert output["score"] == 80
    assert output["matched"][0]["status"] == "met"


def test_cli_match_ranks_jobs(tmp_path, capsys) -> None:
    from src.__main__ import main

    document = _write_json(
        tmp_path / "jobs.json",
        {
            "subject": ["Python", "SQL"],
            "holders": [
                {"id": "j2", "title": "Frontend", "requiredSkills": ["React"]},
                {"id": "j1", "title": "Backend", "requiredSkills": ["Python", "SQL"]},
            ],
        },
    )

    assert main(["match", str(document), "--kind", "job", "--top", "1"]) == 0

    output = _output(capsys)
    assert [result["candidate_id"] for result in output] == ["j1"]


def test_cli_gaps_with_shortages(tmp_path, capsys) -> None:
    from src.__main__ import main

    document = _write_json(
        tmp_path / "gaps.json",
        {
            "skills": ["python"],
            "postings": [
                {"requiredSkills": ["Python", "SQL"]},
                {"requiredSkills": ["Python"]},
            ],
        },
    )

    assert main(["gaps", str(document), "--shortages"]) == 0

    output = _output(capsys)
    assert [gap["name"] for gap in output["analysis"]["gaps"]] == ["SQL"]
    assert output["analysis"]["gaps"][0]["severity"] == "medium"
    assert output["analysis"]["strengths"][0]["frequency"] == 100
    assert output["shortages"][0]["name"] == "Python"
    assert output["shortages"][0]["shortage_score"] == 100


def test_cli_content_with_job_alignment(tmp_path, capsys) -> None:
    from src.__main__ import main

    resume = tmp_path / "resume.txt"
    resume.write_text("Skills: Python. Led team project.", encoding="utf-8")
    job = tmp_path / "job.txt"
    job.write_text("Python project", encoding="utf-8")

    assert main(["content", str(resume), "--job", str(job)]) == 0

    output = _output(capsys)
    assert output["content"]["max_score"] == 100
    assert output["alignment"]["alignment_score"] == 100


def test_cli_profile(tmp_path, capsys) -> None:
    from src.__main__ import main

    document = _write_json(tmp_path / "profile.json", {"user": {"email": "a@b.c"}})

    assert main(["profile", str(document)]) == 0

    assert _output(capsys)["score"] == 10


def test_cli_cluster_roles(tmp_path, capsys, sample_roles) -> None:
    from src.__main__ import main

    document = _write_json(
        tmp_path / "roles.json",
        {
            "subject": {"analytical": 88, "detail-oriented": 75, "creative": 25},
            "holders": sample_roles,
        },
    )

    assert main(["cluster", str(document)]) == 0

    output = _output(capsys)
    assert [cluster["label"] for cluster in output] == ["Technology", "Design"]


def test_cli_trend_with_momentum(capsys) -> None:
    from src.__main__ import main

    assert main(["trend", "15", "10", "--total", "120"]) == 0

    output = _output(capsys)
    assert output["trend"]["growth_rate"] == 50.0
    assert output["trend"]["direction"] == "accelerating"
    assert output["momentum"]["score"] == 98


def test_cli_forecast_uses_seed_from_settings(capsys, monkeypatch) -> None:
    from src.__main__ import main

    assert main(["forecast", "Data Scientist", "--industry", "technology"]) == 0
    assert _output(capsys)["simulated"] is False

    monkeypatch.setenv("FORECAST_SEED", "3")
    assert main(["forecast", "Data Scientist", "--industry", "technology"]) == 0
    assert _output(capsys)["simulated"] is True


def test_cli_assess_with_question_bank(tmp_path, capsys, sample_roles) -> None:
    from src.__main__ import main

    document = _write_json(
        tmp_path / "assessment.json",
        {
            "answers": [{"questionId": "q1", "answer": 5}, {"questionId": "q2", "answer": 1}],
            "questions": [
                {"id": "q1", "trait": "analytical"},
                {"id": "q2", "trait": "creative"},
            ],
            "roles": sample_roles,
        },
    )

    assert main(["assess", str(document), "--top", "2"]) == 0

    output = _output(capsys)
    assert output["archetype"]["label"] == "Analytical Thinker"
    assert len(output["matches"]) == 2


def test_cli_missing_input_errors_cleanly(tmp_path, capsys) -> None:
    from src.__main__ import main

    assert main(["traits", str(tmp_path / "missing.yaml")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_non_mapping_document_errors_cleanly(tmp_path, capsys) -> None:
    from src.__main__ import main

    document = _write_json(tmp_path / "list.json", [1, 2, 3])

    assert main(["profile", str(document)]) == 1
    assert "mapping" in capsys.readouterr().err


def test_cli_missing_required_collection_errors_cleanly(tmp_path, capsys) -> None:
    from src.__main__ import main

    document = _write_json(tmp_path / "empty.json", {})

    assert main(["match", str(document)]) == 1
    assert "'holders' is required" in capsys.readouterr().err
