"""Main entry point for Career Engine."""

import argparse
import json
import sys
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from src import __version__
from src.config.settings import Settings
from src.utils.errors import InvalidInputError
from src.utils.loader import load_document, load_text
from src.utils.logging import configure_logging

MATCH_KINDS = ("role", "mentor", "job")


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("value must not be negative")
    return number


def _mapping(document: object, path: Path) -> Mapping:
    if not isinstance(document, Mapping):
        raise ValueError(f"Input must be a mapping/dict: {path}")
    return document


def _print_json(payload: object, indent: int) -> None:
    def _default(value: object):
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return to_dict()
        model_dump = getattr(value, "model_dump", None)
        if callable(model_dump):
            return model_dump(mode="json")
        return str(value)

    print(json.dumps(payload, indent=indent or None, default=_default))


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="career-engine",
        description="Career Engine: weighted scoring and matching for career guidance",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src traits answers.yaml
  python -m src match --kind job candidate_and_jobs.json --top 5
  python -m src content resume.txt --job job.txt
  python -m src trend 15 10 --total 120
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available scoring commands",
    )

    traits_parser = subparsers.add_parser(
        "traits",
        help="Score personality traits and classify the archetype",
    )
    traits_parser.add_argument(
        "input",
        type=Path,
        help="Document with `responses`, or `answers` plus `questions`",
    )

    match_parser = subparsers.add_parser(
        "match",
        help="Match attributes against requirements, or rank holders",
    )
    match_parser.add_argument(
        "input",
        type=Path,
        help=(
            "Document with `attributes` and `requirements`, or (with --kind) "
            "`subject` and `holders`"
        ),
    )
    match_parser.add_argument(
        "--kind",
        choices=MATCH_KINDS,
        default=None,
        help="Requirement vocabulary of the holders being ranked",
    )
    match_parser.add_argument(
        "--top",
        type=_non_negative_int,
        default=None,
        help="Keep only the first N ranked results",
    )

    gaps_parser = subparsers.add_parser(
        "gaps",
        help="Analyze skill gaps against a population of postings",
    )
    gaps_parser.add_argument(
        "input",
        type=Path,
        help="Document with `skills` and either `postings` or `frequencies` (+ `total`)",
    )
    gaps_parser.add_argument("--sector", default=None, help="Sector name for the report text")
    gaps_parser.add_argument(
        "--shortages",
        action="store_true",
        help="Also report local skill shortages for the same postings",
    )

    content_parser = subparsers.add_parser(
        "content",
        help="Score resume text (ATS-style) and optionally align it to a job",
    )
    content_parser.add_argument("resume", type=Path, help="Plain-text resume")
    content_parser.add_argument(
        "--job",
        type=Path,
        default=None,
        help="Plain-text job description to align against",
    )

    profile_parser = subparsers.add_parser(
        "profile",
        help="Score profile completeness",
    )
    profile_parser.add_argument(
        "input",
        type=Path,
        help="Document with `user` and optional `social` and `resume`",
    )

    cluster_parser = subparsers.add_parser(
        "cluster",
        help="Rank holders and group the results into clusters",
    )
    cluster_parser.add_argument(
        "input",
        type=Path,
        help="Document with `subject` and `holders`",
    )
    cluster_parser.add_argument(
        "--kind",
        choices=MATCH_KINDS,
        default="role",
        help="Requirement vocabulary of the holders (default: role)",
    )
    cluster_parser.add_argument(
        "--window",
        type=float,
        default=None,
        help="Score proximity window (overrides settings)",
    )

    trend_parser = subparsers.add_parser(
        "trend",
        help="Compare two window counts, optionally with momentum",
    )
    trend_parser.add_argument("recent", type=int, help="Count in the recent window")
    trend_parser.add_argument("previous", type=int, help="Count in the previous window")
    trend_parser.add_argument(
        "--total",
        type=_non_negative_int,
        default=None,
        help="Total postings; adds a momentum score",
    )

    forecast_parser = subparsers.add_parser(
        "forecast",
        help="Project five years of demand for a role",
    )
    forecast_parser.add_argument("title", help="Job title")
    forecast_parser.add_argument("--industry", default="", help="Industry name")
    forecast_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for simulated variance (overrides settings)",
    )

    assess_parser = subparsers.add_parser(
        "assess",
        help="Run the full assessment pipeline",
    )
    assess_parser.add_argument(
        "input",
        type=Path,
        help="Document with `roles` and `responses` (or `answers` plus `questions`)",
    )
    assess_parser.add_argument(
        "--top",
        type=_non_negative_int,
        default=10,
        help="Number of ranked roles to keep (default: 10)",
    )

    return parser


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    # Load settings
    try:
        settings = Settings()
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Configure logging
    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    # If no command specified, show help
    if parsed.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Career Engine v{__version__} running {parsed.command}")

    try:
        payload = _run_command(parsed, settings)
    except (InvalidInputError, ValidationError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _print_json(payload, settings.output_indent)
    return 0


def _run_command(parsed: argparse.Namespace, settings: Settings) -> object:
    if parsed.command == "traits":
        from src.traits.service import TraitScorer
        from src.traits.vocabulary import DEFAULT_ARCHETYPES

        document = _mapping(load_document(parsed.input), parsed.input)
        scorer = TraitScorer()
        if "questions" in document:
            responses = scorer.resolve_responses(document.get("answers"), document["questions"])
        else:
            responses = document.get("responses")
        scores = scorer.score_traits(responses)
        archetypes = document.get("archetypes") or DEFAULT_ARCHETYPES
        return {"traits": scores, "archetype": scorer.classify_archetype(scores, archetypes)}

    if parsed.command == "match":
        from src.matching.service import WeightedMatcher, top_k

        document = _mapping(load_document(parsed.input), parsed.input)
        matcher = WeightedMatcher()
        if parsed.kind is None and "requirements" in document:
            return matcher.match(document.get("attributes"), document["requirements"])
        ranked = matcher.rank(document.get("subject"), document.get("holders"), parsed.kind)
        return ranked if parsed.top is None else top_k(ranked, parsed.top)

    if parsed.command == "gaps":
        from src.insights.gaps import GapAnalyzer

        document = _mapping(load_document(parsed.input), parsed.input)
        analyzer = GapAnalyzer()
        if "postings" in document:
            table = analyzer.frequency_table(document["postings"])
        else:
            table = document.get("frequencies")
        analysis = analyzer.analyze_gaps(
            document.get("skills"), table, document.get("total"), sector=parsed.sector
        )
        if not parsed.shortages:
            return analysis
        return {
            "analysis": analysis,
            "shortages": analyzer.detect_shortages(table, document.get("supply")),
        }

    if parsed.command == "content":
        from src.content.alignment import align_with_job
        from src.content.ats import ContentQualityScorer

        resume = load_text(parsed.resume)
        score = ContentQualityScorer().score_content(resume)
        if parsed.job is None:
            return score
        return {"content": score, "alignment": align_with_job(resume, load_text(parsed.job))}

    if parsed.command == "profile":
        from src.content.completeness import score_profile_completeness

        document = _mapping(load_document(parsed.input), parsed.input)
        return score_profile_completeness(
            document.get("user"), document.get("social"), document.get("resume")
        )

    if parsed.command == "cluster":
        from src.matching.clustering import SimilarityClusterer
        from src.matching.service import WeightedMatcher

        document = _mapping(load_document(parsed.input), parsed.input)
        ranked = WeightedMatcher().rank(
            document.get("subject"), document.get("holders"), parsed.kind
        )
        return SimilarityClusterer().cluster(ranked, score_window=parsed.window)

    if parsed.command == "trend":
        from src.insights.trends import TrendScorer

        scorer = TrendScorer()
        trend = scorer.trend(parsed.recent, parsed.previous)
        if parsed.total is None:
            return trend
        return {
            "trend": trend,
            "momentum": scorer.momentum(parsed.total, parsed.recent, parsed.previous),
        }

    if parsed.command == "forecast":
        from src.insights.forecast import forecast_demand

        seed = parsed.seed if parsed.seed is not None else settings.forecast_seed
        return forecast_demand(parsed.title, parsed.industry, seed)

    if parsed.command == "assess":
        from src.assessment.service import AssessmentService

        document = _mapping(load_document(parsed.input), parsed.input)
        answers = document.get("answers", document.get("responses"))
        return AssessmentService().run(
            answers,
            document.get("roles"),
            questions=document.get("questions"),
            top_n=parsed.top,
        )

    raise ValueError(f"Unknown command: {parsed.command}")


if __name__ == "__main__":
    sys.exit(main())
