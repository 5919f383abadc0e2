"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keep config singletons and logging from leaking between tests.

    Tests run from an empty directory so a developer's .env is never read.
    """
    from src.config.settings import reset_settings
    from src.insights.config import reset_insights_config
    from src.matching.config import reset_matching_config
    from src.utils.logging import reset_logging

    monkeypatch.chdir(tmp_path)
    reset_settings()
    reset_matching_config()
    reset_insights_config()
    reset_logging()
    yield
    reset_settings()
    reset_matching_config()
    reset_insights_config()
    reset_logging()


@pytest.fixture
def sample_roles() -> list[dict]:
    """Career roles with required traits, in the stored document shape."""
    return [
        {
            "_id": "r1",
            "title": "Data Scientist",
            "cluster": "Technology",
            "growthProjection": 22,
            "requiredTraits": [
                {"trait": "analytical", "minScore": 70, "weight": 2, "importance": "essential"},
                {"trait": "detail-oriented", "minScore": 60, "weight": 1},
            ],
        },
        {
            "_id": "r2",
            "title": "Product Designer",
            "cluster": "Design",
            "growthProjection": 8,
            "requiredTraits": [
                {"trait": "creative", "minScore": 75, "weight": 2, "importance": "essential"},
                {"trait": "communicative", "minScore": 60, "weight": 1},
            ],
        },
        {
            "_id": "r3",
            "title": "Engineering Manager",
            "cluster": "Technology",
            "requiredTraits": [
                {"trait": "leadership", "minScore": 70, "weight": 2, "importance": "essential"},
                {"trait": "communicative", "minScore": 65, "weight": 1},
                {"trait": "analytical", "minScore": 50, "weight": 1, "importance": "preferred"},
            ],
        },
    ]


@pytest.fixture
def analytical_responses() -> list[dict]:
    """Survey responses of a strongly analytical, not very creative person."""
    return [
        {"trait": "analytical", "answer": 5},
        {"trait": "analytical", "answer": 4},
        {"trait": "detail-oriented", "answer": 4},
        {"trait": "creative", "answer": 2},
        {"trait": "leadership", "answer": 3},
        {"trait": "communicative", "answer": 3},
    ]
