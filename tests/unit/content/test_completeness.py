"""Tests for profile completeness scoring."""

import pytest

LONG_SUMMARY = (
    "Backend engineer with a decade of experience building payment systems, "
    "mentoring teams and running production services at scale."
)


class TestScoreProfileCompleteness:
    """Test score_profile_completeness."""

    def test_complete_profile_scores_100(self):
        """Every section filled earns the full score and no suggestions."""
        from src.content.completeness import score_profile_completeness

        result = score_profile_completeness(
            user={
                "firstName": "Ada",
                "lastName": "Lovelace",
                "email": "ada@example.com",
                "location": {"city": "London"},
                "phoneNumber": "+44 20 0000 0000",
                "profileImage": "https://example.com/ada.png",
                "linkedInUrl": "https://linkedin.com/in/ada",
                "githubUrl": "https://github.com/ada",
                "portfolioUrl": "https://ada.dev",
                "isEmailVerified": True,
            },
            social={
                "headline": "Engineer building analytical engines",
                "summary": LONG_SUMMARY,
                "completenessScore": 80,
            },
            resume={"rawText": "x" * 250, "atsScore": 75},
        )

        assert result.score == 100
        assert result.grade == "Excellent"
        assert result.suggestions == ()
        assert result.breakdown["profile_content"].score == 25

    def test_partial_profile_gets_suggestions_in_order(self):
        """Missing pieces produce prioritised suggestions."""
        from src.content.completeness import score_profile_completeness

        result = score_profile_completeness(
            {
                "first_name": "Ada",
                "last_name": "Lovelace",
                "email": "ada@example.com",
                "location": {"city": "London"},
                "linkedin_url": "https://linkedin.com/in/ada",
            }
        )

        assert result.score == 33
        assert result.grade == "Needs Improvement"
        assert [(s.category, s.suggestion, s.priority) for s in result.suggestions] == [
            ("Contact", "Add your phone number", "medium"),
            ("Content", "Create a professional headline", "high"),
            ("Content", "Write a compelling profile summary", "high"),
            ("Content", "Upload your resume", "medium"),
        ]

    def test_name_needs_both_parts(self):
        """A first name alone earns no name points."""
        from src.content.completeness import score_profile_completeness

        result = score_profile_completeness({"firstName": "Ada"})

        assert result.score == 0
        assert result.breakdown["basic_info"].details["has_name"] is False
        assert len(result.suggestions) == 6
        assert result.suggestions[0].suggestion == "Add your location"

    def test_short_content_does_not_count(self):
        """Headlines, summaries and resumes must pass their minimum lengths."""
        from src.content.completeness import score_profile_completeness

        result = score_profile_completeness(
            {"firstName": "Ada"},
            social={"headline": "Engineer", "summary": "Short."},
            resume={"text": "Too short"},
        )

        assert result.breakdown["profile_content"].score == 0

    def test_missing_user_raises(self):
        """user=None is invalid input."""
        from src.content.completeness import score_profile_completeness
        from src.utils.errors import InvalidInputError

        with pytest.raises(InvalidInputError):
            score_profile_completeness(None)

    def test_to_dict(self):
        """to_dict includes breakdown and suggestions."""
        from src.content.completeness import score_profile_completeness

        payload = score_profile_completeness({"email": "a@b.c"}).to_dict()

        assert payload["score"] == 10
        assert payload["breakdown"]["basic_info"]["details"]["has_email"] is True
        assert payload["suggestions"][0]["priority"] == "high"
