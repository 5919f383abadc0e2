"""Tests for keyword extraction and resume-to-job alignment."""

JOB_DESCRIPTION = (
    "We need leadership and python. "
    "Required skills: proficient in Python and SQL. "
    "Preferred: Docker"
)


class TestExtraction:
    """Test the text scanning helpers."""

    def test_extract_keywords_skips_short_and_stop_words(self):
        """Keywords are distinct words of four or more letters, in order."""
        from src.content.alignment import extract_keywords

        keywords = extract_keywords("This team will build APIs with the team and ship them")

        assert keywords == ["team", "build", "apis", "ship"]

    def test_extract_keywords_limit(self):
        """Only the first `limit` keywords are returned."""
        from src.content.alignment import extract_keywords

        assert extract_keywords("alpha bravo charlie delta", limit=2) == ["alpha", "bravo"]
        assert extract_keywords(None) == []

    def test_extract_skill_phrases(self):
        """Phrases like "experienced in X and Y" yield X and Y."""
        from src.content.alignment import extract_skill_phrases

        skills = extract_skill_phrases(
            "Experienced in machine learning and data analysis. Knowledge of SQL, statistics"
        )

        assert skills == ["machine learning", "data analysis", "SQL"]

    def test_extract_skills_respects_word_boundaries(self):
        """Known technologies are found whole; "java" is not found inside "javascript"."""
        from src.content.alignment import extract_skills

        skills = extract_skills("Built REST APIs in Python and Node.js on AWS with Java")

        assert skills == ["python", "java", "node.js", "aws", "rest"]
        assert extract_skills("javascript only") == ["javascript"]


class TestAlignWithJob:
    """Test align_with_job."""

    def test_alignment_reports_keywords_skills_and_suggestions(self):
        """Coverage of job keywords drives the score; required skills are checked."""
        from src.content.alignment import align_with_job

        result = align_with_job("Python developer with leadership experience", JOB_DESCRIPTION)

        assert result.alignment_score == 25
        assert result.grade == "Needs Improvement"
        assert result.matched_keywords == ("leadership", "python")
        assert result.found_skills == ("Python",)
        assert result.missing_skills == ("SQL",)
        assert result.suggestions == (
            "Add these keywords: need, required, skills, proficient, preferred",
            "Highlight these skills: SQL",
            "Consider tailoring your resume to better match the job requirements",
        )

    def test_empty_job_description(self):
        """A job without keywords scores zero but does not fail."""
        from src.content.alignment import align_with_job

        result = align_with_job("Anything at all", "")

        assert result.alignment_score == 0
        assert result.matched_keywords == ()
        assert result.suggestions == (
            "Consider tailoring your resume to better match the job requirements",
        )

    def test_full_coverage(self):
        """A resume repeating the job text is an excellent match."""
        from src.content.alignment import align_with_job

        result = align_with_job(JOB_DESCRIPTION, JOB_DESCRIPTION)

        assert result.alignment_score == 100
        assert result.grade == "Excellent Match"
        assert result.to_dict()["missing_keywords"] == []
