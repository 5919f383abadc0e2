"""Tests for requirement vocabulary adapters."""

import pytest


class TestGetAdapter:
    """Test adapter lookup."""

    @pytest.mark.parametrize("kind", ["role", "mentor", "job"])
    def test_get_adapter_returns_adapter_for_kind(self, kind):
        """Every registered kind resolves to an adapter tagged with it."""
        from src.matching.adapters import get_adapter

        assert get_adapter(kind).kind == kind

    def test_get_adapter_unknown_kind_raises(self):
        """Unknown kinds raise ValueError."""
        from src.matching.adapters import get_adapter

        with pytest.raises(ValueError):
            get_adapter("horoscope")


class TestRoleAdapter:
    """Test RoleAdapter."""

    def test_role_fields_map_onto_requirement_set(self, sample_roles):
        """Role id, cluster and growth projection are carried over."""
        from src.matching.adapters import RoleAdapter

        attributes, requirement_set = RoleAdapter().adapt({"Analytical": 80}, sample_roles[0])

        assert attributes == {"analytical": 80.0}
        assert requirement_set.id == "r1"
        assert requirement_set.title == "Data Scientist"
        assert requirement_set.category == "Technology"
        assert requirement_set.growth_projection == 22.0
        assert [r.name for r in requirement_set.requirements] == [
            "analytical",
            "detail-oriented",
        ]


class TestMentorAdapter:
    """Test MentorAdapter compatibility factors."""

    def test_related_industry_scores_partial_alignment(self):
        """Different industries still score the related-industry level."""
        from src.matching.adapters import MentorAdapter

        attributes, _ = MentorAdapter().adapt(
            {"skills": ["Python"], "industry": "Finance"},
            {"expertise": ["Go"], "industry": "Technology"},
        )

        assert attributes["industry_alignment"] == 40.0
        assert attributes["expertise_overlap"] == 0.0

    def test_experience_proximity_bands(self):
        """Experience within 2 years is full, within 5 is half, else none."""
        from src.matching.adapters import MentorAdapter

        adapter = MentorAdapter()
        mentee = {"years_of_experience": 5}

        close, _ = adapter.adapt(mentee, {"years_of_experience": 7})
        near, _ = adapter.adapt(mentee, {"years_of_experience": 10})
        far, _ = adapter.adapt(mentee, {"years_of_experience": 11})

        assert close["experience_proximity"] == 100.0
        assert near["experience_proximity"] == 50.0
        assert far["experience_proximity"] == 0.0

    def test_unmeasurable_factors_are_left_out(self):
        """Factors without data on either side fall back to the neutral score."""
        from src.matching.adapters import MentorAdapter

        attributes, requirement_set = MentorAdapter().adapt({}, {"name": "Alex"})

        assert attributes == {}
        assert [r.weight for r in requirement_set.requirements] == [40, 25, 20, 10, 5]

    def test_malformed_optional_numbers_are_ignored(self):
        """Bad rating or experience values do not raise."""
        from src.matching.adapters import MentorAdapter

        attributes, _ = MentorAdapter().adapt(
            {"years_of_experience": "lots"},
            {"rating": "n/a", "years_of_experience": -4},
        )

        assert "mentor_rating" not in attributes
        assert "experience_proximity" not in attributes


class TestJobSkillAdapter:
    """Test JobSkillAdapter."""

    def test_listed_skills_and_implications_count_as_present(self):
        """A plain skill list implies full proficiency, including implied skills."""
        from src.matching.adapters import JobSkillAdapter

        attributes, requirement_set = JobSkillAdapter().adapt(
            ["React"],
            {"title": "Frontend", "required_skills": ["JavaScript"], "preferred_skills": ["Vue"]},
        )

        assert attributes == {"javascript": 100.0, "vue": 0.0}
        required, preferred = requirement_set.requirements
        assert (required.min_score, required.weight, required.importance.value) == (
            70.0,
            2.0,
            "essential",
        )
        assert (preferred.min_score, preferred.weight, preferred.importance.value) == (
            50.0,
            1.0,
            "preferred",
        )

    def test_leveled_skills_use_best_match(self):
        """With levels, the best alias match supplies the candidate level."""
        from src.matching.adapters import JobSkillAdapter

        attributes, _ = JobSkillAdapter().adapt(
            {"JS": 65, "Python": 90},
            {"required_skills": ["JavaScript", "Python", "python"]},
        )

        assert attributes == {"javascript": 65.0, "python": 90.0}

    def test_null_skill_lists_are_treated_as_empty(self):
        """A posting without skills yields no requirements."""
        from src.matching.adapters import JobSkillAdapter

        attributes, requirement_set = JobSkillAdapter().adapt(
            ["Python"], {"title": "Anything", "requiredSkills": None}
        )

        assert attributes == {}
        assert requirement_set.requirements == []
