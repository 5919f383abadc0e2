"""Tests for name matching utilities."""


class TestNormalizeName:
    """Test normalize_name."""

    def test_normalize_name_lowercases_and_strips(self):
        """normalize_name should lowercase and strip surrounding whitespace."""
        from src.matching.matchers import normalize_name

        assert normalize_name("  Python  ") == "python"
        assert normalize_name("Detail   Oriented") == "detail oriented"

    def test_normalize_name_preserves_special_characters(self):
        """normalize_name should preserve common special characters."""
        from src.matching.matchers import normalize_name

        assert normalize_name("C++") == "c++"
        assert normalize_name("Node.js") == "node.js"
        assert normalize_name("detail-oriented") == "detail-oriented"

    def test_normalize_name_drops_parenthesised_qualifiers(self):
        """Qualifiers in parentheses are not part of the name."""
        from src.matching.matchers import normalize_name

        assert normalize_name("Python (advanced)") == "python"


class TestSkillsMatchExact:
    """Test skills_match in exact mode."""

    def test_skills_match_exact_is_case_insensitive(self):
        """Exact match should be case-insensitive."""
        from src.matching.matchers import skills_match

        assert skills_match("Python", "python", fuzzy=False) is True

    def test_skills_match_exact_common_variations(self):
        """Exact match should resolve common aliases."""
        from src.matching.matchers import skills_match

        assert skills_match("JavaScript", "JS", fuzzy=False) is True
        assert skills_match("Python", "Python3", fuzzy=False) is True
        assert skills_match("k8s", "Kubernetes", fuzzy=False) is True
        assert skills_match("postgres", "PostgreSQL", fuzzy=False) is True

    def test_skills_match_exact_no_match_returns_false(self):
        """Exact match should return False when skills don't match."""
        from src.matching.matchers import skills_match

        assert skills_match("python", "java", fuzzy=False) is False

    def test_skills_match_empty_name_never_matches(self):
        """Blank names never match anything."""
        from src.matching.matchers import skills_match

        assert skills_match("", "", fuzzy=True) is False
        assert skills_match("  ", "python", fuzzy=True) is False


class TestSkillsMatchFuzzy:
    """Test skills_match in fuzzy mode."""

    def test_skills_match_fuzzy_matches_similar_skills_above_threshold(self):
        """Fuzzy matching should match similar strings above the threshold."""
        from src.matching.matchers import skills_match

        assert skills_match("kubernetes", "kubernetis", fuzzy=True, threshold=0.85) is True
        assert skills_match("kubernetes", "kubernetis", fuzzy=False) is False

    def test_skills_match_fuzzy_does_not_match_dissimilar_skills(self):
        """Fuzzy matching should not match dissimilar strings."""
        from src.matching.matchers import skills_match

        assert skills_match("python", "java", fuzzy=True, threshold=0.85) is False

    def test_skills_match_fuzzy_threshold_configuration(self):
        """Fuzzy matching should respect the configured threshold."""
        from src.matching.matchers import skills_match

        assert skills_match("kubernetes", "kubernetis", fuzzy=True, threshold=0.95) is False


class TestSkillLevels:
    """Test best_level and expand_skills."""

    def test_best_level_picks_highest_matching_level(self):
        """best_level should return the highest level among matching names."""
        from src.matching.matchers import best_level

        levels = {"javascript": 60.0, "js": 85.0, "python": 90.0}

        assert best_level("JavaScript", levels, fuzzy=False) == 85.0
        assert best_level("Rust", levels, fuzzy=False) is None

    def test_expand_skills_adds_implied_fundamentals(self):
        """A framework implies the language it is built on."""
        from src.matching.matchers import expand_skills

        assert expand_skills(["React"]) == ["javascript", "react"]
        assert expand_skills(["Django", "k8s"]) == ["django", "docker", "kubernetes", "python"]
        assert expand_skills(["", "  "]) == []
