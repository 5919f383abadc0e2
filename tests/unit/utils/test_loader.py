"""Tests for input document loading."""

import pytest


class TestLoadDocument:
    """Test load_document."""

    def test_load_yaml_document(self, tmp_path):
        """YAML files should load by extension."""
        from src.utils.loader import load_document

        path = tmp_path / "input.yaml"
        path.write_text("skills:\n  - Python\n  - SQL\n", encoding="utf-8")

        assert load_document(path) == {"skills": ["Python", "SQL"]}

    def test_load_json_document(self, tmp_path):
        """JSON files should load by extension, including top-level lists."""
        from src.utils.loader import load_document

        path = tmp_path / "input.json"
        path.write_text('[{"name": "x"}]', encoding="utf-8")

        assert load_document(path) == [{"name": "x"}]

    def test_empty_yaml_loads_as_empty_dict(self, tmp_path):
        """An empty YAML document should load as an empty mapping."""
        from src.utils.loader import load_document

        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")

        assert load_document(path) == {}

    def test_unknown_extension_is_auto_detected(self, tmp_path):
        """Unknown extensions are parsed as JSON or YAML by content."""
        from src.utils.loader import load_document

        json_path = tmp_path / "input.txt"
        json_path.write_text('{"a": 1}', encoding="utf-8")
        yaml_path = tmp_path / "input.data"
        yaml_path.write_text("a: 2\n", encoding="utf-8")

        assert load_document(json_path) == {"a": 1}
        assert load_document(yaml_path) == {"a": 2}

    def test_invalid_json_raises_value_error(self, tmp_path):
        """Malformed JSON should raise ValueError."""
        from src.utils.loader import load_document

        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            load_document(path)

    def test_missing_file_raises(self, tmp_path):
        """Missing files should raise FileNotFoundError."""
        from src.utils.loader import load_document, load_text

        with pytest.raises(FileNotFoundError):
            load_document(tmp_path / "missing.yaml")
        with pytest.raises(FileNotFoundError):
            load_text(tmp_path / "missing.txt")
