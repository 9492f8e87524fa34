"""
Test cases for configuration loading and validation
"""
import pytest

from mentormatch.configs import load_config, validate_config, default_config, get_config_value, resolve_paths
from mentormatch.ranking import MentorRanker
from mentormatch.scoring import ScoringVariant


class TestLoadConfig:
    """Test cases for load_config"""

    def test_shipped_config_is_valid(self, project_root):
        config = load_config(f"{project_root}/configs/config.yaml")
        assert validate_config(config) == []
        assert config["scoring"]["variant"] == "interests"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        with pytest.raises(ValueError, match="empty"):
            load_config(str(path))


class TestValidateConfig:
    """Test cases for validate_config"""

    def test_default_config_is_valid(self):
        assert validate_config(default_config()) == []

    def test_default_config_is_a_copy(self):
        config = default_config()
        config["scoring"]["weights"]["skills"] = 5
        assert default_config()["scoring"]["weights"]["skills"] == 0.5

    def test_missing_sections(self):
        issues = validate_config({})
        assert "Missing required section: global" in issues
        assert "Missing required section: scoring" in issues

    def test_bad_weights(self):
        config = default_config()
        config["scoring"]["weights"] = {"skills": -1, "location": "high", "mbti": 3}
        issues = validate_config(config)
        assert any("'skills' must be non-negative" in i for i in issues)
        assert any("'location' must be a number" in i for i in issues)
        assert any("'mbti' is outside" in i for i in issues)

    def test_ignored_weight_warning(self):
        config = default_config()
        config["scoring"]["weights"]["experience"] = 0.2
        assert validate_config(config) == ["Weight 'experience' is ignored by the 'interests' variant"]

    def test_unknown_variant(self):
        config = default_config()
        config["scoring"]["variant"] = "vibes"
        assert "Unknown scoring variant: vibes" in validate_config(config)

    def test_bad_top_n(self):
        config = default_config()
        config["ranking"]["top_n"] = -2
        assert any("top_n" in i for i in validate_config(config))


class TestGetConfigValue:
    """Test cases for get_config_value"""

    def test_nested_lookup(self):
        config = default_config()
        assert get_config_value(config, "scoring.weights.skills") == 0.5
        assert get_config_value(config, "ranking.top_n") == 3

    def test_default_when_missing(self):
        assert get_config_value({}, "scoring.weights.skills", 1.0) == 1.0
        assert get_config_value({"a": 1}, "a.b") is None


class TestResolvePaths:
    """Test cases for resolve_paths"""

    def test_relative_paths_resolved(self, project_root):
        config = resolve_paths(load_config(f"{project_root}/configs/config.yaml"), project_root)
        assert config["data"]["mentors_path"] == f"{project_root}/data/sample_mentors.csv"
        assert config["scoring"]["compatibility_table"] == f"{project_root}/configs/mbti_pairings.yaml"

    def test_input_not_modified(self, project_root):
        config = default_config()
        resolve_paths(config, project_root)
        assert config["data"]["mentors_path"] == "data/sample_mentors.csv"

    def test_absolute_and_missing_paths_kept(self, tmp_path):
        config = default_config()
        config["data"]["mentees_path"] = str(tmp_path / "mentees.csv")
        resolved = resolve_paths(config, "/srv/app")
        assert resolved["data"]["mentees_path"] == str(tmp_path / "mentees.csv")
        assert resolved["scoring"]["compatibility_table"] is None

    def test_ranker_from_resolved_config_keeps_variant(self, project_root):
        config = load_config(f"{project_root}/configs/config.yaml")
        config["scoring"]["variant"] = "experience"
        ranker = MentorRanker.from_config(resolve_paths(config, project_root))
        assert ranker.variant is ScoringVariant.EXPERIENCE
        assert len(ranker.table) == 16
