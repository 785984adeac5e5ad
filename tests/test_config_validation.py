"""Tests for configuration validation with Pydantic."""

import pytest
from pydantic import ValidationError

from pathmark.domain.config import AnnotateConfig, AppConfig, TreeConfig
from pathmark.infrastructure.config.config_manager import ConfigManager, ConfigurationError


class TestAnnotateConfigValidation:
    """Tests for AnnotateConfig validation."""

    def test_defaults(self):
        """Test default extension table"""
        config = AnnotateConfig()
        assert config.comment_prefixes[".go"] == "//"
        assert config.comment_prefixes[".yml"] == "#"
        assert len(config.comment_prefixes) == 13
        assert config.marker == "File:"

    def test_extension_without_dot(self):
        """Test that extensions must start with a dot"""
        with pytest.raises(ValidationError, match="comment_prefixes"):
            AnnotateConfig(comment_prefixes={"go": "//"})

    def test_empty_prefix(self):
        """Test that comment prefixes must not be blank"""
        with pytest.raises(ValidationError, match="comment_prefixes"):
            AnnotateConfig(comment_prefixes={".go": " "})

    def test_invalid_pattern(self):
        """Test that ignore patterns must compile"""
        with pytest.raises(ValidationError, match="ignore_patterns"):
            AnnotateConfig(ignore_patterns=["[unclosed"])

    def test_empty_marker(self):
        """Test that the marker must not be empty"""
        with pytest.raises(ValidationError, match="marker"):
            AnnotateConfig(marker="")

    def test_frozen(self):
        """Test that configuration cannot be reassigned"""
        config = AnnotateConfig()
        with pytest.raises(ValidationError):
            config.marker = "Path:"


class TestTreeConfigValidation:
    """Tests for TreeConfig validation."""

    def test_defaults(self):
        """Test default whitelist and remarks"""
        config = TreeConfig()
        assert config.whitelist == [".env.example", ".gitignore"]
        assert "main.go" in config.remarks
        assert config.root_label == "/"

    def test_invalid_pattern(self):
        """Test that ignore patterns must compile"""
        with pytest.raises(ValidationError, match="ignore_patterns"):
            TreeConfig(ignore_patterns=["(unclosed"])


class TestAppConfig:
    """Tests for AppConfig."""

    def test_unknown_section_rejected(self):
        """Test that extra fields are forbidden"""
        with pytest.raises(ValidationError):
            AppConfig(unknown={})


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_defaults(self, monkeypatch):
        """Test config manager without overrides"""
        monkeypatch.delenv("PATHMARK_EXTRA_IGNORE", raising=False)
        manager = ConfigManager()
        assert manager.get_annotate_config() == AnnotateConfig()
        assert manager.get_tree_config() == TreeConfig()
        assert manager.get_tree_config().root_label == "/"

    def test_overrides_merge(self, monkeypatch):
        """Test that nested overrides merge over defaults"""
        monkeypatch.delenv("PATHMARK_EXTRA_IGNORE", raising=False)
        manager = ConfigManager({"annotate": {"comment_prefixes": {".rs": "//"}}, "tree": {"root_label": "."}})
        prefixes = manager.get_annotate_config().comment_prefixes
        assert prefixes[".rs"] == "//"
        assert prefixes[".go"] == "//"
        assert manager.get_tree_config().root_label == "."

    def test_invalid_override(self, monkeypatch):
        """Test that validation errors are reported as ConfigurationError"""
        monkeypatch.delenv("PATHMARK_EXTRA_IGNORE", raising=False)
        with pytest.raises(ConfigurationError, match="annotate.ignore_patterns"):
            ConfigManager({"annotate": {"ignore_patterns": ["[bad"]}})

    def test_malformed_section_with_env_override(self, monkeypatch):
        """Test that a non-dict section is reported as ConfigurationError"""
        monkeypatch.setenv("PATHMARK_EXTRA_IGNORE", r"^build$")
        with pytest.raises(ConfigurationError, match="annotate"):
            ConfigManager({"annotate": None})

    def test_env_extra_ignore(self, monkeypatch):
        """Test extra ignore patterns from the environment"""
        monkeypatch.setenv("PATHMARK_EXTRA_IGNORE", r"^build$, \.bak$")
        manager = ConfigManager()
        assert manager.get_annotate_config().ignore_patterns[-2:] == [r"^build$", r"\.bak$"]
        assert manager.get_tree_config().ignore_patterns[-2:] == [r"^build$", r"\.bak$"]
