"""Tests for utility functions."""

from pathlib import Path

import pytest
from eureka_config import HomeDirectoryError
from eureka_config.models import ConfigKey
from eureka_config.utils import CONFIG_DIR_NAME
from eureka_config.utils import config_dir_path
from eureka_config.utils import config_file_path
from eureka_config.utils import resolve_home
from eureka_config.utils import strip_trailing_newline


class TestStripTrailingNewline:
    """Test strip_trailing_newline function."""

    def test_no_newline(self):
        assert strip_trailing_newline("/home/u/proj") == "/home/u/proj"

    def test_single_newline(self):
        assert strip_trailing_newline("/usr/bin/vim\n") == "/usr/bin/vim"

    def test_only_last_newline(self):
        assert strip_trailing_newline("a\n\n") == "a\n"

    def test_empty_string(self):
        """Test stripping an empty string is a no-op."""
        assert strip_trailing_newline("") == ""

    def test_only_newline(self):
        assert strip_trailing_newline("\n") == ""

    def test_leading_and_internal_whitespace_kept(self):
        assert strip_trailing_newline(" a\tb \n") == " a\tb "


class TestPaths:
    """Test path construction helpers."""

    def test_config_dir_path(self):
        assert config_dir_path(Path("/home/u")) == Path("/home/u/.eureka")

    def test_config_file_path(self):
        assert config_file_path("repo_path", Path("/home/u")) == Path("/home/u/.eureka/repo_path")

    def test_config_dir_name(self):
        assert CONFIG_DIR_NAME == ".eureka"

    def test_default_home(self, monkeypatch):
        """Test helpers fall back to the resolved home directory."""
        monkeypatch.setattr(Path, "home", lambda: Path("/home/u"))
        assert resolve_home() == Path("/home/u")
        assert config_dir_path() == Path("/home/u/.eureka")
        assert config_file_path("editor_path") == Path("/home/u/.eureka/editor_path")

    def test_resolve_home_failure(self, monkeypatch):
        """Test an unresolvable home directory raises HomeDirectoryError."""

        def no_home():
            raise RuntimeError("Could not determine home directory.")

        monkeypatch.setattr(Path, "home", no_home)

        with pytest.raises(HomeDirectoryError, match="Could not resolve your \\$HOME directory"):
            resolve_home()
        with pytest.raises(HomeDirectoryError):
            config_dir_path()


class TestConfigKey:
    """Test ConfigKey enum."""

    def test_file_names(self):
        assert ConfigKey.REPO.file_name == "repo_path"
        assert ConfigKey.EDITOR.file_name == "editor_path"

    def test_closed_set(self):
        assert {key.name for key in ConfigKey} == {"REPO", "EDITOR"}

    def test_file_names_unique(self):
        names = [key.file_name for key in ConfigKey]
        assert len(names) == len(set(names))
