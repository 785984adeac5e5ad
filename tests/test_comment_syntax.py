"""Tests for CommentSyntaxTable"""

import pytest

from pathmark.domain.config import AnnotateConfig
from pathmark.infrastructure.comment_syntax import CommentSyntaxTable, extension_of


@pytest.fixture
def table():
    return CommentSyntaxTable(AnnotateConfig().comment_prefixes)


@pytest.mark.parametrize(
    "extension,prefix",
    [(".go", "//"), (".ts", "//"), (".cpp", "//"), (".py", "#"), (".yaml", "#"), (".gitignore", "#")],
)
def test_lookup_known(table, extension, prefix):
    """Test lookup of mapped extensions"""
    assert table.lookup(extension) == prefix


def test_lookup_unknown(table):
    """Test that unmapped extensions return None"""
    assert table.lookup(".json") is None
    assert table.lookup(".md") is None
    assert table.lookup("") is None


def test_lookup_is_case_sensitive(table):
    """Test that lookup does not fold case"""
    assert table.lookup(".GO") is None
    assert table.lookup(".Py") is None


def test_prefix_for_path(table):
    """Test lookup from a full path"""
    assert table.prefix_for("/repo/controllers/poi_controller.go") == "//"
    assert table.prefix_for("/repo/scripts/deploy.sh") == "#"
    assert table.prefix_for("/repo/README.md") is None


class TestExtensionOf:
    """Tests for extension_of"""

    def test_regular_file(self):
        """Test extension of a regular file"""
        assert extension_of("main.go") == ".go"
        assert extension_of("archive.tar.gz") == ".gz"

    def test_dotfile_is_its_own_extension(self):
        """Test that bare dotfiles map to their whole name"""
        assert extension_of(".gitignore") == ".gitignore"
        assert extension_of(".env") == ".env"

    def test_dotfile_with_suffix(self):
        """Test dotfiles with a further dot"""
        assert extension_of(".env.example") == ".example"

    def test_no_extension(self):
        """Test names without extension"""
        assert extension_of("Makefile") == ""
