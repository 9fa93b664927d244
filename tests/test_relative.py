"""
Tests for relative path resolution, the ancestor predicate and parent().
"""
from __future__ import annotations

import pytest

from pathalgebra.errors import IncompatiblePathsError, LookaheadError
from pathalgebra.relative import is_parent, is_parent_segments, make_relative, parent
from pathalgebra.segments import concat, normalize


class TestMakeRelative:
    """Test make_relative scenarios and failure modes."""

    def test_lookahead_rejected(self):
        """Test that a reference above an unknown '..' cannot be resolved."""
        with pytest.raises(LookaheadError):
            make_relative("a", "..")

    def test_through_shared_parent(self):
        assert make_relative("../a", "..") == "a"

    def test_sibling_directory(self):
        assert make_relative("a/b", "c") == "../a/b"

    def test_absolute_reference_relative_path(self):
        with pytest.raises(IncompatiblePathsError):
            make_relative("a/b", "/")

    def test_relative_reference_absolute_path(self):
        with pytest.raises(IncompatiblePathsError) as exc_info:
            make_relative("/a/b", "c")
        assert exc_info.value.path == "/a/b"
        assert exc_info.value.reference == "c"

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            make_relative("a", "/b")

    def test_self_is_current_directory(self):
        assert make_relative("/mnt/local", "/mnt/local") == "."
        assert make_relative("a/b", "a/b") == "."

    def test_absolute_paths(self):
        assert make_relative("/mnt/global/foo", "/mnt/local") == "../global/foo"
        assert make_relative("/mnt", "/mnt/local/deep") == "../.."
        assert make_relative("/mnt/local/x", "/") == "mnt/local/x"

    def test_inputs_are_normalized(self):
        assert make_relative("/mnt/./local/../global", "/mnt/x/..") == "global"

    def test_lookahead_after_common_prefix(self):
        with pytest.raises(LookaheadError):
            make_relative("../a", "../../b")

    def test_relative_path_without_reference_unchanged(self):
        """Test that relative paths are returned as-is, without normalization."""
        calls = []

        def getcwd():
            calls.append(1)
            return "/nowhere"

        assert make_relative("a/./b/..", getcwd=getcwd) == "a/./b/.."
        assert calls == []

    def test_default_reference_is_current_directory(self, cwd):
        assert make_relative("/home/user/project/src/x.py", getcwd=cwd) == "src/x.py"
        assert make_relative("/home/other", getcwd=cwd) == "../../other"

    def test_default_reference_uses_process_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert make_relative(str(tmp_path / "a" / "b")) == "a/b"

    @pytest.mark.parametrize("reference,path", [
        ("/", "/a/b"),
        ("/a", "/a/b/c"),
        ("/a/b/c", "/a/x"),
        ("/a/b", "/"),
        ("a", "b"),
        ("a/b", "a/c/d"),
        ("..", "../x"),
        ("../..", "../../x/y"),
        ("../a", "../b"),
        ("x", "../y"),
    ])
    def test_inversion(self, reference, path):
        """Test that re-anchoring the result at the reference reaches the path."""
        rel = make_relative(path, reference)
        assert normalize(concat(reference, rel)) == normalize(path)


class TestIsParent:
    """Truth table for the ancestor predicate."""

    @pytest.mark.parametrize("p1,p2,expected", [
        # Root dominates everything
        ("/", "/a/b", True),
        ("/", "/", True),
        ("/", "a", True),
        ("/mnt/..", "/x", True),
        # Plain prefixes
        ("/mnt", "/mnt/local", True),
        ("/mnt", "/mnt", True),
        ("/mnt/local", "/mnt", False),
        ("/mnt", "/mount", False),
        ("a", "a/b", True),
        ("a/b", "a/c", False),
        # Normalization happens first
        ("/mnt/x/..", "/mnt/local/../global", True),
        ("/mnt/global", "/mnt/local/../global/foo", True),
        # Empty relative path is a parent of plain relative paths
        (".", "a", True),
        (".", ".", True),
        (".", "../a", False),
        ("", "a/b", True),
        # Leading '..' chains may dominate
        ("..", "a", True),
        ("../..", "a/b", True),
        ("..", ".", True),
        ("../..", "..", True),
        ("..", "../a", True),
        ("..", "../..", False),
        ("../a", "../a/b", True),
        ("../a", "../b", False),
        ("a", "../a", False),
        ("../x", "a", False),
        # Mixed absolute and relative
        ("..", "/a", False),
        ("a", "/a", False),
        ("/a", "a", False),
    ])
    def test_truth_table(self, p1, p2, expected):
        assert is_parent(p1, p2) is expected

    def test_segments_variant(self):
        assert is_parent_segments(["/"], ["/", "x"])
        assert is_parent_segments(["..", ".."], ["x"])
        assert not is_parent_segments(["..", "a"], ["b"])
        assert is_parent_segments([], [])
        assert not is_parent_segments(["a"], [])
        assert is_parent_segments(["..", ".."], [])

    def test_every_path_is_its_own_parent(self):
        for path in ["/", "/a", "a/b", "..", "../x", "."]:
            assert is_parent(path, path)


class TestParent:
    """Test parent() on absolute and relative paths."""

    def test_simple(self):
        assert parent("/mnt/local") == "/mnt"

    def test_unnormalized(self):
        assert parent("/mnt/local/../global/foo") == "/mnt/global"

    def test_beyond_root(self):
        assert parent("/mnt/local/../../global") == "/"

    def test_relative(self):
        assert parent("a/b") == "a"
        assert parent("a") == "."
        assert parent(".") == ".."
        assert parent("..") == "../.."
