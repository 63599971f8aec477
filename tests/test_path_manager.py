"""Unit tests for cd path resolution."""

import pytest

from myshell.exceptions import FileNotFoundError, HomeNotSetError
from myshell.path_manager import expand_home, resolve_path, split_components


class TestExpandHome:
    """Tests for ~ expansion."""

    def test_tilde_alone(self):
        assert expand_home("~", "/home/user") == "/home/user"

    def test_tilde_prefix(self):
        assert expand_home("~/docs", "/home/user") == "/home/user/docs"

    def test_tilde_user_form_is_not_expanded(self):
        assert expand_home("~other", "/home/user") == "~other"

    def test_plain_path_unchanged(self):
        assert expand_home("docs/~", None) == "docs/~"

    @pytest.mark.parametrize("home", [None, ""])
    def test_missing_home(self, home):
        with pytest.raises(HomeNotSetError) as excinfo:
            expand_home("~", home)
        assert str(excinfo.value) == "HOME not set"


class TestPathResolution:
    """Tests for resolve_path."""

    def test_resolve_absolute_path(self):
        assert resolve_path("/etc/config", "/home/user") == "/etc/config"

    def test_resolve_relative_path(self):
        assert resolve_path("documents", "/home/user") == "/home/user/documents"

    def test_resolve_parent_directory(self):
        assert resolve_path("..", "/home/user/docs") == "/home/user"
        assert resolve_path("../other", "/home/user/docs") == "/home/other"

    def test_resolve_current_directory(self):
        assert resolve_path(".", "/home/user") == "/home/user"
        assert resolve_path("./sub/.", "/home/user") == "/home/user/sub"

    def test_resolve_normalizes_path(self):
        assert resolve_path("/foo//bar/../baz/", "/home") == "/foo/baz"

    def test_resolve_to_root(self):
        assert resolve_path("..", "/home") == "/"
        assert resolve_path("/", "/home/user") == "/"

    def test_resolve_home(self):
        assert resolve_path("~/../x", "/tmp", home="/home/user") == "/home/x"

    def test_parent_of_root_is_error(self):
        with pytest.raises(FileNotFoundError) as excinfo:
            resolve_path("..", "/")
        assert str(excinfo.value) == "..: No such file or directory"

    def test_underflow_inside_absolute_path(self):
        with pytest.raises(FileNotFoundError):
            resolve_path("/a/../../b", "/home")

    def test_underflow_error_names_original_argument(self):
        with pytest.raises(FileNotFoundError) as excinfo:
            resolve_path("../../..", "/home")
        assert excinfo.value.path == "../../.."


class TestSplitComponents:
    """Tests for split_components."""

    def test_drops_empty_parts(self):
        assert split_components("/a//b/") == ["a", "b"]

    def test_root(self):
        assert split_components("/") == []
