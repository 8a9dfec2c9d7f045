"""Tests for include path resolution."""

from __future__ import annotations

from pgconf.include.paths import canonicalize, is_blank, resolve_location


class TestResolveLocation:
    def test_absolute_unchanged(self) -> None:
        assert resolve_location("/etc/db/extra.conf", calling_file="/srv/main.conf", base_dir="/base") == (
            "/etc/db/extra.conf"
        )

    def test_relative_to_calling_file(self) -> None:
        assert resolve_location("extra.conf", calling_file="/srv/conf/main.conf", base_dir="/base") == (
            "/srv/conf/extra.conf"
        )

    def test_relative_to_base_dir(self) -> None:
        assert resolve_location("extra.conf", base_dir="/base") == "/base/extra.conf"

    def test_neither_known(self) -> None:
        assert resolve_location("extra.conf") == "extra.conf"

    def test_dot_segments_removed(self) -> None:
        assert resolve_location("../shared/./x.conf", calling_file="/srv/conf/main.conf") == "/srv/shared/x.conf"

    def test_absolute_canonicalized(self) -> None:
        assert resolve_location("/a//b/../c.conf") == "/a/c.conf"


class TestCanonicalize:
    def test_leading_double_slash(self) -> None:
        assert canonicalize("//a/b") == "/a/b"

    def test_trailing_slash(self) -> None:
        assert canonicalize("/a/b/") == "/a/b"


class TestIsBlank:
    def test_blank_values(self) -> None:
        assert is_blank(None)
        assert is_blank("")
        assert is_blank(" \t\r\n")

    def test_non_blank(self) -> None:
        assert not is_blank(" x ")
