"""Tests for docseek.uris: root URI helpers."""

from pathlib import Path

import pytest

from docseek.uris import (
    archive_entry_uri,
    base_of,
    display_name,
    file_uri_to_path,
    full_index_uri,
    is_archive_uri,
    is_valid_uri,
    links_to_website,
    split_archive_uri,
)


class TestSchemes:
    def test_links_to_website(self):
        assert links_to_website("https://example.com/api/index.html")
        assert links_to_website("HTTP://example.com/")
        assert not links_to_website("file:///docs/index.html")
        assert not links_to_website("/docs/index.html")

    def test_is_archive_uri(self):
        assert is_archive_uri("jar:file:///libs/a-javadoc.jar!/index.html")
        assert not is_archive_uri("jar:file:///libs/a-javadoc.jar")
        assert not is_archive_uri("file:///libs/a-javadoc.jar")


class TestIsValidUri:
    def test_valid(self):
        assert is_valid_uri("https://example.com/pkg/Foo.html#bar(int)")
        assert is_valid_uri("file:///docs/pkg/Foo.html#%3Cinit%3E()")
        assert is_valid_uri("jar:file:///a.jar!/pkg/Foo.html")

    def test_invalid(self):
        assert not is_valid_uri("pkg/Foo.html")
        assert not is_valid_uri("https://example.com/Foo bar.html")
        assert not is_valid_uri("https://example.com/Foo<T>.html")
        assert not is_valid_uri("https://example.com/100%.html")


class TestPaths:
    def test_file_uri_round_trip(self, tmp_path: Path):
        path = tmp_path / "docs" / "index.html"
        assert file_uri_to_path(path.as_uri()) == path

    def test_escaped_characters(self, tmp_path: Path):
        path = tmp_path / "my docs" / "index.html"
        assert file_uri_to_path(path.as_uri()) == path

    def test_not_a_file_uri(self):
        with pytest.raises(ValueError):
            file_uri_to_path("https://example.com/index.html")

    def test_archive_uri_split(self, tmp_path: Path):
        archive = tmp_path.resolve() / "a-javadoc.jar"
        uri = archive_entry_uri(archive, "index.html")

        assert uri == f"jar:{archive.as_uri()}!/index.html"
        assert split_archive_uri(uri) == (archive, "index.html")

    def test_split_requires_archive_uri(self):
        with pytest.raises(ValueError):
            split_archive_uri("file:///a-javadoc.jar")


class TestIndexUris:
    def test_base_of(self):
        assert base_of("https://example.com/api/index.html") == "https://example.com/api/"
        assert base_of("jar:file:///a.jar!/index.html") == "jar:file:///a.jar!/"

    def test_full_index_uri(self):
        assert (
            full_index_uri("https://example.com/api/index.html")
            == "https://example.com/api/index-all.html"
        )
        assert full_index_uri("jar:file:///a.jar!/index.html") == "jar:file:///a.jar!/index-all.html"

    def test_full_index_only_touches_last_segment(self):
        assert (
            full_index_uri("file:///index.html/docs/index.html")
            == "file:///index.html/docs/index-all.html"
        )


class TestDisplayName:
    def test_archive(self):
        assert display_name("jar:file:///libs/mylib-javadoc.jar!/index.html") == "mylib-javadoc.jar"

    def test_index_page_named_after_directory(self):
        assert display_name("file:///opt/app/javadoc/index.html") == "javadoc"
        assert display_name("https://docs.example.org/api/index.html") == "api"

    def test_other(self):
        assert display_name("https://docs.example.org/API") == "api"
        assert display_name("https://docs.example.org/") == "docs.example.org"
