import os
from unittest import mock

from docseek.config import Settings


def test_defaults():
    """Defaults match the documented behaviour."""
    with mock.patch.dict(os.environ, {}, clear=True):
        settings = Settings()

    assert settings.fetch_timeout == 10.0
    assert settings.search_depth == 4
    assert settings.max_results == 50
    assert settings.search_program_dir is False
    assert "package" in settings.skip_categories
    assert "Method" not in settings.skip_categories


def test_env_overrides():
    env = {
        "DOCSEEK_FETCH_TIMEOUT": "2.5",
        "DOCSEEK_MAX_RESULTS": "10",
        "docseek_search_depth": "2",
        "DOCSEEK_SKIP_CATEGORIES": '["Variable"]',
    }
    with mock.patch.dict(os.environ, env, clear=True):
        settings = Settings()

    assert settings.fetch_timeout == 2.5
    assert settings.max_results == 10
    assert settings.search_depth == 2
    assert settings.skip_categories == ["Variable"]


def test_get_seeds_empty():
    assert Settings(seeds="").get_seeds() == []


def test_get_seeds_parsing():
    """Seeds are comma separated, blanks and whitespace ignored."""
    settings = Settings(seeds=" file:///a/docs , ,https://example.org/api/index.html,")

    assert settings.get_seeds() == [
        "file:///a/docs",
        "https://example.org/api/index.html",
    ]
