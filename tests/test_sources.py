import pytest
import requests
from packages.datasets import (
    DEFAULT_START_WORDS, WordListError, clean_words, load_start_words, write_words,
)
from packages.datasets import sources


def test_clean_words():
    assert clean_words(["  Silk ", "", "\t", "WORM"]) == ["silk", "worm"]


def test_load_bundled_start_words():
    words = load_start_words()
    assert "silkworm" in words
    assert all(w == w.strip().lower() and w for w in words)


def test_load_from_file(tmp_path):
    p = tmp_path / "start.txt"
    write_words(["Silkworm", "", "absolute"], p)
    assert load_start_words(p) == ["silkworm", "absolute"]


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(WordListError, match="not found"):
        load_start_words(tmp_path / "missing.txt")


def test_empty_file_is_fatal(tmp_path):
    p = tmp_path / "empty.txt"
    p.write_text("\n\n", encoding="utf-8")
    with pytest.raises(WordListError, match="no words"):
        load_start_words(p)


class _Resp:
    def __init__(self, text, status=200):
        self.text = text
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_load_from_url(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _Resp("silkworm\nabsolute\n")

    monkeypatch.setattr(sources.requests, "get", fake_get)
    words = load_start_words("https://example.com/start.txt")
    assert words == ["silkworm", "absolute"]
    assert calls == [("https://example.com/start.txt", sources.FETCH_TIMEOUT)]


def test_url_http_error_is_fatal(monkeypatch):
    monkeypatch.setattr(sources.requests, "get", lambda url, timeout: _Resp("", 404))
    with pytest.raises(WordListError, match="Could not fetch"):
        load_start_words("https://example.com/start.txt")


def test_url_connection_error_is_fatal(monkeypatch):
    def boom(url, timeout):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(sources.requests, "get", boom)
    with pytest.raises(WordListError):
        load_start_words("http://example.com/start.txt")


def test_default_path_points_into_package():
    assert DEFAULT_START_WORDS.name == "start.txt" and DEFAULT_START_WORDS.exists()
