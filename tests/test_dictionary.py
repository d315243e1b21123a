import pytest
from packages.dictionary import build_dictionary, create_dictionary, get_dictionary_ids
from packages.dictionary.base import BaseDictionary, register
from packages.dictionary.frequency import WordFreqDictionary
from packages.dictionary.wordlist import WordListDictionary


def test_registry_lists_builtin_dictionaries():
    assert get_dictionary_ids() == ["wordfreq", "wordlist"]


def test_create_unknown_dictionary_raises():
    with pytest.raises(ValueError, match="Available"):
        create_dictionary("nope")


def test_register_rejects_duplicates_and_missing_id():
    with pytest.raises(ValueError):
        @register
        class Again(BaseDictionary):
            id = "wordlist"

    with pytest.raises(ValueError):
        @register
        class NoId(BaseDictionary):
            id = ""


def test_wordlist_membership_and_language():
    d = WordListDictionary(["Silk", " worm ", ""], language="en")
    assert len(d) == 2
    assert d.is_valid_word("silk", "en") is True
    assert d.is_valid_word("worm", "en") is True
    assert d.is_valid_word("milk", "en") is False
    assert d.is_valid_word("silk", "de") is False
    assert d.is_valid_word("", "en") is False


def test_wordlist_from_file(tmp_path):
    p = tmp_path / "words.txt"
    p.write_text("silk\nworm\n\n", encoding="utf-8")
    d = WordListDictionary.from_file(p)
    assert d.is_valid_word("worm", "en")
    with pytest.raises(FileNotFoundError):
        WordListDictionary.from_file(tmp_path / "missing.txt")


def test_build_dictionary_wordlist_needs_file(tmp_path):
    with pytest.raises(ValueError):
        build_dictionary("wordlist")
    p = tmp_path / "w.txt"
    p.write_text("silk\n", encoding="utf-8")
    d = build_dictionary("wordlist", words=str(p), language="en")
    assert isinstance(d, WordListDictionary) and d.is_valid_word("silk", "en")


def test_build_dictionary_wordfreq_threshold():
    d = build_dictionary("wordfreq", min_zipf=3.5)
    assert isinstance(d, WordFreqDictionary) and d.min_zipf == 3.5


def test_wordfreq_threshold(monkeypatch):
    freqs = {"silk": 4.1, "wilk": 1.2}
    monkeypatch.setattr(WordFreqDictionary, "zipf", lambda self, w, lang: freqs.get(w, 0.0))
    d = WordFreqDictionary(min_zipf=2.0)
    assert d.is_valid_word("silk", "en") is True
    assert d.is_valid_word("wilk", "en") is False
    assert d.is_valid_word("qzxv", "en") is False


def test_wordfreq_rejects_non_alpha_and_unknown_language():
    d = WordFreqDictionary()
    assert d.is_valid_word("silk worm", "en") is False
    assert d.is_valid_word("silk1", "en") is False
    assert d.is_valid_word("silk", "xx") is False


def test_wordfreq_real_lookup():
    d = WordFreqDictionary()
    assert d.is_valid_word("house", "en") is True
    assert d.is_valid_word("xqzvbk", "en") is False
