"""Text to lemma normalization and stop words."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

import wikilsa.utils.tokenizer as tokenizer_module
from wikilsa.utils import is_only_letters, load_stop_words, plain_text_to_lemmas


def test_filters_short_non_alphabetic_and_stop_words():
    lemmas = plain_text_to_lemmas(
        "The cats, 42 dogs and it! Running x1y",
        stop_words={"the", "and"},
        word_process_method="stem",
    )
    assert lemmas == ["cat", "dog", "run"]


def test_output_is_lower_cased():
    lemmas = plain_text_to_lemmas("PARIS Berlin", set(), word_process_method="stem")
    assert all(lemma == lemma.lower() for lemma in lemmas)
    assert len(lemmas) == 2


def test_stop_words_match_lower_cased_terms():
    lemmas = plain_text_to_lemmas("Wiki wiki WIKI birds", {"wiki"}, "stem")
    assert lemmas == ["bird"]


def test_empty_text():
    assert plain_text_to_lemmas("", {"the"}, word_process_method="stem") == []


@pytest.mark.parametrize(
    "word, expected",
    [("cat", True), ("café", True), ("x1y", False), ("co-op", False), ("", False)],
)
def test_is_only_letters(word, expected):
    assert is_only_letters(word) is expected


def test_load_stop_words(tmp_path):
    path = tmp_path / "stopwords.txt"
    path.write_text("the\nand\n\n  of  \n")
    assert load_stop_words(str(path)) == {"the", "and", "of"}


class _SlowLemmatizer:
    instances = 0

    def __init__(self):
        type(self).instances += 1
        time.sleep(0.05)

    def lemmatize(self, word):
        return word.rstrip("s")


@pytest.fixture()
def fake_wordnet(monkeypatch):
    downloads = []
    lock = threading.Lock()

    def fake_download(*args, **kwargs):
        with lock:
            downloads.append(args)
        time.sleep(0.05)
        return True

    _SlowLemmatizer.instances = 0
    monkeypatch.setattr(tokenizer_module.nltk, "download", fake_download)
    monkeypatch.setattr(tokenizer_module, "WordNetLemmatizer", _SlowLemmatizer)
    tokenizer_module._load_lemmatizer.cache_clear()
    yield downloads
    tokenizer_module._load_lemmatizer.cache_clear()


def test_lemmatizer_loads_once_under_concurrent_first_use(fake_wordnet):
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(
            pool.map(
                lambda _: plain_text_to_lemmas("cats dogs", set(), "lemmatize"),
                range(32),
            )
        )

    assert len(fake_wordnet) == 1
    assert _SlowLemmatizer.instances == 1
    assert all(result == ["cat", "dog"] for result in results)
