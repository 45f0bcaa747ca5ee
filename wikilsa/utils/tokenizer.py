import threading
import nltk
from functools import lru_cache
from typing import Literal
from nltk import WordNetLemmatizer, SnowballStemmer
from nltk.tokenize import wordpunct_tokenize

WordProcessMethod = Literal["lemmatize", "stem"]


_lemmatizer_lock = threading.Lock()


@lru_cache(maxsize=1)
def _load_lemmatizer() -> WordNetLemmatizer:
    nltk.download("wordnet", quiet=True)
    lmtz = WordNetLemmatizer()
    # the wordnet corpus loads lazily and its loader is not thread-safe
    lmtz.lemmatize("loading")
    return lmtz


def _get_lemmatizer() -> WordNetLemmatizer:
    with _lemmatizer_lock:
        return _load_lemmatizer()


@lru_cache(maxsize=1)
def _get_stemmer() -> SnowballStemmer:
    return SnowballStemmer("english")


def stem(words: list[str]) -> list[str]:
    stemmer = _get_stemmer()
    return [stemmer.stem(word) for word in words]


def lemmatize(words: list[str]) -> list[str]:
    lmtz = _get_lemmatizer()
    return [lmtz.lemmatize(word) for word in words]


def is_only_letters(word: str) -> bool:
    return len(word) > 0 and all(ch.isalpha() for ch in word)


def load_stop_words(path: str) -> set[str]:
    """Stop words are stored one per line."""
    with open(path, "r") as f:
        return set(line.strip() for line in f if line.strip())


def plain_text_to_lemmas(
    text: str,
    stop_words: set[str],
    word_process_method: WordProcessMethod = "lemmatize",
) -> list[str]:
    """Returns the lower-cased, alphabetic lemmas longer than two characters that are not stop words."""
    process_method: callable[[list[str]], list[str]] = stem
    if word_process_method == "lemmatize":
        process_method = lemmatize

    words = [word.lower() for word in wordpunct_tokenize(text)]

    lemmas = []
    for lemma in process_method(words):
        lemma = lemma.lower()
        if len(lemma) > 2 and is_only_letters(lemma) and lemma not in stop_words:
            lemmas.append(lemma)
    return lemmas
