from collections import Counter
from typing import Iterable


def term_frequencies(terms: Iterable[str]) -> dict[str, int]:
    """Returns how many times each term occurs in one document."""
    return dict(Counter(terms))
