import math
import operator


def inverse_document_frequencies(
    doc_freqs: list[tuple[str, int]], num_docs: int
) -> dict[str, float]:
    """Returns log10(num_docs / df) for every (term, df) in the vocabulary."""
    if isinstance(num_docs, bool):
        raise TypeError("num_docs must be an integer, not bool.")
    try:
        num_docs = operator.index(num_docs)
    except TypeError:
        raise TypeError(
            f"num_docs must be an integer, got {type(num_docs).__name__}"
        ) from None
    if num_docs < 0:
        raise ValueError("num_docs must be a non-negative integer.")

    idfs: dict[str, float] = {}
    for term, count in doc_freqs:
        idfs[term] = math.log10(num_docs / count)
    return idfs
