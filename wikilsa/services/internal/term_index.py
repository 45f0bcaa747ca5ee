def term_indices(doc_freqs: list[tuple[str, int]]) -> dict[str, int]:
    """Maps each vocabulary term to its column, in vocabulary order."""
    return {term: idx for idx, (term, _) in enumerate(doc_freqs)}


def invert_term_indices(term_ids: dict[str, int]) -> dict[int, str]:
    return {idx: term for term, idx in term_ids.items()}
