import operator
import dask.bag as db
from typing import Optional
from wikilsa.core import config


def _term(term: str) -> str:
    return term


def _count_doc(total: int, _term: str) -> int:
    return total + 1


def _doc_freq(entry: tuple[str, int]) -> int:
    return entry[1]


def document_frequency_counts(
    doc_term_freqs: db.Bag,
    split_every: int = config.REDUCE_SPLIT_EVERY,
    split_out: Optional[int] = None,
) -> db.Bag:
    """Returns a bag of (term, document frequency) pairs, hash-partitioned by term.

    The counts stay spread over `split_out` partitions (by default as many as
    the input has), each term living in exactly one of them.
    """
    if split_out is None:
        split_out = doc_term_freqs.npartitions

    # iterating a term-frequency map yields each distinct term once
    return (
        doc_term_freqs.map(list)
        .flatten()
        .foldby(
            _term,
            _count_doc,
            initial=0,
            combine=operator.add,
            combine_initial=0,
            split_every=split_every,
            split_out=split_out,
        )
    )


def document_frequencies(
    doc_term_freqs: db.Bag,
    num_terms: int,
    split_every: int = config.REDUCE_SPLIT_EVERY,
    scheduler: str = config.DASK_SCHEDULER,
    split_out: Optional[int] = None,
) -> list[tuple[str, int]]:
    """Returns the num_terms (term, document frequency) pairs with the highest counts.

    Each document contributes one count per distinct term. The counts are summed
    by term into hash-partitioned buckets; each bucket then keeps only its own
    num_terms largest entries and those bounded heaps are merged in a tree.
    Entries come out in descending order of document frequency; the order among
    equal counts follows the reduction and is not stable between runs.
    """
    if not num_terms > 0:
        raise ValueError("num_terms must be a positive integer.")

    doc_freqs = document_frequency_counts(
        doc_term_freqs, split_every=split_every, split_out=split_out
    )
    top_terms = doc_freqs.topk(num_terms, key=_doc_freq, split_every=split_every)

    return [(term, int(count)) for term, count in top_terms.compute(scheduler=scheduler)]
