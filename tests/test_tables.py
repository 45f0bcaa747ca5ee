"""IDF weights and term column indices."""

from __future__ import annotations

import math

import numpy as np
import pytest
from pydantic import ValidationError

from wikilsa.schemas import TermTables
from wikilsa.services.internal import (
    inverse_document_frequencies,
    invert_term_indices,
    term_indices,
)

VOCAB = [("cat", 2), ("dog", 2), ("bird", 1)]


def test_idf_is_log10_of_inverse_document_ratio():
    idfs = inverse_document_frequencies(VOCAB, num_docs=3)

    assert set(idfs) == {"cat", "dog", "bird"}
    assert idfs["cat"] == pytest.approx(math.log10(3 / 2))
    assert idfs["bird"] == pytest.approx(math.log10(3))


def test_term_in_every_document_weighs_zero():
    idfs = inverse_document_frequencies([("the", 4)], num_docs=4)
    assert idfs["the"] == 0.0


def test_document_counts_beyond_32_bits_are_not_truncated():
    num_docs = 2**40
    idfs = inverse_document_frequencies([("rare", 1)], num_docs=num_docs)
    assert idfs["rare"] == pytest.approx(40 * math.log10(2))


def test_negative_document_count_is_rejected():
    with pytest.raises(ValueError):
        inverse_document_frequencies(VOCAB, num_docs=-1)


@pytest.mark.parametrize("num_docs", [2.9, 3.0, "3", True])
def test_non_integer_document_count_is_rejected(num_docs):
    with pytest.raises(TypeError):
        inverse_document_frequencies(VOCAB, num_docs=num_docs)


def test_numpy_integer_document_count_is_accepted():
    idfs = inverse_document_frequencies([("cat", 2)], num_docs=np.int64(3))
    assert idfs["cat"] == pytest.approx(math.log10(3 / 2))


def test_indices_follow_vocabulary_order():
    term_ids = term_indices(VOCAB)
    assert term_ids == {"cat": 0, "dog": 1, "bird": 2}


def test_indices_are_a_bijection():
    vocab = [(f"t{i}", 10 - i) for i in range(10)]
    term_ids = term_indices(vocab)

    assert sorted(term_ids.values()) == list(range(len(vocab)))
    terms = invert_term_indices(term_ids)
    assert all(terms[idx] == term for term, idx in term_ids.items())


def test_empty_vocabulary():
    assert term_indices([]) == {}
    assert invert_term_indices({}) == {}


def test_tables_are_frozen():
    tables = TermTables(idfs={"cat": 0.5}, term_ids={"cat": 0})
    assert tables.num_terms == 1
    with pytest.raises(ValidationError):
        tables.idfs = {}
