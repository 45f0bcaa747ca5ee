import numpy as np
from scipy.sparse import csr_matrix
from wikilsa import schemas


def assemble_vector(
    term_freqs: dict[str, int], tables: schemas.TermTables
) -> schemas.SparseVector:
    """Returns the TF-IDF row of one document over the vocabulary columns.

    The term frequency is normalized by the total number of terms in the
    document, counting terms outside the vocabulary too. A document with no
    terms yields an empty vector rather than dividing by zero.
    """
    doc_total_terms = sum(term_freqs.values())
    if doc_total_terms == 0:
        return schemas.SparseVector(size=tables.num_terms)

    term_scores: list[tuple[int, float]] = []
    for term, freq in term_freqs.items():
        idx = tables.term_ids.get(term)
        if idx is None:
            continue
        term_scores.append((idx, tables.idfs[term] * freq / doc_total_terms))

    term_scores.sort()
    return schemas.SparseVector(
        size=tables.num_terms,
        indices=[idx for idx, _ in term_scores],
        values=[score for _, score in term_scores],
    )


def to_csr_matrix(vectors: list[schemas.SparseVector], num_terms: int) -> csr_matrix:
    """Stack document vectors as the rows of a documents x terms matrix."""
    indptr = [0]
    indices: list[int] = []
    data: list[float] = []
    for vec in vectors:
        if vec.size != num_terms:
            raise ValueError(
                f"Vector of size {vec.size} does not match {num_terms} terms"
            )
        indices.extend(vec.indices)
        data.extend(vec.values)
        indptr.append(len(indices))

    return csr_matrix(
        (
            np.asarray(data, dtype=np.float64),
            np.asarray(indices, dtype=np.int64),
            np.asarray(indptr, dtype=np.int64),
        ),
        shape=(len(vectors), num_terms),
    )
