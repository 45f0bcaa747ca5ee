import dask
import dask.bag as db
from wikilsa import schemas
from wikilsa.core import config
from wikilsa.utils import logger
from wikilsa.repo.local import save_doc_freqs
from wikilsa.services.internal import (
    term_frequencies,
    document_frequencies,
    inverse_document_frequencies,
    term_indices,
    invert_term_indices,
    assemble_vector,
)


def term_document_matrix(
    docs: db.Bag,
    num_terms: int = config.NUM_TERMS,
    doc_freqs_path: str = config.DOC_FREQS_PATH,
    split_every: int = config.REDUCE_SPLIT_EVERY,
    scheduler: str = config.DASK_SCHEDULER,
) -> tuple[db.Bag, dict[int, str]]:
    """Returns a bag of TF-IDF document vectors and the term labelling each column.

    `docs` is a bag of term sequences, one per document. The vectors come back
    lazily, in the same order as `docs`. The document frequency report is
    written to `doc_freqs_path` before any vector is assembled.
    """
    doc_term_freqs = docs.map(term_frequencies).persist(scheduler=scheduler)

    doc_freqs = document_frequencies(
        doc_term_freqs, num_terms, split_every=split_every, scheduler=scheduler
    )
    logger.info(f"Number of terms: {len(doc_freqs)}")
    save_doc_freqs(doc_freqs_path, doc_freqs)

    num_docs: int = doc_term_freqs.count().compute(scheduler=scheduler)
    logger.info(f"Number of documents: {num_docs}")

    idfs = inverse_document_frequencies(doc_freqs, num_docs)
    term_ids = term_indices(doc_freqs)

    # one immutable copy of the tables is shipped to every task
    tables = schemas.TermTables(idfs=idfs, term_ids=term_ids)
    b_tables = db.Item.from_delayed(dask.delayed(tables, traverse=False))

    vecs = doc_term_freqs.map(assemble_vector, b_tables)
    return vecs, invert_term_indices(term_ids)
