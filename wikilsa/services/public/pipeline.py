import dask
import dask.bag as db
from typing import Iterable
from wikilsa import schemas
from wikilsa.core import config
from wikilsa.utils import (
    logger,
    plain_text_to_lemmas,
    load_stop_words,
    read_records,
    wiki_xml_to_plain_text,
)
from .matrix import term_document_matrix


def _parse_partition(
    records: Iterable[str], stop_words: set[str], word_process_method: str
) -> list[tuple[str, list[str]]]:
    docs: list[tuple[str, list[str]]] = []
    for record in records:
        try:
            page = wiki_xml_to_plain_text(record)
        except Exception as e:
            logger.warning(f"Skipping unparseable page record: {e}")
            continue
        if page is None:
            continue

        lemmas = plain_text_to_lemmas(
            page.contents,
            stop_words=stop_words,
            word_process_method=word_process_method,
        )
        docs.append((page.title, lemmas))
    return docs


def parse_wikipedia(
    path: str,
    stop_words: set[str],
    word_process_method: str = config.WORD_PROCESS_METHOD,
    start_tag: str = config.PAGE_START_TAG,
    end_tag: str = config.PAGE_END_TAG,
    blocksize: int = config.DUMP_BLOCKSIZE,
) -> db.Bag:
    """Returns a bag of (title, lemmas) pairs, one per article in the dump."""
    records = read_records(path, start_tag=start_tag, end_tag=end_tag, blocksize=blocksize)
    return records.map_partitions(
        _parse_partition, frozenset(stop_words), word_process_method
    )


def build_term_document_matrix(
    request: schemas.PipelineRequest,
    blocksize: int = config.DUMP_BLOCKSIZE,
) -> schemas.TermDocumentMatrix:
    stop_words: set[str] = set()
    if request.stop_words_path:
        stop_words = load_stop_words(request.stop_words_path)
        logger.info(f"Loaded {len(stop_words)} stop words from {request.stop_words_path}")

    docs = parse_wikipedia(
        request.dump_path,
        stop_words=stop_words,
        word_process_method=request.word_process_method,
        blocksize=blocksize,
    ).persist(scheduler=request.scheduler)

    vecs, terms = term_document_matrix(
        docs.pluck(1),
        num_terms=request.num_terms,
        doc_freqs_path=request.doc_freqs_path,
        scheduler=request.scheduler,
    )
    titles, vectors = dask.compute(docs.pluck(0), vecs, scheduler=request.scheduler)

    return schemas.TermDocumentMatrix(
        titles=list(titles), vectors=list(vectors), terms=terms
    )


def run_pipeline(request: schemas.PipelineRequest) -> schemas.PipelineResponse:
    try:
        logger.info(f"Starting term-document matrix build from '{request.dump_path}'...")

        result = build_term_document_matrix(request)

        if len(result.vectors) == 0:
            raise ValueError("No articles were found in the provided dump.")

        logger.info(
            f"Completed term-document matrix of {len(result.vectors)} documents x {len(result.terms)} terms."
        )

        return schemas.PipelineResponse(
            status="completed",
            message=f"Built a {len(result.vectors)} x {len(result.terms)} term-document matrix.",
            num_docs=len(result.vectors),
            num_terms=len(result.terms),
        )

    except Exception as e:
        logger.error(f"Error while building the term-document matrix: {e}")

        return schemas.PipelineResponse(status="failed", message=str(e))
