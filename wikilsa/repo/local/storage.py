import os
from wikilsa.utils import logger


def save_doc_freqs(path: str, doc_freqs: list[tuple[str, int]]) -> None:
    """Write one `term<TAB>document frequency` line per vocabulary entry, in order."""
    try:
        with open(path, "w") as f:
            for term, freq in doc_freqs:
                f.write(f"{term}\t{freq}\n")
    except OSError as e:
        raise RuntimeError(f"Error writing document frequencies to {path}: {e}") from e

    logger.info(f"Saved {len(doc_freqs)} document frequencies to {path}")


def load_doc_freqs(path: str) -> list[tuple[str, int]]:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Document frequency report not found: {path}")

    doc_freqs: list[tuple[str, int]] = []
    with open(path, "r") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.rstrip("\n")
            if not line:
                continue
            parts = line.split("\t")
            if len(parts) != 2:
                raise ValueError(f"Malformed line {line_no} in {path}: {line!r}")
            term, freq = parts
            try:
                doc_freqs.append((term, int(freq)))
            except ValueError:
                raise ValueError(
                    f"Invalid frequency on line {line_no} in {path}: {freq!r}"
                ) from None
    return doc_freqs
