"""Shared fixtures for the wikilsa test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import dask.bag as db
import pytest

SCHEDULER = "sync"

CORPUS = [
    ["cat", "dog", "cat"],
    ["dog", "bird"],
    ["cat", "bird", "bird"],
]


def make_docs(docs: Iterable[list[str]], npartitions: int = 2) -> db.Bag:
    docs = list(docs)
    return db.from_sequence(docs, npartitions=max(1, min(npartitions, len(docs))))


def make_page_xml(
    title: str,
    text: str,
    *,
    ns: int = 0,
    redirect: str | None = None,
) -> str:
    redirect_tag = f'    <redirect title="{redirect}" />\n' if redirect else ""
    return (
        "  <page>\n"
        f"    <title>{title}</title>\n"
        f"    <ns>{ns}</ns>\n"
        f"{redirect_tag}"
        "    <revision>\n"
        f'      <text xml:space="preserve">{text}</text>\n'
        "    </revision>\n"
        "  </page>\n"
    )


def write_dump(path: Path, pages: Iterable[str]) -> Path:
    path.write_text(
        "<mediawiki>\n" + "".join(pages) + "</mediawiki>\n", encoding="utf-8"
    )
    return path


@pytest.fixture()
def corpus() -> db.Bag:
    return make_docs(CORPUS)


@pytest.fixture()
def doc_freqs_path(tmp_path: Path) -> str:
    return str(tmp_path / "docfreqs.tsv")
