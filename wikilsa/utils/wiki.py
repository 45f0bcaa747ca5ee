import os
import re
import dask
import dask.bag as db
from bs4 import BeautifulSoup
from typing import Optional
from wikilsa import schemas
from wikilsa.core import config

_READ_SIZE = 1024 * 1024

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_REF_RE = re.compile(r"<ref[^>/]*/>|<ref[^>]*>.*?</ref>", re.DOTALL | re.IGNORECASE)
_TEMPLATE_RE = re.compile(r"\{\{[^{}]*\}\}")
_TABLE_RE = re.compile(r"\{\|.*?\|\}", re.DOTALL)
_NAMESPACED_LINK_RE = re.compile(
    r"\[\[(?:File|Image|Category|[a-z]{2,3}(?:-[a-z]+)?):[^\[\]]*(?:\[\[[^\[\]]*\]\][^\[\]]*)*\]\]",
    re.IGNORECASE,
)
_PIPED_LINK_RE = re.compile(r"\[\[[^\[\]|]*\|([^\[\]]*)\]\]")
_LINK_RE = re.compile(r"\[\[([^\[\]]*)\]\]")
_EXTERNAL_LINK_RE = re.compile(r"\[https?://[^\s\]]+\s*([^\]]*)\]")
_HEADING_RE = re.compile(r"^=+\s*(.*?)\s*=+\s*$", re.MULTILINE)
_EMPHASIS_RE = re.compile(r"'{2,}")
_TAG_RE = re.compile(r"<[^>]+>")
_DISAMBIGUATION_RE = re.compile(
    r"\{\{\s*(disambig|disambiguation|dab|hndis|geodis)\b",
    re.IGNORECASE,
)


def _read_block(
    path: str, offset: int, length: int, start_tag: bytes, end_tag: bytes
) -> list[str]:
    """Returns the records whose start tag begins inside [offset, offset + length)."""
    records: list[str] = []
    with open(path, "rb") as f:
        f.seek(offset)
        # a start tag may straddle the end of the block
        data = f.read(length + len(start_tag) - 1)
        pos = 0
        while True:
            begin = data.find(start_tag, pos)
            if begin == -1 or begin >= length:
                break

            end = data.find(end_tag, begin + len(start_tag))
            while end == -1:
                more = f.read(_READ_SIZE)
                if not more:
                    break
                searched = max(begin + len(start_tag), len(data) - len(end_tag) + 1)
                data += more
                end = data.find(end_tag, searched)
            if end == -1:
                # unterminated record at end of file
                break

            stop = end + len(end_tag)
            records.append(data[begin:stop].decode("utf-8", errors="replace"))
            pos = stop

    return records


def read_records(
    path: str,
    start_tag: str = config.PAGE_START_TAG,
    end_tag: str = config.PAGE_END_TAG,
    blocksize: int = config.DUMP_BLOCKSIZE,
) -> db.Bag:
    """Split an XML dump into a bag of raw records delimited by start_tag and end_tag."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Dump file not found: {path}")
    if not blocksize > 0:
        raise ValueError("blocksize must be a positive integer.")
    if not start_tag or not end_tag:
        raise ValueError("start_tag and end_tag must be non-empty.")

    size = os.path.getsize(path)
    start_bytes, end_bytes = start_tag.encode("utf-8"), end_tag.encode("utf-8")

    read = dask.delayed(_read_block, pure=True)
    blocks = [
        read(path, offset, min(blocksize, size - offset), start_bytes, end_bytes)
        for offset in range(0, size, blocksize)
    ]
    if not blocks:
        return db.from_sequence([], npartitions=1)
    return db.from_delayed(blocks)


def strip_wiki_markup(text: str) -> str:
    text = _COMMENT_RE.sub("", text)
    text = _REF_RE.sub("", text)
    text = _TABLE_RE.sub("", text)

    # templates nest, so peel them from the inside out
    while True:
        stripped = _TEMPLATE_RE.sub("", text)
        if stripped == text:
            break
        text = stripped

    text = _NAMESPACED_LINK_RE.sub("", text)
    text = _PIPED_LINK_RE.sub(r"\1", text)
    text = _LINK_RE.sub(r"\1", text)
    text = _EXTERNAL_LINK_RE.sub(r"\1", text)
    text = _HEADING_RE.sub(r"\1", text)
    text = _EMPHASIS_RE.sub("", text)
    text = _TAG_RE.sub("", text)
    return text.strip()


def wiki_xml_to_plain_text(page_xml: str) -> Optional[schemas.Page]:
    """Returns None for pages that are empty, not articles, redirects or disambiguations."""
    page = BeautifulSoup(page_xml, "xml")

    ns_tag = page.find("ns")
    if ns_tag is not None and ns_tag.get_text().strip() != "0":
        return None

    if page.find("redirect") is not None:
        return None

    text_tag = page.find("text")
    if text_tag is None:
        return None
    raw_text = text_tag.get_text()
    if not raw_text.strip() or raw_text.lstrip().upper().startswith("#REDIRECT"):
        return None

    title_tag = page.find("title")
    title = title_tag.get_text().strip() if title_tag is not None else ""
    if "(disambiguation)" in title.lower() or _DISAMBIGUATION_RE.search(raw_text):
        return None

    contents = strip_wiki_markup(raw_text)
    if not contents:
        return None

    return schemas.Page(title=title, contents=contents)
