"""Serve queries from an immutable index snapshot that rebuilds swap out whole."""

from collections.abc import Iterable
from pathlib import Path
import threading

from littlesearch.build import build_index, make_index
from littlesearch.data_models.keyword_index import KeywordIndex
from littlesearch.search import DEFAULT_TOP_K, top_k
from littlesearch.sources import DocumentSource


class SearchEngine:
    def __init__(self, index: KeywordIndex | None = None) -> None:
        self._index = index if index is not None else _empty_index()
        self._lock = threading.Lock()

    @property
    def index(self) -> KeywordIndex:
        return self._index

    def rebuild(
        self, doc_ids: Iterable[str], noise_words: Iterable[str], source: DocumentSource
    ) -> KeywordIndex:
        """Build a fresh index and swap it in. On failure the old one stays."""
        index = build_index(doc_ids, noise_words, source)
        self._swap(index)
        return index

    def rebuild_from_files(
        self, docs_file: Path, noise_words_file: Path, docs_dir: Path | None = None
    ) -> KeywordIndex:
        index = make_index(docs_file, noise_words_file, docs_dir)
        self._swap(index)
        return index

    def top_k(self, keyword1: str, keyword2: str, k: int = DEFAULT_TOP_K) -> list[str]:
        return top_k(self._index, keyword1, keyword2, k)

    def _swap(self, index: KeywordIndex) -> None:
        with self._lock:
            self._index = index


def _empty_index() -> KeywordIndex:
    index = KeywordIndex()
    index.seal()
    return index
