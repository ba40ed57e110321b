"""Build a keyword index over a list of plain-text documents.

Usage:
    python -m littlesearch.build \\
        --docs docs.txt --noise-words noisewords.txt [--docs-dir corpus/] [--top-n 20]
"""

import argparse
from collections.abc import Iterable
from pathlib import Path
import sys

from littlesearch.data_models.keyword_index import KeywordIndex
from littlesearch.errors import IndexBuildError
from littlesearch.normalize import Normalizer
from littlesearch.scan import scan_document
from littlesearch.sources import (
    DocumentSource,
    FileDocumentSource,
    read_doc_list,
    read_noise_words,
)


def build_index(
    doc_ids: Iterable[str], noise_words: Iterable[str], source: DocumentSource
) -> KeywordIndex:
    """Scan each document in order and merge its keywords into a fresh index.

    Order matters only for ties: with equal frequency for a keyword, the document
    processed first ranks first. Any source error propagates and the partially
    merged index is discarded.
    """
    normalizer = Normalizer(noise_words)
    index = KeywordIndex()
    for doc_id in doc_ids:
        table = scan_document(doc_id, source.tokens(doc_id), normalizer)
        index.merge(table)
    index.seal()
    return index


def make_index(
    docs_file: Path, noise_words_file: Path, docs_dir: Path | None = None
) -> KeywordIndex:
    """Build from a document-list file and a noise-word file.

    Document names resolve against docs_dir, defaulting to the directory that
    holds docs_file.
    """
    doc_ids, noise_words, source = load_sources(docs_file, noise_words_file, docs_dir)
    return build_index(doc_ids, noise_words, source)


def load_sources(
    docs_file: Path, noise_words_file: Path, docs_dir: Path | None = None
) -> tuple[list[str], frozenset[str], FileDocumentSource]:
    noise_words = read_noise_words(noise_words_file)
    doc_ids = read_doc_list(docs_file)
    base_dir = docs_dir if docs_dir is not None else docs_file.parent
    return doc_ids, noise_words, FileDocumentSource(base_dir)


def add_source_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--docs", required=True, help="File listing document names, in index order"
    )
    parser.add_argument(
        "--noise-words", required=True, help="File of whitespace-separated noise words"
    )
    parser.add_argument(
        "--docs-dir",
        default=None,
        help="Directory document names resolve against (default: beside --docs)",
    )


def index_from_args(args: argparse.Namespace) -> KeywordIndex:
    docs_dir = Path(args.docs_dir) if args.docs_dir else None
    try:
        doc_ids, noise_words, source = load_sources(
            Path(args.docs), Path(args.noise_words), docs_dir
        )
        print(f"Loaded {len(doc_ids)} docs and {len(noise_words)} noise words")
        return build_index(doc_ids, noise_words, source)
    except IndexBuildError as exc:
        print(f"Build failed: {exc}")
        sys.exit(1)


def main() -> None:
    parser = argparse.ArgumentParser(description="Build a keyword index")
    add_source_args(parser)
    parser.add_argument(
        "--top-n", type=int, default=20, help="Keywords to show in the summary"
    )
    args = parser.parse_args()

    print(f"Indexing documents listed in {args.docs}...")
    index = index_from_args(args)
    flat = index.to_polars()
    n_docs = flat["doc_id"].n_unique() if len(flat) else 0
    print(f"Indexed {len(index)} keywords, {len(flat)} occurrences, {n_docs} docs")
    print(index.summary().head(args.top_n))


if __name__ == "__main__":
    main()
