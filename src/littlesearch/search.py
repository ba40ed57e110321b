"""Two-keyword ranked search: "kw1 or kw2", best documents first.

Usage:
    python -m littlesearch.search \\
        --docs docs.txt --noise-words noisewords.txt KW1 KW2 [--k 5]
"""

import argparse

from littlesearch.build import add_source_args, index_from_args
from littlesearch.data_models.keyword_index import KeywordIndex
from littlesearch.data_models.occurrence import Occurrence
from littlesearch.normalize import Normalizer

DEFAULT_TOP_K = 5


def top_k(
    index: KeywordIndex, keyword1: str, keyword2: str, k: int = DEFAULT_TOP_K
) -> list[str]:
    """Return up to k documents containing keyword1 or keyword2.

    Heads of the two ranked lists are compared; the higher frequency is emitted,
    keyword1 wins ties. A document already emitted is skipped and does not count
    toward k. A keyword missing from the index contributes nothing.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    first: list[Occurrence] = list(index.get(keyword1) or ())
    second: list[Occurrence] = list(index.get(keyword2) or ())

    result: list[str] = []
    seen: set[str] = set()
    i = j = 0
    while len(result) < k and (i < len(first) or j < len(second)):
        if i < len(first) and first[i].doc_id in seen:
            i += 1
            continue
        if j < len(second) and second[j].doc_id in seen:
            j += 1
            continue
        if j >= len(second) or (
            i < len(first) and first[i].frequency >= second[j].frequency
        ):
            doc_id = first[i].doc_id
            i += 1
        else:
            doc_id = second[j].doc_id
            j += 1
        result.append(doc_id)
        seen.add(doc_id)
    return result


def search_words(
    index: KeywordIndex, word1: str, word2: str, k: int = DEFAULT_TOP_K
) -> list[str]:
    """top_k for raw query words, normalized the way document tokens are.

    A word that is not a keyword ("can't", "...") matches nothing.
    """
    normalizer = Normalizer()
    kw1 = normalizer.normalize(word1) or ""
    kw2 = normalizer.normalize(word2) or ""
    return top_k(index, kw1, kw2, k)


def main() -> None:
    parser = argparse.ArgumentParser(description="Search for kw1 or kw2")
    add_source_args(parser)
    parser.add_argument("keyword1")
    parser.add_argument("keyword2")
    parser.add_argument("--k", type=int, default=DEFAULT_TOP_K)
    args = parser.parse_args()

    index = index_from_args(args)
    results = search_words(index, args.keyword1, args.keyword2, args.k)
    if not results:
        print(f"No documents match {args.keyword1!r} or {args.keyword2!r}")
        return
    for rank, doc_id in enumerate(results, 1):
        print(f"{rank:2d}. {doc_id}")


if __name__ == "__main__":
    main()
