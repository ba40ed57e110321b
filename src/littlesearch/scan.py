"""Count keywords in a single document."""

from collections.abc import Iterable

from littlesearch.data_models.occurrence import Occurrence
from littlesearch.normalize import Normalizer


def scan_document(
    doc_id: str, tokens: Iterable[str], normalizer: Normalizer
) -> dict[str, Occurrence]:
    """Return keyword -> Occurrence(doc_id, count) for every keyword in tokens.

    Counts accumulate in a table private to this call; Occurrences are only built
    once the final counts are known.
    """
    counts: dict[str, int] = {}
    for token in tokens:
        keyword = normalizer.normalize(token)
        if keyword is None:
            continue
        counts[keyword] = counts.get(keyword, 0) + 1
    return {
        keyword: Occurrence(doc_id=doc_id, frequency=n)
        for keyword, n in counts.items()
    }
