"""Per-keyword occurrence list kept in descending frequency order."""

from collections.abc import Iterator

from littlesearch.data_models.occurrence import Occurrence


def insert_last(occurrences: list[Occurrence]) -> list[int]:
    """Move the last element into place, keeping frequencies non-increasing.

    occurrences[0..n-2] must already be sorted. The new element lands after every
    existing entry with the same frequency, so earlier insertions keep their rank.

    Returns the midpoint indices probed by the binary search, in order:

    freqs [5, 4, 3, 2, 1] + 3  -> probes [2, 3], lands at index 3
    freqs [3] + 3              -> probes [0], lands at index 1
    freqs []  + 3              -> probes []
    """
    probes: list[int] = []
    if len(occurrences) < 2:
        return probes

    target = occurrences[-1].frequency
    lo, hi = 0, len(occurrences) - 2
    while lo <= hi:
        mid = (lo + hi) // 2
        probes.append(mid)
        if occurrences[mid].frequency >= target:
            lo = mid + 1
        else:
            hi = mid - 1

    if lo < len(occurrences) - 1:
        occurrences.insert(lo, occurrences.pop())
    return probes


class RankedOccurrenceList:
    def __init__(self) -> None:
        self._occurrences: list[Occurrence] = []
        self._doc_ids: set[str] = set()
        self._sealed = False

    def seal(self) -> None:
        self._sealed = True

    def add(self, occurrence: Occurrence) -> list[int]:
        """Append occurrence and move it to its rank. Returns the probed midpoints."""
        if self._sealed:
            raise RuntimeError("RankedOccurrenceList is read-only once built")
        if occurrence.doc_id in self._doc_ids:
            raise ValueError(f"Document already listed: {occurrence.doc_id!r}")
        self._doc_ids.add(occurrence.doc_id)
        self._occurrences.append(occurrence)
        return insert_last(self._occurrences)

    def doc_ids(self) -> list[str]:
        return [o.doc_id for o in self._occurrences]

    def frequencies(self) -> list[int]:
        return [o.frequency for o in self._occurrences]

    def __len__(self) -> int:
        return len(self._occurrences)

    def __getitem__(self, idx: int) -> Occurrence:
        return self._occurrences[idx]

    def __iter__(self) -> Iterator[Occurrence]:
        return iter(self._occurrences)

    def __repr__(self) -> str:
        inner = ", ".join(f"({o.doc_id},{o.frequency})" for o in self._occurrences)
        return f"RankedOccurrenceList([{inner}])"
