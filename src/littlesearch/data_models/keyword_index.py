"""Keyword -> RankedOccurrenceList mapping built once, then sealed read-only."""

from collections.abc import Iterator, Mapping

import polars as pl

from littlesearch.data_models.occurrence import Occurrence
from littlesearch.data_models.ranked_list import RankedOccurrenceList

_SCHEMA = {
    "keyword": pl.String,
    "rank": pl.Int64,
    "doc_id": pl.String,
    "frequency": pl.Int64,
}

_SUMMARY_SCHEMA = {
    "keyword": pl.String,
    "n_docs": pl.Int64,
    "total_frequency": pl.Int64,
}


class KeywordIndex:
    def __init__(self) -> None:
        self._lists: dict[str, RankedOccurrenceList] = {}
        self._sealed = False

    def merge(self, table: Mapping[str, Occurrence]) -> None:
        """Place each of one document's occurrences into its keyword's list."""
        if self._sealed:
            raise RuntimeError("KeywordIndex is read-only once built")
        for keyword, occurrence in table.items():
            ranked = self._lists.get(keyword)
            if ranked is None:
                ranked = RankedOccurrenceList()
                self._lists[keyword] = ranked
            ranked.add(occurrence)

    def seal(self) -> None:
        for ranked in self._lists.values():
            ranked.seal()
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def get(self, keyword: str) -> RankedOccurrenceList | None:
        return self._lists.get(keyword)

    def keywords(self) -> list[str]:
        return sorted(self._lists)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._lists

    def __len__(self) -> int:
        return len(self._lists)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lists)

    def to_polars(self) -> pl.DataFrame:
        """One row per occurrence; rank is the 0-based position in its list."""
        rows = [
            (keyword, rank, o.doc_id, o.frequency)
            for keyword in self.keywords()
            for rank, o in enumerate(self._lists[keyword])
        ]
        if not rows:
            return pl.DataFrame(schema=_SCHEMA)
        return pl.DataFrame(rows, schema=_SCHEMA, orient="row")

    def summary(self) -> pl.DataFrame:
        """Per-keyword document count and total frequency, most frequent first."""
        flat = self.to_polars()
        if flat.is_empty():
            return pl.DataFrame(schema=_SUMMARY_SCHEMA)
        return (
            flat.group_by("keyword")
            .agg(
                pl.len().cast(pl.Int64).alias("n_docs"),
                pl.col("frequency").sum().alias("total_frequency"),
            )
            .sort(["total_frequency", "keyword"], descending=[True, False])
        )
