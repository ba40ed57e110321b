from pydantic import ValidationError
import pytest

from littlesearch.data_models.occurrence import Occurrence
from littlesearch.data_models.ranked_list import RankedOccurrenceList, insert_last


def _occs(*freqs: int) -> list[Occurrence]:
    return [Occurrence(doc_id=f"d{i}", frequency=f) for i, f in enumerate(freqs)]


def _with_new(prefix: list[Occurrence], freq: int) -> list[Occurrence]:
    return prefix + [Occurrence(doc_id="new", frequency=freq)]


def test_single_element_no_probes() -> None:
    occs = _with_new([], 3)
    assert insert_last(occs) == []
    assert [o.doc_id for o in occs] == ["new"]


def test_singleton_prefix_equal_goes_after() -> None:
    occs = _with_new(_occs(3), 3)
    assert insert_last(occs) == [0]
    assert [o.doc_id for o in occs] == ["d0", "new"]


def test_singleton_prefix_larger_goes_first() -> None:
    occs = _with_new(_occs(3), 4)
    assert insert_last(occs) == [0]
    assert [o.doc_id for o in occs] == ["new", "d0"]


def test_smaller_than_all_stays_last() -> None:
    occs = _with_new(_occs(5, 4, 3, 2, 1), 0)
    assert insert_last(occs) == [2, 3, 4]
    assert occs[-1].doc_id == "new"


def test_larger_than_all_goes_first() -> None:
    occs = _with_new(_occs(5, 4, 3, 2, 1), 6)
    assert insert_last(occs) == [2, 0]
    assert occs[0].doc_id == "new"
    assert [o.frequency for o in occs] == [6, 5, 4, 3, 2, 1]


def test_equal_lands_after_equal_run() -> None:
    occs = _with_new(_occs(5, 3, 3, 3, 1), 3)
    insert_last(occs)
    assert [o.doc_id for o in occs] == ["d0", "d1", "d2", "d3", "new", "d4"]


def test_middle_insert_probes() -> None:
    occs = _with_new(_occs(5, 4, 3, 2, 1), 3)
    assert insert_last(occs) == [2, 3]
    assert [o.frequency for o in occs] == [5, 4, 3, 3, 2, 1]
    assert occs[3].doc_id == "new"


def test_add_keeps_invariant() -> None:
    ranked = RankedOccurrenceList()
    for i, freq in enumerate([2, 7, 2, 9, 1, 7]):
        ranked.add(Occurrence(doc_id=f"d{i}", frequency=freq))

    assert ranked.frequencies() == [9, 7, 7, 2, 2, 1]
    assert ranked.doc_ids() == ["d3", "d1", "d5", "d0", "d2", "d4"]


def test_add_rejects_duplicate_document() -> None:
    ranked = RankedOccurrenceList()
    ranked.add(Occurrence(doc_id="d1", frequency=2))
    with pytest.raises(ValueError):
        ranked.add(Occurrence(doc_id="d1", frequency=5))
    assert len(ranked) == 1


def test_occurrence_is_frozen() -> None:
    occ = Occurrence(doc_id="d1", frequency=1)
    with pytest.raises(ValidationError):
        occ.frequency = 2  # type: ignore[misc]


def test_occurrence_rejects_negative_frequency() -> None:
    with pytest.raises(ValidationError):
        Occurrence(doc_id="d1", frequency=-3)
    assert Occurrence(doc_id="d1", frequency=0).frequency == 0
