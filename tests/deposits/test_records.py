# This test file validates the seeded record store and the single deposits update.
# It exists so the reference data and the copy-on-update contract stay stable.
# The checks cover lookup misses, unchanged neighbours, and the static rank field.

from __future__ import annotations

import pytest

from src.deposits.records import (
    CATEGORY_INSTITUTION,
    CATEGORY_PROTOCOL,
    SEED_RECORDS,
    InstitutionRecord,
    find_record,
    update_deposits,
    validate_collection,
)


def test_seed_has_seven_unique_records(seed: tuple[InstitutionRecord, ...]) -> None:
    assert len(seed) == 7
    validate_collection(seed)
    assert [record.category for record in seed].count(CATEGORY_PROTOCOL) == 1
    assert seed is SEED_RECORDS


def test_update_deposits_reads_back_and_keeps_other_records(seed: tuple[InstitutionRecord, ...]) -> None:
    updated = update_deposits(seed, target_name="Aave", new_value=75.5)

    aave = find_record(updated, "Aave")
    assert aave is not None
    assert aave.deposits == 75.5
    assert len(updated) == len(seed)
    for before, after in zip(seed, updated, strict=True):
        if before.name != "Aave":
            assert after is before
    assert find_record(seed, "Aave").deposits == 67.921


def test_update_deposits_changes_exactly_one_record(seed: tuple[InstitutionRecord, ...]) -> None:
    updated = update_deposits(seed, target_name="Valley NB/Valley NAT BC", new_value=1.0)

    changed = [after for before, after in zip(seed, updated, strict=True) if after.deposits != before.deposits]
    assert [record.name for record in changed] == ["Valley NB/Valley NAT BC"]


def test_update_deposits_unknown_name_is_a_no_op(seed: tuple[InstitutionRecord, ...]) -> None:
    updated = update_deposits(seed, target_name="Compound", new_value=10.0)

    assert updated == seed
    assert len(updated) == len(seed)


def test_rank_is_not_recomputed_after_update(seed: tuple[InstitutionRecord, ...]) -> None:
    updated = update_deposits(seed, target_name="Aave", new_value=500.0)

    assert find_record(updated, "Aave").rank == 38


@pytest.mark.parametrize(
    "kwargs",
    [
        {"rank": 0, "name": "Bank", "deposits": 1.0, "category": CATEGORY_INSTITUTION},
        {"rank": 1, "name": "", "deposits": 1.0, "category": CATEGORY_INSTITUTION},
        {"rank": 1, "name": "Bank", "deposits": -1.0, "category": CATEGORY_INSTITUTION},
        {"rank": 1, "name": "Bank", "deposits": float("nan"), "category": CATEGORY_INSTITUTION},
        {"rank": 1, "name": "Bank", "deposits": 1.0, "category": "credit_union"},
    ],
)
def test_invalid_record_fields_raise(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        InstitutionRecord(**kwargs)


def test_validate_collection_rejects_duplicates() -> None:
    records = (
        InstitutionRecord(rank=1, name="A", deposits=1.0, category=CATEGORY_INSTITUTION),
        InstitutionRecord(rank=1, name="B", deposits=2.0, category=CATEGORY_INSTITUTION),
    )
    with pytest.raises(ValueError, match="Duplicate ranks"):
        validate_collection(records)

    records = (
        InstitutionRecord(rank=1, name="A", deposits=1.0, category=CATEGORY_INSTITUTION),
        InstitutionRecord(rank=2, name="A", deposits=2.0, category=CATEGORY_INSTITUTION),
    )
    with pytest.raises(ValueError, match="Duplicate names"):
        validate_collection(records)

