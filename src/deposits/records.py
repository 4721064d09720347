# This module holds the in-memory record store for the deposits leaderboard.
# It exists so the seeded institutions and the single deposits update live in one place.
# Records are frozen and collections are tuples, so every update produces a new snapshot.
# Rank is stored as captured and is never recomputed after a deposits change.

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Final

LOGGER = logging.getLogger("deposits")

CATEGORY_INSTITUTION: Final[str] = "institution"
CATEGORY_PROTOCOL: Final[str] = "protocol"
VALID_CATEGORIES: Final[frozenset[str]] = frozenset({CATEGORY_INSTITUTION, CATEGORY_PROTOCOL})

PROTOCOL_NAME: Final[str] = "Aave"


@dataclass(frozen=True)
class InstitutionRecord:
    """One leaderboard row; `deposits` is in US$ billions."""

    rank: int
    name: str
    deposits: float
    category: str

    def __post_init__(self) -> None:
        if isinstance(self.rank, bool) or not isinstance(self.rank, int) or self.rank < 1:
            raise ValueError(f"rank must be a positive integer, got: {self.rank!r}")
        if not self.name:
            raise ValueError("name must be non-empty")
        if not math.isfinite(self.deposits) or self.deposits < 0:
            raise ValueError(f"deposits must be a finite non-negative number, got: {self.deposits!r}")
        if self.category not in VALID_CATEGORIES:
            supported = ", ".join(sorted(VALID_CATEGORIES))
            raise ValueError(f"Unsupported category '{self.category}'. Supported categories: {supported}")

    @property
    def is_protocol(self) -> bool:
        return self.category == CATEGORY_PROTOCOL


SEED_RECORDS: Final[tuple[InstitutionRecord, ...]] = (
    InstitutionRecord(rank=37, name="UMB BK NA/UMB FC", deposits=69.014, category=CATEGORY_INSTITUTION),
    InstitutionRecord(rank=38, name=PROTOCOL_NAME, deposits=67.921, category=CATEGORY_PROTOCOL),
    InstitutionRecord(
        rank=39, name="SouthState BK NA/SouthState CORP", deposits=65.109, category=CATEGORY_INSTITUTION
    ),
    InstitutionRecord(rank=40, name="Valley NB/Valley NAT BC", deposits=61.818, category=CATEGORY_INSTITUTION),
    InstitutionRecord(rank=41, name="CIBC BK USA/CIBC BC USA", deposits=61.303, category=CATEGORY_INSTITUTION),
    InstitutionRecord(rank=42, name="Synovus BK/Synovus FC", deposits=60.208, category=CATEGORY_INSTITUTION),
    InstitutionRecord(
        rank=43, name="Pinnacle BK/Pinnacle FNCL PTNR", deposits=54.473, category=CATEGORY_INSTITUTION
    ),
)


def seed_records() -> tuple[InstitutionRecord, ...]:
    """Return the fixed reference collection."""

    return SEED_RECORDS


def validate_collection(records: Sequence[InstitutionRecord]) -> None:
    """Reject collections whose ranks or names are not unique."""

    ranks = [record.rank for record in records]
    names = [record.name for record in records]
    duplicate_ranks = sorted({rank for rank in ranks if ranks.count(rank) > 1})
    duplicate_names = sorted({name for name in names if names.count(name) > 1})
    if duplicate_ranks:
        raise ValueError(f"Duplicate ranks in collection: {duplicate_ranks}")
    if duplicate_names:
        raise ValueError(f"Duplicate names in collection: {duplicate_names}")


def find_record(records: Iterable[InstitutionRecord], name: str) -> InstitutionRecord | None:
    for record in records:
        if record.name == name:
            return record
    return None


def update_deposits(
    records: Sequence[InstitutionRecord],
    *,
    target_name: str,
    new_value: float,
) -> tuple[InstitutionRecord, ...]:
    """Return a copy of `records` with the named record's deposits replaced.

    Unmatched names leave the collection unchanged. Input validation is the
    caller's job; see `src.deposits.input_parsing`.
    """

    matched = False
    updated: list[InstitutionRecord] = []
    for record in records:
        if record.name == target_name:
            updated.append(replace(record, deposits=float(new_value)))
            matched = True
        else:
            updated.append(record)

    if matched:
        LOGGER.info("deposits updated name=%s deposits=%s", target_name, new_value)
    else:
        LOGGER.debug("deposits update skipped, no record named %r", target_name)
    return tuple(updated)

