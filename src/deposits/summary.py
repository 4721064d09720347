# This module computes the headline figures shown under the leaderboard.
# It reads the full record store, never the filtered or sorted view, so view changes cannot move these numbers.
# Values are returned raw; formatting is left to the dashboard layer.

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from src.deposits.records import CATEGORY_INSTITUTION, InstitutionRecord, find_record


@dataclass(frozen=True)
class SummaryStats:
    protocol_deposits: float | None
    protocol_rank: int | None
    institution_count: int


def compute_summary(records: Iterable[InstitutionRecord], *, protocol_name: str) -> SummaryStats:
    snapshot = tuple(records)
    protocol = find_record(snapshot, protocol_name)
    return SummaryStats(
        protocol_deposits=protocol.deposits if protocol is not None else None,
        protocol_rank=protocol.rank if protocol is not None else None,
        institution_count=sum(1 for record in snapshot if record.category == CATEGORY_INSTITUTION),
    )
