# This file runs deterministic checks for the leaderboard view pipeline.
# It exists so the reference scenarios for sorting, filtering, editing, and chart labels stay pinned.
# The script is lightweight and can run in CI or local preflight steps.
# ruff: noqa: E402

from __future__ import annotations

import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.deposits.records import find_record, seed_records, update_deposits
from src.deposits.view_pipeline import (
    FILTER_RANK_WINDOW,
    RankWindow,
    filter_records,
    sort_records,
    truncate_label,
)


def main() -> int:
    seed = seed_records()
    by_rank = sort_records(seed, sort_field="rank", sort_direction="asc")
    by_deposits = sort_records(seed, sort_field="deposits", sort_direction="desc")
    windowed = filter_records(seed, filter_mode=FILTER_RANK_WINDOW, rank_window=RankWindow(35, 45))
    updated = update_deposits(seed, target_name="Aave", new_value=75.5)
    aave = find_record(updated, "Aave")

    checks = [
        (
            [record.rank for record in by_rank] == [37, 38, 39, 40, 41, 42, 43],
            "rank ascending must yield 37..43 in order",
        ),
        (len(windowed) == len(seed), "rank window 35-45 must keep all seed records"),
        (aave is not None and aave.deposits == 75.5, "Aave deposits must read back as 75.5"),
        (
            all(
                after.deposits == before.deposits
                for before, after in zip(seed, updated, strict=True)
                if before.name != "Aave"
            ),
            "non-Aave deposits must be unchanged after an update",
        ),
        (
            by_deposits[0].name == "UMB BK NA/UMB FC" and by_deposits[-1].name == "Pinnacle BK/Pinnacle FNCL PTNR",
            "deposits descending must start with UMB and end with Pinnacle",
        ),
        (truncate_label("A" * 15) == "A" * 15, "15-character names must not be truncated"),
        (truncate_label("A" * 16) == "A" * 15 + "...", "16-character names must be truncated to 15 + '...'"),
    ]

    failures = [message for passed, message in checks if not passed]
    if failures:
        for failure in failures:
            print(f"FAIL: {failure}")
        return 1

    print("View pipeline checks passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
