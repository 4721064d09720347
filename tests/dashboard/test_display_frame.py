# This test file validates how table rows are shaped for display.
# It exists so the rank and currency strings, the protocol badge, and row highlighting stay aligned.

from __future__ import annotations

from src.dashboard.components.tables import build_display_frame, protocol_row_mask
from src.deposits.records import InstitutionRecord
from src.deposits.view_pipeline import ViewParameters, build_view


def test_display_frame_columns_and_values(seed: tuple[InstitutionRecord, ...]) -> None:
    view = build_view(seed, ViewParameters())

    frame = build_display_frame(view.table_rows)

    assert list(frame.columns) == ["Rank", "Name", "Deposits", "Type"]
    assert frame.iloc[0].tolist() == ["#37", "UMB BK NA/UMB FC", "$69.014B", "Traditional Bank"]
    assert frame.iloc[1]["Name"] == "Aave  [DeFi]"
    assert frame.iloc[1]["Type"] == "DeFi Protocol"


def test_protocol_row_mask_follows_view_order(seed: tuple[InstitutionRecord, ...]) -> None:
    view = build_view(seed, ViewParameters(sort_field="deposits", sort_direction="asc"))

    mask = protocol_row_mask(view.table_rows)

    assert mask == [False, False, False, False, False, True, False]


def test_empty_display_frame() -> None:
    frame = build_display_frame(())

    assert frame.empty
    assert list(frame.columns) == ["Rank", "Name", "Deposits", "Type"]
