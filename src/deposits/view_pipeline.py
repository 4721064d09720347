# This module derives table rows and chart points from the record store and the view parameters.
# It exists so sorting, filtering, and chart projection share one deterministic implementation.
# Every function is pure: the same records and parameters always produce the same view.
# Sorting is stable in both directions so tied keys keep their input order.

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Final

import pandas as pd

from src.deposits.records import InstitutionRecord

SORT_FIELD_RANK: Final[str] = "rank"
SORT_FIELD_DEPOSITS: Final[str] = "deposits"
SORT_FIELDS: Final[tuple[str, ...]] = (SORT_FIELD_RANK, SORT_FIELD_DEPOSITS)

SORT_ASCENDING: Final[str] = "asc"
SORT_DESCENDING: Final[str] = "desc"
SORT_DIRECTIONS: Final[tuple[str, ...]] = (SORT_ASCENDING, SORT_DESCENDING)

FILTER_ALL: Final[str] = "all"
FILTER_RANK_WINDOW: Final[str] = "rank_window"
FILTER_MODES: Final[tuple[str, ...]] = (FILTER_ALL, FILTER_RANK_WINDOW)

DEFAULT_CHART_TOP_N: Final[int] = 5
DEFAULT_LABEL_MAX_CHARS: Final[int] = 15
ELLIPSIS_MARKER: Final[str] = "..."

PROTOCOL_TYPE_LABEL: Final[str] = "DeFi Protocol"
INSTITUTION_TYPE_LABEL: Final[str] = "Traditional Bank"

# Wide enough for any finite float with its fractional digits.
_WIDE_CONTEXT: Final[Context] = Context(prec=400)


@dataclass(frozen=True)
class RankWindow:
    lower: int = 35
    upper: int = 45

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise ValueError(f"rank window lower bound {self.lower} exceeds upper bound {self.upper}")

    def contains(self, rank: int) -> bool:
        return self.lower <= rank <= self.upper

    @property
    def as_text(self) -> str:
        return f"{self.lower}-{self.upper}"


@dataclass(frozen=True)
class ViewParameters:
    sort_field: str = SORT_FIELD_RANK
    sort_direction: str = SORT_ASCENDING
    filter_mode: str = FILTER_ALL

    def __post_init__(self) -> None:
        if self.sort_field not in SORT_FIELDS:
            supported = ", ".join(SORT_FIELDS)
            raise ValueError(f"Unsupported sort field '{self.sort_field}'. Supported fields: {supported}")
        if self.sort_direction not in SORT_DIRECTIONS:
            raise ValueError("sort direction must be 'asc' or 'desc'")
        if self.filter_mode not in FILTER_MODES:
            supported = ", ".join(FILTER_MODES)
            raise ValueError(f"Unsupported filter mode '{self.filter_mode}'. Supported modes: {supported}")


@dataclass(frozen=True)
class TableRow:
    rank: int
    name: str
    deposits: str
    category: str
    type_label: str


@dataclass(frozen=True)
class ChartPoint:
    label: str
    value: float
    highlight: bool


@dataclass(frozen=True)
class DashboardView:
    rows: tuple[InstitutionRecord, ...]
    table_rows: tuple[TableRow, ...]
    chart: tuple[ChartPoint, ...]


def filter_records(
    records: Iterable[InstitutionRecord],
    *,
    filter_mode: str,
    rank_window: RankWindow,
) -> tuple[InstitutionRecord, ...]:
    if filter_mode == FILTER_RANK_WINDOW:
        return tuple(record for record in records if rank_window.contains(record.rank))
    if filter_mode == FILTER_ALL:
        return tuple(records)
    raise ValueError(f"Unsupported filter mode '{filter_mode}'")


def sort_records(
    records: Iterable[InstitutionRecord],
    *,
    sort_field: str,
    sort_direction: str,
) -> tuple[InstitutionRecord, ...]:
    if sort_field not in SORT_FIELDS:
        raise ValueError(f"Unsupported sort field '{sort_field}'")
    if sort_direction not in SORT_DIRECTIONS:
        raise ValueError("sort direction must be 'asc' or 'desc'")

    # sorted() keeps ties in input order even with reverse=True.
    return tuple(
        sorted(
            records,
            key=lambda record: getattr(record, sort_field),
            reverse=sort_direction == SORT_DESCENDING,
        )
    )


def format_fixed(value: float, digits: int = 3) -> str:
    """Fixed-point text with ties rounded away from zero on the exact binary value."""

    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_WIDE_CONTEXT))


def truncate_label(name: str, max_chars: int = DEFAULT_LABEL_MAX_CHARS) -> str:
    if len(name) > max_chars:
        return name[:max_chars] + ELLIPSIS_MARKER
    return name


def type_label(record: InstitutionRecord) -> str:
    return PROTOCOL_TYPE_LABEL if record.is_protocol else INSTITUTION_TYPE_LABEL


def build_table_rows(records: Iterable[InstitutionRecord]) -> tuple[TableRow, ...]:
    return tuple(
        TableRow(
            rank=record.rank,
            name=record.name,
            deposits=format_fixed(record.deposits),
            category=record.category,
            type_label=type_label(record),
        )
        for record in records
    )


def build_chart_points(
    records: Sequence[InstitutionRecord],
    *,
    top_n: int = DEFAULT_CHART_TOP_N,
    label_max_chars: int = DEFAULT_LABEL_MAX_CHARS,
) -> tuple[ChartPoint, ...]:
    return tuple(
        ChartPoint(
            label=truncate_label(record.name, label_max_chars),
            value=record.deposits,
            highlight=record.is_protocol,
        )
        for record in records[: max(top_n, 0)]
    )


def toggle_sort(params: ViewParameters, clicked_field: str) -> ViewParameters:
    """Flip direction on the active field, otherwise switch field and reset to ascending."""

    if clicked_field == params.sort_field:
        flipped = SORT_DESCENDING if params.sort_direction == SORT_ASCENDING else SORT_ASCENDING
        return ViewParameters(
            sort_field=params.sort_field,
            sort_direction=flipped,
            filter_mode=params.filter_mode,
        )
    return ViewParameters(
        sort_field=clicked_field,
        sort_direction=SORT_ASCENDING,
        filter_mode=params.filter_mode,
    )


def build_view(
    records: Sequence[InstitutionRecord],
    params: ViewParameters,
    *,
    rank_window: RankWindow | None = None,
    chart_top_n: int = DEFAULT_CHART_TOP_N,
    label_max_chars: int = DEFAULT_LABEL_MAX_CHARS,
) -> DashboardView:
    """Filter, sort, and project the records for the table and the chart."""

    window = rank_window or RankWindow()
    filtered = filter_records(records, filter_mode=params.filter_mode, rank_window=window)
    ordered = sort_records(filtered, sort_field=params.sort_field, sort_direction=params.sort_direction)
    return DashboardView(
        rows=ordered,
        table_rows=build_table_rows(ordered),
        chart=build_chart_points(ordered, top_n=chart_top_n, label_max_chars=label_max_chars),
    )


def table_rows_to_frame(table_rows: Iterable[TableRow]) -> pd.DataFrame:
    return pd.DataFrame(
        [asdict(row) for row in table_rows],
        columns=["rank", "name", "deposits", "category", "type_label"],
    )


def chart_points_to_frame(points: Iterable[ChartPoint]) -> pd.DataFrame:
    return pd.DataFrame([asdict(point) for point in points], columns=["label", "value", "highlight"])
