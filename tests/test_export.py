from __future__ import annotations

from datetime import datetime
from io import BytesIO

import pandas as pd
import pytest

from quota_builder.dimensions import pretty_dimension
from quota_builder.export import (
    EXPORT_COLUMNS,
    ExportRow,
    build_export,
    dimension_table,
    export_filename,
    export_frame,
    flatten,
    share_percent,
)
from quota_builder.response import parse_quota_response


def test_single_county_row(county_reply: dict) -> None:
    rows = flatten(parse_quota_response(county_reply))

    assert rows == [
        ExportRow(Dimension="County", Label="Harju", Population=600000, SharePercent=66.67, Quota=667)
    ]


def test_row_count_is_total_cells(two_dimension_reply: dict) -> None:
    rows = flatten(parse_quota_response(two_dimension_reply))
    assert len(rows) == 5


def test_row_count_does_not_depend_on_dimension_order(two_dimension_reply: dict) -> None:
    reordered = dict(two_dimension_reply)
    reordered["results"] = dict(reversed(list(two_dimension_reply["results"].items())))

    rows = flatten(parse_quota_response(two_dimension_reply))
    rows_reordered = flatten(parse_quota_response(reordered))

    assert len(rows) == len(rows_reordered)
    assert sorted(rows, key=repr) == sorted(rows_reordered, key=repr)


def test_row_order_follows_dimensions_then_cells(two_dimension_reply: dict) -> None:
    response = parse_quota_response(two_dimension_reply)
    rows = flatten(response)

    assert [(r.Dimension, r.Label) for r in rows] == [
        ("Sex", "Men"),
        ("Sex", "Women"),
        ("Region", "North"),
        ("Region", "South"),
        ("Region", "West"),
    ]
    assert flatten(response) == rows


@pytest.mark.parametrize(
    "share, expected",
    [(0.33333, 33.33), (0.6667, 66.67), (0.0, 0.0), (1.0, 100.0), (0.5, 50.0)],
)
def test_share_percent(share: float, expected: float) -> None:
    assert share_percent(share) == expected


def test_share_percent_in_rows_matches_rounding(two_dimension_reply: dict) -> None:
    response = parse_quota_response(two_dimension_reply)
    shares = [c.share for res in response.results.values() for c in res.cells]
    rows = flatten(response)
    assert [r.SharePercent for r in rows] == [round(s * 100, 2) for s in shares]


def test_quota_is_copied_as_is(two_dimension_reply: dict) -> None:
    rows = flatten(parse_quota_response(two_dimension_reply))
    assert [r.Quota for r in rows] == [48, 52, 33, 33, 34]


def test_unknown_dimension_uses_fallback_label() -> None:
    reply = {
        "population_total": 10,
        "sample_n": 10,
        "results": {
            "mother_tongue": {
                "base": 10,
                "cells": [{"id": "et", "label": "Estonian", "pop": 10, "share": 1.0, "quota": 10}],
            }
        },
    }
    rows = flatten(parse_quota_response(reply))
    assert rows[0].Dimension == "Mother Tongue"


@pytest.mark.parametrize(
    "key, label",
    [
        ("sex", "Sex"),
        ("age_group", "Age Group"),
        ("tallinn_districts", "Tallinn Districts"),
        ("citizenship_country", "Citizenship Country"),
        ("household_size", "Household Size"),
        ("income", "Income"),
    ],
)
def test_pretty_dimension(key: str, label: str) -> None:
    assert pretty_dimension(key) == label


def test_export_frame_columns(two_dimension_reply: dict) -> None:
    df = export_frame(parse_quota_response(two_dimension_reply))

    assert list(df.columns) == EXPORT_COLUMNS == ["Dimension", "Label", "Population", "SharePercent", "Quota"]
    assert len(df) == 5
    assert df.iloc[2].to_dict() == {
        "Dimension": "Region",
        "Label": "North",
        "Population": 333,
        "SharePercent": 33.33,
        "Quota": 33,
    }


def test_export_frame_of_empty_results_keeps_columns() -> None:
    df = export_frame(parse_quota_response({"population_total": 0, "sample_n": 1, "results": {}}))
    assert df.empty
    assert list(df.columns) == EXPORT_COLUMNS


def test_workbook_has_one_quotas_sheet(county_reply: dict) -> None:
    filename, payload = build_export(parse_quota_response(county_reply), now=datetime(2025, 3, 4, 5, 6, 7))

    assert filename == "quota_results_20250304_050607.xlsx"
    sheets = pd.read_excel(BytesIO(payload), sheet_name=None)
    assert list(sheets) == ["Quotas"]
    df = sheets["Quotas"]
    assert list(df.columns) == EXPORT_COLUMNS
    assert df.iloc[0]["Label"] == "Harju"
    assert df.iloc[0]["SharePercent"] == pytest.approx(66.67)
    assert df.iloc[0]["Quota"] == 667


def test_export_without_response_is_a_no_op() -> None:
    assert build_export(None) is None


def test_filename_embeds_timestamp() -> None:
    first = export_filename(datetime(2025, 1, 1, 9, 0, 0))
    second = export_filename(datetime(2025, 1, 1, 9, 0, 1))

    assert first.startswith("quota_results_") and first.endswith(".xlsx")
    assert first != second


def test_dimension_table(two_dimension_reply: dict) -> None:
    table = dimension_table(parse_quota_response(two_dimension_reply).results["sex"])

    assert list(table.columns) == ["Label", "Population", "Share %", "Quota"]
    assert table["Share %"].tolist() == [48.0, 52.0]
