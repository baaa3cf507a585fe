from dataclasses import astuple, dataclass
from datetime import datetime
from io import BytesIO

import pandas as pd

from quota_builder.dimensions import pretty_dimension

# Column names and order are read by downstream spreadsheets; keep them stable.
EXPORT_COLUMNS = ["Dimension", "Label", "Population", "SharePercent", "Quota"]
EXPORT_SHEET_NAME = "Quotas"


@dataclass(frozen=True)
class ExportRow:
    Dimension: str
    Label: str
    Population: int
    SharePercent: float
    Quota: int


def share_percent(share: float) -> float:
    return round(share * 100, 2)


def flatten(response) -> list:
    """
    One ExportRow per cell, in the order of ``response.results`` and then
    of each dimension's cells.
    """
    rows = []
    for dim, res in response.results.items():
        for c in res.cells:
            rows.append(ExportRow(
                Dimension=pretty_dimension(dim),
                Label=c.label,
                Population=c.pop,
                SharePercent=share_percent(c.share),
                Quota=c.quota,
            ))
    return rows


def export_frame(response) -> pd.DataFrame:
    rows = flatten(response)
    return pd.DataFrame([astuple(r) for r in rows], columns=EXPORT_COLUMNS)


def dimension_table(result) -> pd.DataFrame:
    """Display table for one dimension (Label | Population | Share % | Quota)."""
    return pd.DataFrame(
        [
            {
                "Label": c.label,
                "Population": c.pop,
                "Share %": share_percent(c.share),
                "Quota": c.quota,
            }
            for c in result.cells
        ],
        columns=["Label", "Population", "Share %", "Quota"],
    )


def frame_to_excel_bytes(df: pd.DataFrame, sheet_name: str = EXPORT_SHEET_NAME) -> bytes:
    output = BytesIO()
    with pd.ExcelWriter(output, engine="xlsxwriter") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()


def export_filename(now: datetime | None = None) -> str:
    # Seconds in the stamp so two exports on the same day do not overwrite each other.
    now = now or datetime.now()
    return f"quota_results_{now.strftime('%Y%m%d_%H%M%S')}.xlsx"


def build_export(response, now: datetime | None = None):
    """
    (filename, xlsx bytes) for the given response.
    Returns None when there is nothing to export yet.
    """
    if response is None:
        return None
    return export_filename(now), frame_to_excel_bytes(export_frame(response))
