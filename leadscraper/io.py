import re
from dataclasses import asdict
from typing import Iterable

import pandas as pd

from .types import LEAD_COLUMNS, LeadRecord


def leads_to_csv(leads: Iterable[LeadRecord]) -> str:
    """CSV text with a header row and one row per lead, values verbatim."""
    rows = [asdict(l) for l in leads]
    df = pd.DataFrame(rows, columns=list(LEAD_COLUMNS), dtype=str)
    return df.to_csv(index=False)


def csv_filename(business_type: str, location: str) -> str:
    def _slug(s: str) -> str:
        return re.sub(r"\s+", "_", (s or "").strip())

    return f"leads_{_slug(business_type)}_{_slug(location)}.csv"


def load_leads_csv(path: str) -> list[LeadRecord]:
    # dtype=str keeps "4.5" / "120" / phone numbers as they were written
    df = pd.read_csv(path, dtype=str, keep_default_na=False).fillna("")
    leads: list[LeadRecord] = []

    for _, row in df.iterrows():
        name = str(row.get("name", "")).strip()
        if not name:
            continue
        leads.append(
            LeadRecord(
                name=name,
                **{c: str(row.get(c, "")).strip() for c in LEAD_COLUMNS if c != "name"},
            )
        )

    return leads


def merge_leads(existing: list[LeadRecord], new: list[LeadRecord]) -> list[LeadRecord]:
    """"Load more" semantics: keep what we had, append the new batch as-is."""
    return [*existing, *new]
