"""
Turn the free-form answer of the search model into LeadRecord objects.

The model is asked for blocks like

    - Nombre: Café Arábica
    - Calificación: 4.7
    - Reseñas: 120
    - Dirección: Av. Francisco de Miranda, Caracas
    - Teléfono: N/A
    - URL: https://maps.example/1

but it does not always comply: bullets, bold markup, numbering, missing
fields and shuffled fields all show up. Parsing is line based. A "name" line
opens a new record, every other recognized label fills the open record, and
anything else is skipped. Nothing here raises.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .types import LeadRecord


@dataclass(frozen=True)
class FieldLabel:
    field: str
    aliases: tuple[str, ...]


# Priority order matters: the name label is tried first on every line.
LABELS_ES: tuple[FieldLabel, ...] = (
    FieldLabel("name", ("Nombre",)),
    FieldLabel("rating", ("Calificación", "Calificacion")),
    FieldLabel("reviews", ("Reseñas", "Resenas")),
    FieldLabel("address", ("Dirección", "Direccion")),
    FieldLabel("phone", ("Teléfono", "Telefono")),
    FieldLabel("url", ("URL",)),
)

LABELS_EN: tuple[FieldLabel, ...] = (
    FieldLabel("name", ("Name",)),
    FieldLabel("rating", ("Rating",)),
    FieldLabel("reviews", ("Reviews",)),
    FieldLabel("address", ("Address",)),
    FieldLabel("phone", ("Phone",)),
    FieldLabel("url", ("URL",)),
)

_LABEL_SETS = {"es": LABELS_ES, "en": LABELS_EN}


def labels_for(language: str) -> tuple[FieldLabel, ...]:
    """Label table for a language code; unknown codes get the Spanish one."""
    return _LABEL_SETS.get((language or "").strip().lower(), LABELS_ES)


@lru_cache(maxsize=None)
def _label_pattern(aliases: tuple[str, ...]) -> re.Pattern:
    # leading decoration: bullets, "**", "1." / "2)" numbering
    prefix = r"^(?:[-*•\s]|\d+[.)])*"
    alts = "|".join(re.escape(a) for a in aliases)
    # label, optional closing "**", optional colon, optional "**", then the value
    return re.compile(prefix + r"(?:" + alts + r")\**\s*:?\s*\**\s*(.*)$", re.IGNORECASE)


def match_label(line: str, label: FieldLabel) -> Optional[str]:
    """
    Return the value carried by `line` for `label`, or None.

    An empty value is treated as no match, so a bare heading such as
    "**Dirección:**" neither opens a record nor clears a field.
    """
    # decomposed input ("e" + combining accent) would miss the accented labels
    m = _label_pattern(label.aliases).match(unicodedata.normalize("NFC", line.strip()))
    if not m:
        return None
    value = m.group(1).strip()
    return value or None


def parse_leads(text: Optional[str], labels: tuple[FieldLabel, ...] = LABELS_ES) -> list[LeadRecord]:
    leads: list[LeadRecord] = []
    current: dict[str, str] = {}

    for raw in (text or "").split("\n"):
        line = raw.strip()
        if not line:
            continue

        for label in labels:
            value = match_label(line, label)
            if value is None:
                continue

            if label.field == "name":
                if current.get("name"):
                    leads.append(LeadRecord(**current))
                current = {"name": value}
            else:
                # last occurrence wins until the next name line
                current[label.field] = value
            break

    # tail record has no name line after it
    if current.get("name"):
        leads.append(LeadRecord(**current))

    return leads
