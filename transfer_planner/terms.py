from __future__ import annotations

import re
from typing import List

# -----------------------------------------------------------------------------
# Term labels
# -----------------------------------------------------------------------------
SEASON_ORDER = ["Spring", "Summer", "Fall", "Winter"]

_SEASON_YEAR = re.compile(r"\b(Spring|Summer|Fall|Winter)\b\s*(\d{4})", re.IGNORECASE)


def term_sequence(start: str, count: int) -> List[str]:
    """Generate `count` consecutive term labels starting at `start`.

    'Fall 2025' advances Fall -> Winter -> Spring, bumping the year after Winter.
    Anything without a season and year yields 'Term 1' .. 'Term N'.
    """
    m = _SEASON_YEAR.search(start or "")
    if not m:
        return [f"Term {i + 1}" for i in range(count)]

    idx = SEASON_ORDER.index(m.group(1).capitalize())
    year = int(m.group(2))
    seq = []
    for _ in range(count):
        seq.append(f"{SEASON_ORDER[idx]} {year}")
        idx = (idx + 1) % len(SEASON_ORDER)
        if idx == 0:  # Winter -> Spring
            year += 1
    return seq
