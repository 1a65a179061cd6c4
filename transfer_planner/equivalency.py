from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping

from .codes import normalize_code, unique_sorted

log = logging.getLogger(__name__)


def parse_equivalency(text: str) -> Dict[str, str]:
    """Parse 'MAT 152 = MATH 152' lines into {external: canonical}.

    Lines that do not split into exactly two non-empty sides are skipped.
    """
    mapping: Dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        parts = [p.strip() for p in line.split("=")]
        if len(parts) != 2 or not parts[0] or not parts[1]:
            log.debug("Skipping equivalency line %r", line)
            continue
        mapping[normalize_code(parts[0])] = normalize_code(parts[1])
    return mapping


def apply_equivalency(completed: Iterable[str], mapping: Mapping[str, str]) -> List[str]:
    """Return the completed courses with external codes swapped for their equivalents."""
    return unique_sorted(mapping.get(code, code) for code in completed)
