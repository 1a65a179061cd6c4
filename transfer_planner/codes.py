from __future__ import annotations

import re
from typing import Iterable, List, Set

# -----------------------------------------------------------------------------
# Course code normalization
# -----------------------------------------------------------------------------
_SEPARATORS = re.compile(r"[-_]")
_WHITESPACE = re.compile(r"\s+")
_CANONICAL = re.compile(r"^([A-Za-z]{2,6})\s*([0-9]{2,4}[A-Za-z]?)$")

# Heuristic matchers for free text: "CS 111", "CS-111", "ENGR 201A", "MATH151".
# Expect false positives and misses; this is best effort, not a catalog lookup.
_CODE_PATTERNS = (
    re.compile(r"\b([A-Za-z]{2,6})\s*[- ]\s*([0-9]{2,4}[A-Za-z]?)\b"),
    re.compile(r"\b([A-Za-z]{2,6})([0-9]{3}[A-Za-z]?)\b"),
)


def normalize_code(raw: str) -> str:
    """Canonicalize a course mention, e.g. 'cs-111' -> 'CS 111'.

    Text that does not look like DEPT + NUMBER is kept, trimmed and uppercased.
    """
    text = _WHITESPACE.sub(" ", _SEPARATORS.sub(" ", raw)).strip()
    m = _CANONICAL.match(text)
    if m:
        return f"{m.group(1).upper()} {m.group(2).upper()}"
    return text.upper()


def unique_sorted(codes: Iterable[str]) -> List[str]:
    return sorted(set(codes))


def extract_course_codes(text: str) -> List[str]:
    """Find every course code in `text`; one entry per canonical code, sorted."""
    found: Set[str] = set()
    for rx in _CODE_PATTERNS:
        for m in rx.finditer(text):
            found.add(normalize_code(f"{m.group(1)} {m.group(2)}"))
    return unique_sorted(found)


def parse_requirements_list(text: str) -> List[str]:
    """Read a pasted requirement list, one entry (or several codes) per line.

    Lines without a recognizable code are kept as a single normalized entry.
    """
    out: Set[str] = set()
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        codes = extract_course_codes(line)
        if codes:
            out.update(codes)
        else:
            out.add(normalize_code(line))
    return unique_sorted(out)
