from __future__ import annotations

from typing import Any, Dict, List

# -----------------------------------------------------------------------------
# Built-in sample data for demos
# -----------------------------------------------------------------------------
SAMPLE_REQUIREMENTS = """\
CS 111
CS 112
CS 211
CS 212
CS 310
MATH 151
MATH 152
MATH 250
PHYS 201
ENG 101
"""

SAMPLE_PREREQS: Dict[str, List[str]] = {
    "CS 112": ["CS 111"],
    "CS 211": ["CS 112"],
    "CS 212": ["CS 211", "MATH 152"],
    "CS 310": ["CS 212"],
    "MATH 152": ["MATH 151"],
    "MATH 250": ["MATH 152"],
    "PHYS 201": ["MATH 151"],
}

SAMPLE_COMPLETED = ["MATH 151", "CS 111", "ENG 101"]

SAMPLE_EQUIVALENCY = "MAT 151 = MATH 151\nCIS 111 = CS 111"


def sample_bundle() -> Dict[str, Any]:
    return {
        "completed": list(SAMPLE_COMPLETED),
        "requirements": SAMPLE_REQUIREMENTS,
        "prereqs": {k: list(v) for k, v in SAMPLE_PREREQS.items()},
        "equivalency": SAMPLE_EQUIVALENCY,
    }
