from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .codes import normalize_code

log = logging.getLogger(__name__)

PrereqGraph = Dict[str, List[str]]


class PrereqParseError(ValueError):
    """Raised (or returned) when prerequisite input is not a JSON object."""


@dataclass(frozen=True)
class PrereqParseResult:
    graph: Optional[PrereqGraph] = None
    error: Optional[PrereqParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> PrereqGraph:
        if self.error is not None:
            raise self.error
        return self.graph or {}


def _decode(raw: Any) -> Mapping[str, Any]:
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PrereqParseError(f"Input is not UTF-8 text: {exc.reason}") from exc
    if isinstance(raw, str):
        if not raw.strip():
            return {}
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise PrereqParseError(f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})") from exc
        except RecursionError as exc:
            raise PrereqParseError("Invalid JSON: nested too deeply") from exc
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise PrereqParseError(f"Expected a JSON object of course -> [prereqs], got {type(raw).__name__}")
    return raw


def parse_prereq_graph(raw: Any) -> PrereqParseResult:
    """Normalize a {course: [prereq, ...]} mapping given as JSON text or decoded data.

    Non-list values become an empty prerequisite list. A result with
    ``ok == False`` means the input could not be read as a mapping of
    course codes at all.
    """
    try:
        obj = _decode(raw)
    except PrereqParseError as exc:
        return PrereqParseResult(error=exc)

    graph: PrereqGraph = {}
    for key, value in obj.items():
        reqs = value if isinstance(value, list) else []
        bad = [r for r in reqs if not isinstance(r, str)]
        if bad:
            return PrereqParseResult(
                error=PrereqParseError(f"Prerequisites of {key!r} must be course codes, got {bad[0]!r}")
            )
        graph[normalize_code(str(key))] = [normalize_code(r) for r in reqs]
    return PrereqParseResult(graph=graph)


def resolve_prereq_graph(raw: Any, previous: Mapping[str, List[str]]) -> PrereqGraph:
    """Parse `raw`, falling back to `previous` when it is unreadable."""
    result = parse_prereq_graph(raw)
    if not result.ok:
        log.warning("Keeping previous prerequisite graph: %s", result.error)
        return {k: list(v) for k, v in previous.items()}
    return result.unwrap()


def lookup_prereqs(graph: Mapping[str, List[str]], course: str) -> List[str]:
    """Courses missing from the graph have no prerequisites."""
    return list(graph.get(course, []))
