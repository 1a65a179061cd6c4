from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional, Set, Tuple

from .codes import unique_sorted
from .models import BlockedItem, CourseItem, ElectiveItem, Plan, PlanItem, SchedulingConfig, TermPlan
from .prereqs import lookup_prereqs
from .terms import term_sequence

log = logging.getLogger(__name__)


def compute_remaining(completed: Iterable[str], requirements: Iterable[str]) -> List[str]:
    done = set(completed)
    return unique_sorted(r for r in requirements if r not in done)


def plan_status(remaining: List[str], unscheduled: List[str]) -> Tuple[str, str]:
    """Return (status, message) summarizing a plan."""
    if not remaining:
        return "nothing_required", "No remaining courses (check requirements)"
    if unscheduled:
        return "partial", f"Planned with {len(unscheduled)} not scheduled"
    return "complete", "Plan generated"


# -----------------------------------------------------------------------------
# Planning Algorithm (greedy, one pass over the terms)
# -----------------------------------------------------------------------------
def generate_plan(
    completed: Iterable[str],
    requirements: Iterable[str],
    prereqs: Mapping[str, List[str]],
    config: SchedulingConfig,
    term_labels: Optional[List[str]] = None,
) -> Plan:
    """Place outstanding required courses into terms.

    Each term takes up to ``config.max_per_term`` courses, in code order, whose
    prerequisites are all completed or already placed in an earlier term. A
    course placed in a term counts as satisfied for every later term. When a
    term can take nothing, it gets a single BlockedItem for the first stuck
    course instead. Inputs are copied, never modified.
    """
    completed_list = unique_sorted(completed)
    requirements_list = unique_sorted(requirements)
    graph = {k: list(v) for k, v in prereqs.items()}
    labels = list(term_labels) if term_labels is not None else term_sequence(config.start_term, config.term_count)

    remaining = compute_remaining(completed_list, requirements_list)
    satisfied: Set[str] = set(completed_list)
    planned: Set[str] = set()

    def can_take(course: str) -> bool:
        return all(r in satisfied for r in lookup_prereqs(graph, course))

    terms: List[TermPlan] = []
    for label in labels:
        candidates = [c for c in remaining if c not in planned]
        picked: List[str] = []
        for c in candidates:
            if len(picked) >= config.max_per_term:
                break
            if can_take(c):
                picked.append(c)

        items: List[PlanItem] = []
        if not picked:
            if candidates:
                stuck = candidates[0]
                missing = [r for r in lookup_prereqs(graph, stuck) if r not in satisfied]
                items.append(BlockedItem.for_course(stuck, missing))
                log.debug("%s: blocked on %s (missing %s)", label, stuck, missing or "unknown")
            terms.append(TermPlan(label=label, items=items))
            continue

        for c in picked:
            items.append(CourseItem(code=c))
            planned.add(c)
        satisfied.update(picked)

        if config.include_electives:
            while len(items) < config.max_per_term:
                items.append(ElectiveItem())
        log.debug("%s: scheduled %s", label, ", ".join(picked))
        terms.append(TermPlan(label=label, items=items))

    unscheduled = [c for c in remaining if c not in planned]
    status, message = plan_status(remaining, unscheduled)

    stalled = sum(1 for t in terms if t.blocked)
    if stalled:
        log.warning("%d of %d term(s) blocked by missing prerequisites", stalled, len(terms))
    log.info(
        "Planned %d term(s): %d scheduled, %d unscheduled",
        len(terms), len(planned), len(unscheduled),
    )

    return Plan(
        term_labels=labels,
        terms=terms,
        unscheduled=unscheduled,
        completed=completed_list,
        requirements=requirements_list,
        prereqs=graph,
        status=status,
        message=message,
    )
