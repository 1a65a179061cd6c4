from __future__ import annotations

from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict, Field

from .codes import normalize_code, parse_requirements_list, unique_sorted
from .equivalency import apply_equivalency, parse_equivalency
from .models import Plan, SchedulingConfig
from .prereqs import parse_prereq_graph
from .scheduler import generate_plan


class PlanInputs(BaseModel):
    """Everything one planning run needs, captured up front.

    ``requirements`` may be a list of codes or pasted requirement text.
    ``prereqs`` may be JSON text or an already-decoded mapping.
    """

    model_config = ConfigDict(frozen=True)

    completed: List[str] = []
    requirements: Union[List[str], str] = []
    prereqs: Any = None
    equivalency: str = ""
    config: SchedulingConfig = Field(default_factory=SchedulingConfig)


def normalize_requirements(requirements: Union[List[str], str]) -> List[str]:
    if isinstance(requirements, str):
        return parse_requirements_list(requirements)
    return unique_sorted(normalize_code(r) for r in requirements if r.strip())


def build_plan(inputs: PlanInputs) -> Plan:
    """Normalize the bundle, map equivalent courses and run the scheduler.

    Raises PrereqParseError when ``inputs.prereqs`` is not a readable mapping.
    """
    completed = unique_sorted(normalize_code(c) for c in inputs.completed if c.strip())
    if inputs.equivalency.strip():
        completed = apply_equivalency(completed, parse_equivalency(inputs.equivalency))
    requirements = normalize_requirements(inputs.requirements)
    graph = parse_prereq_graph(inputs.prereqs).unwrap()
    return generate_plan(completed, requirements, graph, inputs.config)
