"""Prerequisite-aware term planning for transfer students."""

from .codes import extract_course_codes, normalize_code, parse_requirements_list, unique_sorted
from .equivalency import apply_equivalency, parse_equivalency
from .models import BlockedItem, CourseItem, ElectiveItem, Plan, SchedulingConfig, TermPlan
from .planner import PlanInputs, build_plan
from .prereqs import PrereqParseError, PrereqParseResult, lookup_prereqs, parse_prereq_graph, resolve_prereq_graph
from .scheduler import compute_remaining, generate_plan, plan_status
from .terms import SEASON_ORDER, term_sequence

__version__ = "0.1.0"
