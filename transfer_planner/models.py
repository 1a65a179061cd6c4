from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import (
    MAX_PER_TERM_MAX,
    MAX_PER_TERM_MIN,
    TERM_COUNT_MAX,
    TERM_COUNT_MIN,
    clamp,
    get_settings,
)

ELECTIVE_NOTE = "Choose a major/tech elective offered this term."


def _coerce_count(value: Any, default: int, lo: int, hi: int) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    try:
        n = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return default
    return clamp(n, lo, hi)


# -----------------------------------------------------------------------------
# Scheduling settings
# -----------------------------------------------------------------------------
class SchedulingConfig(BaseModel):
    """Per-request planner settings. Counts are clamped, never rejected."""

    model_config = ConfigDict(frozen=True)

    start_term: str = Field(default="", validate_default=True)
    term_count: int = Field(default_factory=lambda: get_settings().default_term_count)
    max_per_term: int = Field(default_factory=lambda: get_settings().default_max_per_term)
    include_electives: bool = False

    @field_validator("start_term", mode="before")
    @classmethod
    def _start_term(cls, v: Any) -> str:
        text = "" if v is None else str(v).strip()
        return text or get_settings().default_start_term

    @field_validator("term_count", mode="before")
    @classmethod
    def _term_count(cls, v: Any) -> int:
        return _coerce_count(v, get_settings().default_term_count, TERM_COUNT_MIN, TERM_COUNT_MAX)

    @field_validator("max_per_term", mode="before")
    @classmethod
    def _max_per_term(cls, v: Any) -> int:
        return _coerce_count(v, get_settings().default_max_per_term, MAX_PER_TERM_MIN, MAX_PER_TERM_MAX)

    @field_validator("include_electives", mode="before")
    @classmethod
    def _include_electives(cls, v: Any) -> Any:
        return False if v is None else v


# -----------------------------------------------------------------------------
# Plan items
# -----------------------------------------------------------------------------
class CourseItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["course"] = "course"
    code: str


class ElectiveItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["elective"] = "elective"
    note: str = ELECTIVE_NOTE


class BlockedItem(BaseModel):
    """Marks a term where nothing could be scheduled."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["blocked"] = "blocked"
    course: str
    missing: List[str] = []
    note: str

    @classmethod
    def for_course(cls, course: str, missing: List[str]) -> BlockedItem:
        listed = ", ".join(missing) or "unknown"
        return cls(course=course, missing=list(missing), note=f"Need prereqs for {course}: {listed}")


PlanItem = Annotated[Union[CourseItem, ElectiveItem, BlockedItem], Field(discriminator="kind")]


class TermPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    items: List[PlanItem] = []

    @property
    def courses(self) -> List[str]:
        return [it.code for it in self.items if isinstance(it, CourseItem)]

    @property
    def blocked(self) -> bool:
        return any(isinstance(it, BlockedItem) for it in self.items)


PlanStatus = Literal["nothing_required", "partial", "complete"]


class Plan(BaseModel):
    model_config = ConfigDict(frozen=True)

    term_labels: List[str]
    terms: List[TermPlan]
    unscheduled: List[str] = []
    completed: List[str] = []
    requirements: List[str] = []
    prereqs: Dict[str, List[str]] = {}
    status: PlanStatus = "complete"
    message: str = ""

    @property
    def scheduled(self) -> List[str]:
        return [c for t in self.terms for c in t.courses]


# -----------------------------------------------------------------------------
# API payloads
# -----------------------------------------------------------------------------
class CodesRequest(BaseModel):
    codes: List[str] = []


class TextRequest(BaseModel):
    text: str = ""


class CodesResponse(BaseModel):
    codes: List[str]


class EquivalencyRequest(BaseModel):
    completed: List[str] = []
    text: str = ""


class EquivalencyResponse(BaseModel):
    completed: List[str]
    mappings: Dict[str, str]


class PrereqValidateRequest(BaseModel):
    raw: Any = None


class PrereqValidateResponse(BaseModel):
    valid: bool
    graph: Optional[Dict[str, List[str]]] = None
    error: Optional[str] = None


class TermsRequest(BaseModel):
    start_term: Optional[str] = None
    term_count: Union[int, float, str, None] = None


class TermsResponse(BaseModel):
    labels: List[str]
