import pytest

from transfer_planner.models import CourseItem, SchedulingConfig
from transfer_planner.planner import PlanInputs, build_plan
from transfer_planner.prereqs import PrereqParseError
from transfer_planner.samples import sample_bundle


def test_equivalency_maps_completed_before_planning():
    plan = build_plan(
        PlanInputs(
            completed=["mat-151"],
            requirements=["MATH 151", "MATH 152"],
            prereqs={"MATH 152": ["MATH 151"]},
            equivalency="MAT 151 = MATH 151",
        )
    )
    assert plan.completed == ["MATH 151"]
    assert plan.terms[0].items == [CourseItem(code="MATH 152")]


def test_requirements_text_and_json_prereqs():
    plan = build_plan(
        PlanInputs(
            completed=["CS 111"],
            requirements="CS 111\nCS-112\n",
            prereqs='{"cs 112": ["cs-111"]}',
            config=SchedulingConfig(start_term="Spring 2026", term_count=1),
        )
    )
    assert plan.requirements == ["CS 111", "CS 112"]
    assert plan.term_labels == ["Spring 2026"]
    assert plan.terms[0].courses == ["CS 112"]


def test_bad_prereqs_raise_parse_error():
    with pytest.raises(PrereqParseError):
        build_plan(PlanInputs(requirements=["CS 112"], prereqs="{broken"))


def test_sample_bundle_plans_completely():
    plan = build_plan(PlanInputs(**sample_bundle(), config=SchedulingConfig(max_per_term=2)))
    assert plan.status == "complete"
    assert plan.unscheduled == []
    assert plan.term_labels[0] == "Term 1"


def test_plan_serializes_to_json():
    plan = build_plan(PlanInputs(completed=["CS 111"], requirements=["CS 112", "CS 999"],
                                 prereqs={"CS 112": ["CS 111"], "CS 999": ["CS 500"]},
                                 config=SchedulingConfig(term_count=2)))
    data = plan.model_dump(mode="json")
    assert data["terms"][0]["items"] == [{"kind": "course", "code": "CS 112"}]
    assert data["terms"][1]["items"][0]["kind"] == "blocked"
    assert data["unscheduled"] == ["CS 999"]
