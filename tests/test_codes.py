import pytest

from transfer_planner.codes import (
    extract_course_codes,
    normalize_code,
    parse_requirements_list,
    unique_sorted,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("cs-111", "CS 111"),
        ("CS 111", "CS 111"),
        ("  cs   111 ", "CS 111"),
        ("cs_111", "CS 111"),
        ("math151", "MATH 151"),
        ("engr 201a", "ENGR 201A"),
        ("Calculus I", "CALCULUS I"),
        ("x 1", "X 1"),
    ],
)
def test_normalize_code(raw, expected):
    assert normalize_code(raw) == expected


@pytest.mark.parametrize("raw", ["cs-111", "Math151", "engr_201b", "free text -- here", "ABCDEFG 12345"])
def test_normalize_is_idempotent(raw):
    once = normalize_code(raw)
    assert normalize_code(once) == once


def test_extract_dedupes_across_patterns():
    text = "Took CS 111 in fall, retook CS-111 later. Also cs111 and MATH151."
    assert extract_course_codes(text) == ["CS 111", "MATH 151"]


def test_extract_returns_sorted_codes():
    text = "PHYS 201, ENGR-201A, BIO 10"
    assert extract_course_codes(text) == ["BIO 10", "ENGR 201A", "PHYS 201"]


def test_extract_without_codes():
    assert extract_course_codes("Grade point average 3.50") == []


def test_unique_sorted():
    assert unique_sorted(["CS 112", "CS 111", "CS 112"]) == ["CS 111", "CS 112"]


def test_parse_requirements_list():
    text = "CS 111\n\nCS 112, MATH 151\n  Technical elective  \nCS-111\n"
    assert parse_requirements_list(text) == ["CS 111", "CS 112", "MATH 151", "TECHNICAL ELECTIVE"]
