import pytest

from transfer_planner.prereqs import (
    PrereqParseError,
    lookup_prereqs,
    parse_prereq_graph,
    resolve_prereq_graph,
)


def test_parse_json_text_normalizes_keys_and_values():
    result = parse_prereq_graph('{"cs-112": ["cs 111"], "MATH152": ["math-151"]}')
    assert result.ok
    assert result.graph == {"CS 112": ["CS 111"], "MATH 152": ["MATH 151"]}


def test_parse_mapping_coerces_non_lists():
    result = parse_prereq_graph({"CS 112": "CS 111", "CS 211": None, "CS 212": ["CS 211"]})
    assert result.graph == {"CS 112": [], "CS 211": [], "CS 212": ["CS 211"]}


@pytest.mark.parametrize("raw", ["", "   ", None, "{}"])
def test_empty_input_is_valid_empty_graph(raw):
    result = parse_prereq_graph(raw)
    assert result.ok
    assert result.unwrap() == {}


@pytest.mark.parametrize(
    "raw",
    [
        '{"CS 112": ["CS 111"]',
        "[1, 2]",
        '"text"',
        42,
        pytest.param(b'{"CS 112": ["\xff"]}', id="not-utf8"),
        pytest.param("[" * 100000, id="deep-nesting"),
        '{"CS 112": [null, 111]}',
        {"CS 112": ["CS 111", 111]},
    ],
)
def test_unparsable_input_is_an_error(raw):
    result = parse_prereq_graph(raw)
    assert not result.ok
    assert result.graph is None
    assert isinstance(result.error, PrereqParseError)
    with pytest.raises(PrereqParseError):
        result.unwrap()


def test_resolve_keeps_previous_graph_on_error():
    previous = {"CS 112": ["CS 111"]}
    graph = resolve_prereq_graph("{not json", previous)
    assert graph == previous
    assert graph is not previous


def test_resolve_replaces_graph_when_valid():
    assert resolve_prereq_graph("{}", {"CS 112": ["CS 111"]}) == {}


def test_lookup_absent_course_has_no_prereqs():
    graph = {"CS 112": ["CS 111"]}
    assert lookup_prereqs(graph, "CS 112") == ["CS 111"]
    assert lookup_prereqs(graph, "CS 999") == []


def test_non_string_prereqs_keep_previous_graph():
    previous = {"CS 112": ["CS 111"]}
    assert resolve_prereq_graph('{"CS 112": [null]}', previous) == previous


def test_utf8_bytes_are_decoded():
    result = parse_prereq_graph('{"cs 112": ["cs 111"]}'.encode("utf-8"))
    assert result.graph == {"CS 112": ["CS 111"]}
