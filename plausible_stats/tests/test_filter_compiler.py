import pytest

from plausible_stats.constants.stats_property import StatsProperty
from plausible_stats.model.filter_model import AnyOf, Combinator, FilterCondition, FilterGroup, FilterOperator
from plausible_stats.utils.filter_compiler import (
    FilterCompilationError,
    PlausibleFilterCompiler,
    serialize_filters,
)


@pytest.fixture
def compiler():
    return PlausibleFilterCompiler()

@pytest.fixture
def page_filter():
    return FilterCondition(
        property=StatsProperty.EVENT_PAGE,
        operator=FilterOperator.EQUALS,
        value=AnyOf(values=["/dashboard*", "/love*"]),
    )

@pytest.fixture
def hostname_filter():
    return FilterCondition(property=StatsProperty.EVENT_HOSTNAME, value="socket.dev")

# ----------------------------
# Conditions
# ----------------------------

def test_not_equals_condition():
    condition = FilterCondition(
        property=StatsProperty.VISIT_COUNTRY, operator=FilterOperator.NOT_EQUALS, value="DE"
    )
    assert PlausibleFilterCompiler.compile_condition(condition) == "visit:country!=DE"

def test_equals_condition():
    condition = FilterCondition(property=StatsProperty.VISIT_BROWSER, value="Firefox")
    assert PlausibleFilterCompiler.compile_condition(condition) == "visit:browser==Firefox"

def test_any_of_value_is_not_parenthesized(page_filter):
    assert PlausibleFilterCompiler.compile_condition(page_filter) == "event:page==/dashboard*|/love*"

def test_single_any_of_matches_scalar():
    scalar = FilterCondition(property=StatsProperty.EVENT_PAGE, value="/blog")
    single = FilterCondition(property=StatsProperty.EVENT_PAGE, value=AnyOf(values=["/blog"]))
    assert PlausibleFilterCompiler.compile_condition(single) == PlausibleFilterCompiler.compile_condition(scalar)

# ----------------------------
# Groups
# ----------------------------

def test_and_group(page_filter, hostname_filter):
    filters = FilterGroup(operator=Combinator.AND, children=[page_filter, hostname_filter])
    assert serialize_filters(filters) == "event:page==/dashboard*|/love*;event:hostname==socket.dev"

def test_or_root_with_nested_and_group(hostname_filter):
    nested = FilterGroup.all_of(
        FilterCondition(property=StatsProperty.VISIT_SOURCE, value="Google"),
        FilterCondition(property=StatsProperty.VISIT_DEVICE, value="Mobile"),
    )
    filters = FilterGroup.any_of(nested, hostname_filter)
    assert serialize_filters(filters) == "(visit:source==Google;visit:device==Mobile)|event:hostname==socket.dev"

def test_root_with_single_condition(hostname_filter):
    filters = FilterGroup.any_of(hostname_filter)
    assert serialize_filters(filters) == "event:hostname==socket.dev"

def test_single_child_group_is_not_wrapped(hostname_filter, page_filter):
    filters = FilterGroup.all_of(FilterGroup.any_of(hostname_filter), page_filter)
    assert serialize_filters(filters) == "event:hostname==socket.dev;event:page==/dashboard*|/love*"

def test_nested_group_wrapped_even_with_same_combinator(hostname_filter, page_filter):
    nested = FilterGroup.all_of(hostname_filter, page_filter)
    filters = FilterGroup.all_of(nested, hostname_filter)
    assert serialize_filters(filters) == (
        "(event:hostname==socket.dev;event:page==/dashboard*|/love*);event:hostname==socket.dev"
    )

def test_deep_nesting_wraps_each_multi_child_group(hostname_filter):
    browser = FilterCondition(property=StatsProperty.VISIT_BROWSER, value="Chrome")
    os_filter = FilterCondition(property=StatsProperty.VISIT_OS, value="Mac", operator=FilterOperator.NOT_EQUALS)
    inner = FilterGroup.any_of(browser, os_filter)
    middle = FilterGroup.all_of(inner, hostname_filter)
    filters = FilterGroup.any_of(middle, FilterGroup.all_of(FilterGroup.all_of(browser)))
    assert serialize_filters(filters) == (
        "((visit:browser==Chrome|visit:os!=Mac);event:hostname==socket.dev)|visit:browser==Chrome"
    )

def test_serialization_is_deterministic(page_filter, hostname_filter):
    filters = FilterGroup.any_of(FilterGroup.all_of(page_filter, hostname_filter), hostname_filter)
    assert serialize_filters(filters) == serialize_filters(filters)

def test_compile_accepts_filter_group(compiler, hostname_filter):
    assert compiler.compile(FilterGroup.all_of(hostname_filter)) == "event:hostname==socket.dev"

# ----------------------------
# DSL input
# ----------------------------

def test_compile_dsl_dict(compiler):
    dsl = {
        "operator": ";",
        "children": [
            {
                "property": "event:page",
                "operator": "==",
                "value": {"operator": "|", "values": ["/dashboard*", "/love*"]}
            },
            {"property": "event:hostname", "operator": "==", "value": "socket.dev"}
        ]
    }
    assert compiler.compile(dsl) == "event:page==/dashboard*|/love*;event:hostname==socket.dev"

def test_compile_dsl_json_with_named_combinators(compiler):
    dsl = """
    {
      "operator": "OR",
      "children": [
        {"operator": "AND", "children": [
          {"property": "visit:source", "value": "Google"},
          {"property": "visit:country", "operator": "!=", "value": "US"}
        ]},
        {"property": "event:goal", "value": "Signup"}
      ]
    }
    """
    assert compiler.compile(dsl) == "(visit:source==Google;visit:country!=US)|event:goal==Signup"

def test_dsl_invalid_json(compiler):
    with pytest.raises(FilterCompilationError) as excinfo:
        compiler.compile("{not json")
    assert "parse error" in str(excinfo.value)

def test_dsl_root_must_be_group(compiler):
    with pytest.raises(FilterCompilationError) as excinfo:
        compiler.compile({"property": "event:page", "value": "/"})
    assert "root must be a group" in str(excinfo.value)

def test_dsl_unknown_property(compiler):
    dsl = {"operator": ";", "children": [{"property": "event:unknown", "value": "x"}]}
    with pytest.raises(FilterCompilationError):
        compiler.compile(dsl)

def test_dsl_empty_children(compiler):
    with pytest.raises(FilterCompilationError) as excinfo:
        compiler.compile({"operator": "|", "children": []})
    assert "at least one child" in str(excinfo.value)

def test_dsl_any_of_with_not_equals(compiler):
    dsl = {
        "operator": ";",
        "children": [
            {"property": "event:page", "operator": "!=", "value": {"operator": "|", "values": ["/a", "/b"]}}
        ]
    }
    with pytest.raises(FilterCompilationError) as excinfo:
        compiler.compile(dsl)
    assert "only allowed with the '==' operator" in str(excinfo.value)

def test_dsl_children_must_be_list(compiler):
    with pytest.raises(FilterCompilationError) as excinfo:
        compiler.compile({"operator": ";", "children": "event:page==/"})
    assert "'children' must be a list" in str(excinfo.value)

# ----------------------------
# extract_properties
# ----------------------------

def test_extract_properties_first_seen_order(compiler, page_filter, hostname_filter):
    filters = FilterGroup.any_of(
        FilterGroup.all_of(hostname_filter, page_filter),
        FilterCondition(property=StatsProperty.EVENT_HOSTNAME, value="example.com"),
    )
    assert compiler.extract_properties(filters) == [StatsProperty.EVENT_HOSTNAME, StatsProperty.EVENT_PAGE]

def test_dsl_any_of_operator_must_be_pipe(compiler):
    dsl = {
        "operator": ";",
        "children": [
            {"property": "event:page", "operator": "==", "value": {"operator": ";", "values": ["/a", "/b"]}}
        ]
    }
    with pytest.raises(FilterCompilationError) as excinfo:
        compiler.compile(dsl)
    assert "any-of operator must be '|'" in str(excinfo.value)

def test_dsl_any_of_without_operator_defaults_to_pipe(compiler):
    dsl = {"operator": ";", "children": [{"property": "event:page", "value": {"values": ["/a", "/b"]}}]}
    assert compiler.compile(dsl) == "event:page==/a|/b"
