import json
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from plausible_stats.constants.app_constants import AppConstants
from plausible_stats.constants.app_message import AppMessage
from plausible_stats.constants.stats_property import StatsProperty
from plausible_stats.model.filter_model import (
    AnyOf,
    Combinator,
    FilterCondition,
    FilterGroup,
)

"""
================================================================================
Plausible Filter Compiler – Usage Guide
================================================================================
Purpose:
    Serializes a filter tree (FilterGroup / FilterCondition) into the compact
    string grammar of the Stats API `filters` query parameter:

      - condition:        event:page==/blog      visit:country!=DE
      - any-of value:     event:page==/blog|/docs
      - AND group:        a;b
      - OR group:         a|b
      - nested groups:    (a;b)|c

-------------------------------------------------------------------------------
1. BASIC USAGE
-------------------------------------------------------------------------------
    from plausible_stats.utils.filter_compiler import serialize_filters

    filters = FilterGroup.all_of(
        FilterCondition(property=StatsProperty.EVENT_PAGE,
                        value=AnyOf(values=["/dashboard*", "/love*"])),
        FilterCondition(property=StatsProperty.EVENT_HOSTNAME, value="socket.dev"),
    )
    print(serialize_filters(filters))
    # Output: event:page==/dashboard*|/love*;event:hostname==socket.dev

-------------------------------------------------------------------------------
2. GROUPING RULES
-------------------------------------------------------------------------------
    - A nested group with two or more children is wrapped in parentheses.
    - A nested group with exactly one child is rendered as that child.
    - The root group is never wrapped.
    Wrapping depends only on the child count, not on whether the parent uses a
    different combinator, so (a;b) is still wrapped inside an AND parent.

-------------------------------------------------------------------------------
3. DSL INPUT
-------------------------------------------------------------------------------
    compile() also takes a dict or JSON string:

    {
      "operator": ";",                      # or "AND" / "OR" / "|"
      "children": [
        {"property": "event:page", "operator": "==",
         "value": {"operator": "|", "values": ["/a", "/b"]}},
        {"operator": "|", "children": [...]}
      ]
    }

    Malformed DSL raises FilterCompilationError. Typed trees are validated
    when they are built, so serializing them never fails.
================================================================================
"""


class FilterCompilationError(Exception):
    pass


class PlausibleFilterCompiler:
    """
    Compile a filter tree into the Stats API filters string.
    """

    COMBINATOR_ALIASES = {
        'AND': Combinator.AND.value,
        'OR': Combinator.OR.value,
    }

    # -------------------------
    # compilation: condition & groups
    # -------------------------
    @staticmethod
    def compile_condition(condition: FilterCondition) -> str:
        value = condition.value
        if isinstance(value, AnyOf):
            value = AppConstants.ANY_OF_SEPARATOR.join(value.values)
        return f"{condition.property.value}{condition.operator.value}{value}"

    @classmethod
    def compile_group(cls, group: FilterGroup) -> str:
        compiled_parts: List[str] = []
        for child in group.children:
            if isinstance(child, FilterCondition):
                compiled_parts.append(cls.compile_condition(child))
            elif len(child.children) > 1:
                compiled_parts.append(f"({cls.compile_group(child)})")
            else:
                compiled_parts.append(cls.compile_group(child))

        return group.operator.value.join(compiled_parts)

    def compile(self, dsl: Union[str, Dict[str, Any], FilterGroup]) -> str:
        """
        Top-level compile function.
        dsl can be a FilterGroup, a dict (JSON object) or a JSON string
        """
        if isinstance(dsl, FilterGroup):
            return self.compile_group(dsl)
        return self.compile_group(self.parse_dsl(dsl))

    # -------------------------
    # DSL parsing
    # -------------------------
    def parse_dsl(self, dsl: Union[str, Dict[str, Any]]) -> FilterGroup:
        """
        Build a validated FilterGroup from a dict or JSON string. Nodes may omit
        the `kind` tag: anything with `children` is a group, anything else a
        condition.
        """
        if isinstance(dsl, str):
            try:
                dsl = json.loads(dsl)
            except json.JSONDecodeError as e:
                raise FilterCompilationError(f"{AppMessage.DSL_PARSE_ERROR}: {e}") from e

        if not isinstance(dsl, dict):
            raise FilterCompilationError(f"{AppMessage.INVALID_DSL}: root must be an object")
        if 'children' not in dsl:
            raise FilterCompilationError(f"{AppMessage.INVALID_DSL}: root must be a group")

        try:
            return FilterGroup.model_validate(self._tag_node(dsl))
        except ValidationError as e:
            raise FilterCompilationError(f"{AppMessage.INVALID_DSL}: {e}") from e

    def _tag_node(self, node: Any) -> Any:
        if not isinstance(node, dict):
            raise FilterCompilationError(f"{AppMessage.INVALID_DSL}: every node must be an object")

        if 'children' in node:
            children = node['children']
            if not isinstance(children, list):
                raise FilterCompilationError(f"{AppMessage.INVALID_DSL}: 'children' must be a list")
            operator = node.get('operator', Combinator.AND.value)
            return {
                'kind': 'group',
                'operator': self.COMBINATOR_ALIASES.get(operator, operator),
                'children': [self._tag_node(child) for child in children],
            }

        tagged = dict(node)
        tagged['kind'] = 'condition'
        value = tagged.get('value')
        if isinstance(value, dict):
            # {"operator": "|", "values": [...]} is the any-of shape
            if value.get('operator', AppConstants.ANY_OF_SEPARATOR) != AppConstants.ANY_OF_SEPARATOR:
                raise FilterCompilationError(f"{AppMessage.INVALID_DSL}: any-of operator must be '|'")
            tagged['value'] = {'kind': 'any_of', 'values': value.get('values')}
        return tagged

    # -------------------------
    # inspection
    # -------------------------
    def extract_properties(self, group: FilterGroup) -> List[StatsProperty]:
        """
        Distinct properties referenced anywhere in the tree, in first-seen order.
        """
        seen: List[StatsProperty] = []

        def process_node(node: Union[FilterGroup, FilterCondition]):
            if isinstance(node, FilterGroup):
                for child in node.children:
                    process_node(child)
            elif node.property not in seen:
                seen.append(node.property)

        process_node(group)
        return seen


def serialize_filters(node: FilterGroup) -> str:
    return PlausibleFilterCompiler.compile_group(node)
