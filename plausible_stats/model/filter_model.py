from enum import Enum
from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from plausible_stats.constants.app_message import AppMessage
from plausible_stats.constants.stats_property import StatsProperty


class FilterOperator(str, Enum):
    """Comparison operators understood by the filters parameter"""
    EQUALS = "=="
    NOT_EQUALS = "!="


class Combinator(str, Enum):
    """Logical joiners between the children of a group"""
    AND = ";"
    OR = "|"


class AnyOf(BaseModel):
    """A set of alternative values, any of which satisfies an equality condition"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["any_of"] = "any_of"
    values: Tuple[str, ...]

    @field_validator("values")
    @classmethod
    def check_not_empty(cls, values: Tuple[str, ...]) -> Tuple[str, ...]:
        if not values:
            raise ValueError(AppMessage.EMPTY_ANY_OF)
        return values


class FilterCondition(BaseModel):
    """Leaf node: a single property comparison"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["condition"] = "condition"
    property: StatsProperty
    operator: FilterOperator = FilterOperator.EQUALS
    value: Union[str, AnyOf]

    @model_validator(mode="after")
    def check_any_of_operator(self) -> "FilterCondition":
        if isinstance(self.value, AnyOf) and self.operator is not FilterOperator.EQUALS:
            raise ValueError(AppMessage.ANY_OF_NOT_EQUALS)
        return self


FilterNode = Annotated[Union["FilterGroup", FilterCondition], Field(discriminator="kind")]


class FilterGroup(BaseModel):
    """Internal node: children joined with AND (;) or OR (|)"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["group"] = "group"
    operator: Combinator = Combinator.AND
    children: Tuple[FilterNode, ...]

    @field_validator("children")
    @classmethod
    def check_not_empty(cls, children: Tuple) -> Tuple:
        if not children:
            raise ValueError(AppMessage.EMPTY_GROUP)
        return children

    @classmethod
    def all_of(cls, *children: Union["FilterGroup", FilterCondition]) -> "FilterGroup":
        return cls(operator=Combinator.AND, children=children)

    @classmethod
    def any_of(cls, *children: Union["FilterGroup", FilterCondition]) -> "FilterGroup":
        return cls(operator=Combinator.OR, children=children)


FilterGroup.model_rebuild()
