from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from plausible_stats.constants.app_constants import AppConstants
from plausible_stats.constants.stats_property import StatsProperty


class AggregateResult(BaseModel):
    """
    One metric of an aggregate query. `change` is the percentage difference
    against the previous period and is only present when compare was requested.
    """
    value: Optional[float] = None
    change: Optional[float] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "AggregateResult":
        return cls(value=item.get(AppConstants.VALUE), change=item.get(AppConstants.CHANGE))


class Datapoint(BaseModel):
    """One row of a timeseries: the bucket date and its metric values"""
    date: str
    metrics: Dict[str, Optional[float]] = Field(default_factory=dict)

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "Datapoint":
        metrics = {k: v for k, v in item.items() if k != AppConstants.DATE}
        return cls(date=item[AppConstants.DATE], metrics=metrics)


class BreakdownRow(BaseModel):
    """
    One row of a breakdown. `dimension` is the property key the row is grouped
    by (e.g. "page" for event:page) and `value` is that key's value.
    """
    dimension: str
    value: Optional[str] = None
    metrics: Dict[str, Optional[float]] = Field(default_factory=dict)

    @classmethod
    def from_api(cls, item: Dict[str, Any], stats_property: StatsProperty) -> "BreakdownRow":
        dimension = stats_property.key
        raw_value = item.get(dimension)
        metrics = {k: v for k, v in item.items() if k != dimension}
        return cls(
            dimension=dimension,
            value=None if raw_value is None else str(raw_value),
            metrics=metrics,
        )
