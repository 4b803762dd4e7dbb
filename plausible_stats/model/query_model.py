from datetime import date, datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from plausible_stats.constants.app_message import AppMessage
from plausible_stats.constants.metric import Metric
from plausible_stats.constants.period import Interval, Period
from plausible_stats.constants.stats_property import StatsProperty
from plausible_stats.model.filter_model import FilterGroup


class DateRange(BaseModel):
    """Inclusive range of days for the custom period"""
    from_date: date
    to_date: date

    @field_validator("from_date", "to_date", mode="before")
    @classmethod
    def truncate_datetime(cls, value):
        # aware datetimes are taken in UTC
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone(timezone.utc)
            return value.date()
        return value

    @model_validator(mode="after")
    def check_order(self) -> "DateRange":
        if self.from_date > self.to_date:
            raise ValueError(AppMessage.INVALID_DATE_RANGE)
        return self


class StatsQuery(BaseModel):
    """Options shared by the aggregate, timeseries and breakdown endpoints"""
    period: Optional[Period] = None
    metrics: List[Metric] = Field(default_factory=list)
    filters: Optional[FilterGroup] = None
    date: Optional[DateRange] = None

    @model_validator(mode="after")
    def check_custom_period(self):
        if self.period is Period.CUSTOM and self.date is None:
            raise ValueError(AppMessage.CUSTOM_PERIOD_REQUIRES_DATE)
        if self.date is not None and self.period is not Period.CUSTOM:
            raise ValueError(AppMessage.DATE_REQUIRES_CUSTOM_PERIOD)
        return self


class AggregateQuery(StatsQuery):
    compare: bool = False


class TimeseriesQuery(StatsQuery):
    interval: Optional[Interval] = None


class BreakdownQuery(StatsQuery):
    property: StatsProperty
    limit: Optional[int] = Field(None, ge=1)
    page: Optional[int] = Field(None, ge=1)
