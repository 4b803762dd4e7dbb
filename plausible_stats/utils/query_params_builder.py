from typing import List, Optional, Sequence, Tuple

from plausible_stats.constants.app_constants import AppConstants
from plausible_stats.constants.metric import Metric
from plausible_stats.model.query_model import AggregateQuery, BreakdownQuery, TimeseriesQuery
from plausible_stats.utils.datetime_utils import format_date_range
from plausible_stats.utils.filter_compiler import serialize_filters

QueryParams = List[Tuple[str, str]]


class QueryParamsBuilder:
    """
    Maps query models to ordered (name, value) pairs. Unset options are left out;
    site_id is attached by the repository.
    """

    @staticmethod
    def _join_metrics(metrics: Sequence[Metric]) -> Optional[str]:
        if not metrics:
            return None
        return AppConstants.LIST_SEPARATOR.join(metric.value for metric in metrics)

    @staticmethod
    def build_aggregate_params(query: AggregateQuery) -> QueryParams:
        params: QueryParams = []
        if query.period:
            params.append((AppConstants.PERIOD, query.period.value))
        metrics = QueryParamsBuilder._join_metrics(query.metrics)
        if metrics:
            params.append((AppConstants.METRICS, metrics))
        if query.compare:
            params.append((AppConstants.COMPARE, AppConstants.COMPARE_PREVIOUS_PERIOD))
        if query.filters is not None:
            params.append((AppConstants.FILTERS, serialize_filters(query.filters)))
        if query.date is not None:
            params.append((AppConstants.DATE, format_date_range(query.date)))
        return params

    @staticmethod
    def build_timeseries_params(query: TimeseriesQuery) -> QueryParams:
        params: QueryParams = []
        if query.period:
            params.append((AppConstants.PERIOD, query.period.value))
        if query.filters is not None:
            params.append((AppConstants.FILTERS, serialize_filters(query.filters)))
        metrics = QueryParamsBuilder._join_metrics(query.metrics)
        if metrics:
            params.append((AppConstants.METRICS, metrics))
        if query.interval:
            params.append((AppConstants.INTERVAL, query.interval.value))
        if query.date is not None:
            params.append((AppConstants.DATE, format_date_range(query.date)))
        return params

    @staticmethod
    def build_breakdown_params(query: BreakdownQuery) -> QueryParams:
        params: QueryParams = [(AppConstants.PROPERTY, query.property.value)]
        if query.period:
            params.append((AppConstants.PERIOD, query.period.value))
        metrics = QueryParamsBuilder._join_metrics(query.metrics)
        if metrics:
            params.append((AppConstants.METRICS, metrics))
        if query.limit:
            params.append((AppConstants.LIMIT, str(query.limit)))
        if query.page:
            params.append((AppConstants.PAGE, str(query.page)))
        if query.filters is not None:
            params.append((AppConstants.FILTERS, serialize_filters(query.filters)))
        if query.date is not None:
            params.append((AppConstants.DATE, format_date_range(query.date)))
        return params
