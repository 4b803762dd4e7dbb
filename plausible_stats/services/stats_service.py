import logging
from typing import Any, Dict, List

from plausible_stats.constants.app_constants import AppConstants
from plausible_stats.constants.app_message import AppMessage
from plausible_stats.model.query_model import AggregateQuery, BreakdownQuery, TimeseriesQuery
from plausible_stats.model.result_model import AggregateResult, BreakdownRow, Datapoint
from plausible_stats.repositories.stats_repository import StatsRepository
from plausible_stats.utils.query_params_builder import QueryParamsBuilder

logger = logging.getLogger(__name__)


class StatsService:
    def __init__(self, stats_repo: StatsRepository):
        self.stats_repo = stats_repo
        logger.info("Initialized StatsService")

    @staticmethod
    def _results(response: Any) -> Any:
        if not isinstance(response, dict) or AppConstants.RESULTS not in response:
            raise ValueError(AppMessage.MISSING_RESULTS)
        return response[AppConstants.RESULTS]

    def get_realtime(self) -> int:
        """
        Number of current visitors, i.e. visitors who triggered a pageview in
        the last 5 minutes.
        """
        try:
            response = self.stats_repo.get(AppConstants.REALTIME_VISITORS_PATH)
            if isinstance(response, bool) or not isinstance(response, (int, float)):
                raise ValueError(f"{AppMessage.UNEXPECTED_REALTIME_PAYLOAD}: {response!r}")
            return int(response)
        except Exception as e:
            logger.error(f"Error fetching realtime visitors: {str(e)}", exc_info=True)
            raise

    def get_aggregate(self, query: AggregateQuery) -> Dict[str, AggregateResult]:
        """
        Aggregate metrics over the query period (the top row of the dashboard:
        visitors, pageviews, bounce rate, visit duration...).
        """
        try:
            params = QueryParamsBuilder.build_aggregate_params(query)
            results = self._results(self.stats_repo.get(AppConstants.AGGREGATE_PATH, params))
            return {metric: AggregateResult.from_api(item) for metric, item in results.items()}
        except Exception as e:
            logger.error(f"Error fetching aggregate stats: {str(e)}", exc_info=True)
            raise

    def get_timeseries(self, query: TimeseriesQuery) -> List[Datapoint]:
        """
        Metrics bucketed by date or month (the main visitor graph).
        """
        try:
            params = QueryParamsBuilder.build_timeseries_params(query)
            results = self._results(self.stats_repo.get(AppConstants.TIMESERIES_PATH, params))
            return [Datapoint.from_api(item) for item in results]
        except Exception as e:
            logger.error(f"Error fetching timeseries: {str(e)}", exc_info=True)
            raise

    def get_breakdown(self, query: BreakdownQuery) -> List[BreakdownRow]:
        """
        Metrics grouped by a property, like GROUP BY in SQL.
        """
        try:
            params = QueryParamsBuilder.build_breakdown_params(query)
            results = self._results(self.stats_repo.get(AppConstants.BREAKDOWN_PATH, params))
            return [BreakdownRow.from_api(item, query.property) for item in results]
        except Exception as e:
            logger.error(f"Error fetching breakdown by {query.property.value}: {str(e)}", exc_info=True)
            raise
