import logging
from typing import Any, Dict, Optional, Sequence, Tuple

import httpx

from plausible_stats.constants.app_constants import AppConstants
from plausible_stats.model.client_config import ClientConfig

logger = logging.getLogger(__name__)


class PlausibleApiError(Exception):
    """The Stats API answered with an `error` field in the response body"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class StatsRepository:

    def __init__(self, client: httpx.Client, config: ClientConfig):
        self.client = client
        self.config = config
        logger.info(f"Initialized StatsRepository for site: {self.config.site_id} ({self.config.base_url})")

    def _get_headers(self) -> Dict[str, str]:
        return {
            AppConstants.AUTHORIZATION: f"Bearer {self.config.api_key}",
            AppConstants.CONTENT_TYPE: AppConstants.APPLICATION_JSON,
        }

    def get(self, path: str, params: Optional[Sequence[Tuple[str, str]]] = None) -> Any:
        """
        Issue a GET against the Stats API and return the decoded JSON body.

        Raises PlausibleApiError when the body carries an `error` message and
        lets httpx errors (connection problems, non-JSON error statuses)
        propagate untouched.
        """
        request_params = list(params or [])
        # every request is scoped to the configured site
        request_params.append((AppConstants.SITE_ID, self.config.site_id))
        endpoint = f"{self.config.base_url}/{path}"

        logger.debug(f"GET {endpoint}")
        logger.debug(f"With params: {request_params}")
        response = self.client.get(endpoint, params=request_params, headers=self._get_headers())

        payload = self._parse_body(response)
        if isinstance(payload, dict) and payload.get(AppConstants.ERROR):
            logger.error(f"Stats API error ({response.status_code}) for {path}: {payload[AppConstants.ERROR]}")
            raise PlausibleApiError(payload[AppConstants.ERROR], status_code=response.status_code)

        response.raise_for_status()
        return payload

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            # not JSON: surface the HTTP status first if there is one
            response.raise_for_status()
            raise
