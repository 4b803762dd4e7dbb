from typing import Optional

import httpx

from plausible_stats.model.client_config import ClientConfig
from plausible_stats.repositories.stats_repository import StatsRepository
from plausible_stats.services.stats_service import StatsService

_client_config: Optional[ClientConfig] = None
_http_client: Optional[httpx.Client] = None
_stats_repository: Optional[StatsRepository] = None
_stats_service: Optional[StatsService] = None


def get_client_config() -> ClientConfig:
    """Dependency provider for ClientConfig (singleton, read from the environment)"""
    global _client_config

    if _client_config is None:
        _client_config = ClientConfig.from_env()

    return _client_config


def get_http_client() -> httpx.Client:
    global _http_client

    if _http_client is None:
        _http_client = httpx.Client(timeout=get_client_config().timeout)

    return _http_client


def get_stats_repository() -> StatsRepository:
    global _stats_repository

    if _stats_repository is None:
        _stats_repository = StatsRepository(client=get_http_client(), config=get_client_config())

    return _stats_repository


def get_stats_service() -> StatsService:
    """Dependency provider for StatsService (singleton)"""
    global _stats_service

    if _stats_service is None:
        _stats_service = StatsService(stats_repo=get_stats_repository())

    return _stats_service
