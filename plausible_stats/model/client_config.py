import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from plausible_stats.constants.app_constants import AppConstants
from plausible_stats.constants.app_message import AppMessage


class ClientConfig(BaseModel):
    """Connection settings for a single Plausible site"""
    api_key: str = Field(..., min_length=1)
    site_id: str = Field(..., min_length=1)
    base_url: str = AppConstants.DEFAULT_BASE_URL
    timeout: float = Field(AppConstants.DEFAULT_TIMEOUT, gt=0)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, base_url: str) -> str:
        return base_url.rstrip("/")

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Build the config from PLAUSIBLE_* environment variables (a .env file is
        loaded first if present).
        """
        load_dotenv()
        missing = [name for name in (AppConstants.ENV_API_KEY, AppConstants.ENV_SITE_ID) if not os.getenv(name)]
        if missing:
            raise ValueError(f"{AppMessage.MISSING_ENV}: {', '.join(missing)}")

        return cls(
            api_key=os.getenv(AppConstants.ENV_API_KEY),
            site_id=os.getenv(AppConstants.ENV_SITE_ID),
            base_url=os.getenv(AppConstants.ENV_BASE_URL, AppConstants.DEFAULT_BASE_URL),
            timeout=float(os.getenv(AppConstants.ENV_TIMEOUT, AppConstants.DEFAULT_TIMEOUT)),
        )
