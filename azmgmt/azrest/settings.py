"""Configuration for connecting to Azure"""
from __future__ import annotations

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrySettings(BaseModel):
	"""How many times to retry requests to Azure, and how long to wait between polls"""

	retries: int = 0
	long_running_retries: int = 10
	retry_after: float = 5.0


class Settings(BaseSettings):
	"""
	Settings for the Azure REST client.

	Read from the environment with the prefix `AZMGMT_`, for example `AZMGMT_BASE_URL`.
	Nested settings use `__`, for example `AZMGMT_RETRY__RETRIES=3`.
	"""

	model_config = SettingsConfigDict(env_prefix="AZMGMT_", env_nested_delimiter="__")

	base_url: str = "https://management.azure.com"
	token_scope: str = "https://management.azure.com//.default"
	retry: RetrySettings = RetrySettings()
