from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

from kyc_client.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS

# Ensure environment variables from the repository root .env are available
# regardless of the working directory used to start the process.
ROOT_DIR = Path(__file__).resolve().parents[1]
load_dotenv(ROOT_DIR / ".env")


class Settings(BaseSettings):
  kyc_api_key: str | None = Field(default=None, alias="KYC_API_KEY")
  kyc_base_url: str = Field(default=DEFAULT_BASE_URL, alias="KYC_BASE_URL")
  kyc_timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, alias="KYC_TIMEOUT_SECONDS")
  log_level: str = Field(default="INFO", alias="LOG_LEVEL")

  def ensure_base_url(self) -> str:
    base_url = (self.kyc_base_url or "").strip()
    if not base_url:
        return ""
    return base_url.rstrip("/")

  class Config:
    case_sensitive = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  return Settings()  # type: ignore[arg-type]
