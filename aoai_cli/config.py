from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_DEPLOYMENT_ID = "gpt-4o"
DEFAULT_MESSAGE = "Hello, how are you?"
DEFAULT_API_VERSION = "2024-12-01-preview"


class Settings(BaseSettings):
  azure_openai_api_key: str | None = Field(default=None, alias="AZURE_OPENAI_API_KEY")
  azure_openai_endpoint: str = Field(default="", alias="AZURE_OPENAI_ENDPOINT")
  azure_openai_api_version: str = Field(default=DEFAULT_API_VERSION, alias="AZURE_OPENAI_API_VERSION")
  azure_openai_deployment_name: str | None = Field(default=None, alias="AZURE_OPENAI_DEPLOYMENT_NAME")

  def ensure_endpoint(self) -> str:
    return normalize_endpoint(self.azure_openai_endpoint)

  class Config:
    case_sensitive = False


def normalize_endpoint(endpoint: str | None) -> str:
  endpoint = (endpoint or "").strip()
  if not endpoint:
    return ""
  return endpoint.rstrip("/") + "/"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  return Settings()  # type: ignore[arg-type]


@dataclass(frozen=True)
class CommandConfig:
  """Flag values for one ``chatcompletion`` invocation."""

  model_deployment_id: str = DEFAULT_DEPLOYMENT_ID
  endpoint: str = ""
  api_key: str = field(default="", repr=False)
  message: str = DEFAULT_MESSAGE
  api_version: str = DEFAULT_API_VERSION
  use_default_credential: bool = False

  def missing_fields(self) -> list[str]:
    missing: list[str] = []
    if not self.endpoint.strip():
      missing.append("azureOpenAIEndpoint")
    if not self.api_key.strip() and not self.use_default_credential:
      missing.append("azureOpenAIKey")
    if not self.model_deployment_id.strip():
      missing.append("modelDeploymentID")
    if not self.message.strip():
      missing.append("message")
    return missing
