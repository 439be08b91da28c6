from functools import lru_cache
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings

from repo_icons.constants import (
    DEFAULT_API_URL,
    DEFAULT_USER_AGENT,
    REPO_REQUIRED_FIELDS,
    VALID_URL_SCHEMES,
)
from repo_icons.exceptions import ApiError
from repo_icons.urls import normalize_homepage


# Configuration
class Settings(BaseSettings):
    """GitHub access settings."""

    github_token: Optional[SecretStr] = None
    api_url: str = DEFAULT_API_URL
    request_timeout: float = Field(default=10.0, ge=1.0, le=120.0)
    user_agent: str = DEFAULT_USER_AGENT

    model_config = {"env_file": ".env", "extra": "ignore"}

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        if not v.startswith(tuple(f"{scheme}://" for scheme in VALID_URL_SCHEMES)):
            raise ValueError(f"Invalid API URL: {v}")
        return v.rstrip("/")

    def token(self) -> Optional[str]:
        return self.github_token.get_secret_value() if self.github_token else None


@lru_cache
def get_settings() -> Settings:
    return Settings()


# Models
class RepoOwner(BaseModel):
    login: str


class RepoMetadata(BaseModel):
    owner: RepoOwner
    name: str
    default_branch: str
    private: bool
    homepage: Optional[str] = None

    model_config = {"extra": "ignore"}

    @field_validator("homepage", mode="before")
    @classmethod
    def parse_homepage(cls, v: Any) -> Optional[str]:
        return normalize_homepage(v) if isinstance(v, str) else None


class ApiMessage(BaseModel):
    message: str
    documentation_url: Optional[str] = None
    status: Optional[int] = None

    model_config = {"extra": "ignore"}


RepoResponse = Union[RepoMetadata, ApiMessage]


def parse_repo_response(payload: Any, status: Optional[int] = None) -> RepoResponse:
    """Decide between repository data and an error message by the fields present."""
    if not isinstance(payload, dict):
        raise ApiError("Malformed repository response", status)

    if all(key in payload for key in REPO_REQUIRED_FIELDS):
        try:
            return RepoMetadata.model_validate(payload)
        except ValidationError as e:
            raise ApiError("Malformed repository response", status) from e

    if "message" in payload:
        return ApiMessage.model_validate({**payload, "status": status})

    raise ApiError("Malformed repository response", status)
