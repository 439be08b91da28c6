import asyncio
import logging
import re
from typing import Optional

import requests

from repo_icons.config import ApiMessage, RepoResponse, Settings, parse_repo_response
from repo_icons.constants import HTML_MEDIA_TYPE, JSON_MEDIA_TYPE
from repo_icons.exceptions import (
    ApiError,
    AuthenticationError,
    FetchFailedError,
    RateLimitError,
    RepositoryNotFoundError,
)
from repo_icons.interfaces import RepositoryClientInterface

logger = logging.getLogger(__name__)


# Utilities
def sanitize_log(data) -> str:
    """Extract useful fields from GitHub error, hide tokens."""
    if isinstance(data, dict):
        useful = {k: data[k] for k in ("message", "documentation_url") if k in data}
        text = str(useful) if useful else str(data)[:200]
    else:
        text = str(data)[:500]

    for pattern in [r"ghp_\w+", r"gho_\w+", r"github_pat_\w+", r"Bearer\s+[\w.-]+"]:
        text = re.sub(pattern, "***", text, flags=re.IGNORECASE)
    return text


def error_from_message(message: ApiMessage) -> ApiError:
    """Map a GitHub error payload onto the matching exception."""
    text = message.message
    lowered = text.lower()

    if message.status == 404 or lowered == "not found":
        return RepositoryNotFoundError(text, message.status)
    if message.status == 401 or "bad credentials" in lowered:
        return AuthenticationError(text, message.status)
    if "rate limit" in lowered:
        return RateLimitError(text, message.status)
    return ApiError(text, message.status)


# Client Implementation
class GitHubClient(RepositoryClientInterface):
    """GitHub REST client for repository metadata and rendered READMEs."""

    def __init__(self, settings: Settings):
        self._settings = settings
        self._session: Optional[requests.Session] = requests.Session()
        self._session.headers.update({
            "User-Agent": settings.user_agent,
            "Accept": JSON_MEDIA_TYPE,
        })
        token = settings.token()
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    def get_repo(self, owner: str, repo: str) -> RepoResponse:
        response = self._get(f"repos/{owner}/{repo}")
        try:
            payload = response.json()
        except ValueError as e:
            raise FetchFailedError(
                f"Invalid JSON for {owner}/{repo} (HTTP {response.status_code})"
            ) from e

        result = parse_repo_response(payload, response.status_code)
        if isinstance(result, ApiMessage):
            logger.debug(f"API message for {owner}/{repo}: {sanitize_log(payload)}")
        return result

    def get_readme_html(self, owner: str, repo: str) -> str:
        response = self._get(f"repos/{owner}/{repo}/readme", accept=HTML_MEDIA_TYPE)
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise FetchFailedError(
                f"README request failed for {owner}/{repo}: HTTP {response.status_code}"
            ) from e
        return response.text

    async def fetch_repo(self, owner: str, repo: str) -> RepoResponse:
        return await asyncio.to_thread(self.get_repo, owner, repo)

    async def fetch_readme_html(self, owner: str, repo: str) -> str:
        return await asyncio.to_thread(self.get_readme_html, owner, repo)

    def _get(self, path: str, accept: Optional[str] = None) -> requests.Response:
        if self._session is None:
            raise FetchFailedError("Client is closed")

        url = f"{self._settings.api_url}/{path}"
        headers = {"Accept": accept} if accept else None
        try:
            return self._session.get(url, headers=headers, timeout=self._settings.request_timeout)
        except requests.RequestException as e:
            raise FetchFailedError(f"Request to {url} failed: {sanitize_log(e)}") from e

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
            logger.debug("GitHub session closed")

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
