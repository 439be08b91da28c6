import asyncio
import logging
from typing import Dict, Optional

from github import Auth, Github, GithubException, UnknownObjectException

from repo_icons.config import Settings, get_settings
from repo_icons.github_client import sanitize_log
from repo_icons.interfaces import RepoId, RepoResolverInterface

logger = logging.getLogger(__name__)


def _normalize(repo_id: RepoId) -> RepoId:
    owner, repo = repo_id
    return owner.lower(), repo.lower()


# Resolver Implementation
class RepoResolver(RepoResolverInterface):
    """Resolves (owner, repo) pairs to canonical names, following renames."""

    def __init__(self, settings: Optional[Settings] = None, github: Optional[Github] = None):
        self._settings = settings
        self._github = github
        self._resolved: Dict[RepoId, "asyncio.Future[Optional[str]]"] = {}

    async def is_same_repo(self, first: RepoId, second: RepoId) -> bool:
        first, second = _normalize(first), _normalize(second)
        if first == second:
            return True

        first_name, second_name = await asyncio.gather(
            self.resolve(*first),
            self.resolve(*second),
        )
        return first_name is not None and first_name == second_name

    async def resolve(self, owner: str, repo: str) -> Optional[str]:
        """Canonical lower-cased ``owner/repo`` or None when it doesn't exist."""
        key = _normalize((owner, repo))
        # concurrent callers share the in-flight lookup
        lookup = self._resolved.get(key)
        if lookup is None:
            lookup = self._resolved[key] = asyncio.ensure_future(asyncio.to_thread(self._lookup, *key))
        elif lookup.done():
            # settled lookups stay usable from a later event loop
            return lookup.result()
        return await lookup

    def _lookup(self, owner: str, repo: str) -> Optional[str]:
        try:
            full_name = self._client().get_repo(f"{owner}/{repo}").full_name
        except UnknownObjectException:
            logger.debug(f"Repository not found: {owner}/{repo}")
            return None
        except GithubException as e:
            logger.warning(f"Could not resolve {owner}/{repo}: {sanitize_log(e.data)}")
            return None

        if full_name.lower() != f"{owner}/{repo}":
            logger.debug(f"Resolved {owner}/{repo} -> {full_name}")
        return full_name.lower()

    def _client(self) -> Github:
        if self._github is None:
            settings = self._settings or get_settings()
            token = settings.token()
            auth = Auth.Token(token) if token else None
            self._github = Github(
                auth=auth,
                base_url=settings.api_url,
                timeout=int(settings.request_timeout),
                user_agent=settings.user_agent,
            )
        return self._github

    def close(self) -> None:
        if self._github is not None:
            self._github.close()
            self._github = None
