from typing import Protocol, Tuple, runtime_checkable

from repo_icons.config import RepoResponse


RepoId = Tuple[str, str]


# Interfaces
@runtime_checkable
class RepoResolverInterface(Protocol):
    # Protocol for repository identity lookups (renames and redirects included)

    async def is_same_repo(self, first: RepoId, second: RepoId) -> bool:
        # Whether two (owner, repo) pairs denote the same repository
        ...


@runtime_checkable
class RepositoryClientInterface(Protocol):
    # Protocol for fetching repository metadata and the rendered README

    async def fetch_repo(self, owner: str, repo: str) -> RepoResponse:
        # Repository metadata or the API error message
        ...

    async def fetch_readme_html(self, owner: str, repo: str) -> str:
        # README body rendered to HTML
        ...

    def close(self) -> None:
        # Close any open connections
        ...
