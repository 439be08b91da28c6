import asyncio
import logging
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup

from repo_icons.config import ApiMessage, Settings, get_settings
from repo_icons.constants import LINK_BASE_TEMPLATE
from repo_icons.exceptions import FetchFailedError
from repo_icons.github_client import GitHubClient, error_from_message
from repo_icons.interfaces import RepoResolverInterface, RepositoryClientInterface
from repo_icons.primary_heading import PrimaryHeading
from repo_icons.readme_image import (
    ProjectLink,
    ReadmeImage,
    mark_primary_heading_edges,
    rank_images,
)
from repo_icons.repo_redirect import RepoResolver
from repo_icons.urls import (
    domain,
    first_path_segment,
    github_pages_user,
    parse_repo_path,
    qualify,
)

logger = logging.getLogger(__name__)


class Readme:
    """A repository's rendered README together with the identity needed to read it."""

    def __init__(
        self,
        owner: str,
        repo: str,
        body: str,
        private: bool,
        default_branch: str,
        homepage: Optional[str] = None,
        *,
        token: Optional[str] = None,
        settings: Optional[Settings] = None,
        resolver: Optional[RepoResolverInterface] = None,
    ):
        self.document = BeautifulSoup(body, "html.parser")
        self.link_base = LINK_BASE_TEMPLATE.format(
            owner=owner, repo=repo, branch=default_branch
        )
        self.owner = owner.lower()
        self.repo = repo.lower()
        self.private = private
        self.homepage = homepage
        self.token = token
        self._owns_resolver = resolver is None
        self._resolver = resolver or RepoResolver(settings)

    @classmethod
    async def load(
        cls,
        owner: str,
        repo: str,
        settings: Optional[Settings] = None,
        *,
        client: Optional[RepositoryClientInterface] = None,
        resolver: Optional[RepoResolverInterface] = None,
    ) -> "Readme":
        """Fetch metadata and the rendered README concurrently and build a Readme."""
        settings = settings or get_settings()
        owns_client = client is None
        client = client or GitHubClient(settings)

        repo_task = asyncio.ensure_future(client.fetch_repo(owner, repo))
        readme_task = asyncio.ensure_future(client.fetch_readme_html(owner, repo))
        try:
            try:
                response, body = await asyncio.gather(repo_task, readme_task)
            except FetchFailedError as e:
                # a missing or forbidden repository fails both requests, the metadata message says why
                response = await repo_task
                if isinstance(response, ApiMessage):
                    raise error_from_message(response) from e
                raise
        finally:
            if owns_client:
                client.close()

        if isinstance(response, ApiMessage):
            raise error_from_message(response)

        logger.info(f"Loaded README: {response.owner.login}/{response.name} ({response.default_branch})")
        return cls(
            response.owner.login,
            response.name,
            body,
            response.private,
            response.default_branch,
            response.homepage,
            token=settings.token(),
            settings=settings,
            resolver=resolver,
        )

    def close(self) -> None:
        if self._owns_resolver:
            self._resolver.close()

    def __enter__(self) -> "Readme":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    async def images(self) -> List[ReadmeImage]:
        """Extract every candidate image and rank them, best first."""
        primary_heading = PrimaryHeading(self.document)

        candidates = await asyncio.gather(*(
            ReadmeImage.get(self, element, primary_heading)
            for element in self.document.select("img[src]")
        ))
        images = [image for image in candidates if image is not None]

        mark_primary_heading_edges(images)
        images = rank_images(images)

        logger.debug(f"Ranked images: {[(image.src, image.weight) for image in images]}")
        return images

    async def is_link_to_project(self, url: str) -> Optional[ProjectLink]:
        """Check if a given url is a project link."""
        url_domain = domain(url)
        if url_domain is None:
            return None

        # OWNER.github.io or OWNER.github.io/REPO
        pages_user = github_pages_user(url)
        if pages_user is not None and pages_user == self.owner:
            repo = first_path_segment(url)
            if repo is None:
                return ProjectLink.WEBSITE
            if await self.is_same_repo_as(pages_user, repo):
                return ProjectLink.WEBSITE

        if self.homepage and domain(self.homepage) == url_domain:
            return ProjectLink.WEBSITE

        if await self.get_branch_and_path(url) is not None:
            return ProjectLink.REPO

        return None

    async def get_branch_and_path(self, url: str) -> Optional[Tuple[str, str]]:
        """Check if a given url points to a file located inside the repo."""
        repo_path = parse_repo_path(url)
        if repo_path is None:
            return None

        if await self.is_same_repo_as(repo_path.owner, repo_path.repo):
            return repo_path.branch, repo_path.path
        return None

    def qualify_url(self, path: str) -> str:
        return qualify(self.link_base, path)

    async def is_same_repo_as(self, owner: str, repo: str) -> bool:
        return await self._resolver.is_same_repo(
            (self.owner, self.repo),
            (owner.lower(), repo.lower()),
        )


async def extract_ranked_images(readme: Readme) -> List[ReadmeImage]:
    return await readme.images()
