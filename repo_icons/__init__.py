# Imports
from repo_icons.config import (
    Settings,
    get_settings,
    RepoMetadata,
    ApiMessage,
    parse_repo_response,
)
from repo_icons.readme import Readme, extract_ranked_images
from repo_icons.readme_image import (
    ReadmeImage,
    ProjectLink,
    KeywordMention,
    mark_primary_heading_edges,
    rank_images,
)
from repo_icons.primary_heading import PrimaryHeading
from repo_icons.repo_redirect import RepoResolver
from repo_icons.github_client import GitHubClient, sanitize_log
from repo_icons.badges import is_badge
from repo_icons.exceptions import (
    RepoIconsError,
    FetchFailedError,
    ApiError,
    RepositoryNotFoundError,
    AuthenticationError,
    RateLimitError,
    UrlResolutionError,
)
from repo_icons.interfaces import RepoResolverInterface, RepositoryClientInterface


# Exports
__all__ = [
    "Settings",
    "get_settings",
    "RepoMetadata",
    "ApiMessage",
    "parse_repo_response",
    "Readme",
    "extract_ranked_images",
    "ReadmeImage",
    "ProjectLink",
    "KeywordMention",
    "mark_primary_heading_edges",
    "rank_images",
    "PrimaryHeading",
    "RepoResolver",
    "GitHubClient",
    "sanitize_log",
    "is_badge",
    "RepoIconsError",
    "FetchFailedError",
    "ApiError",
    "RepositoryNotFoundError",
    "AuthenticationError",
    "RateLimitError",
    "UrlResolutionError",
    "RepoResolverInterface",
    "RepositoryClientInterface",
]
