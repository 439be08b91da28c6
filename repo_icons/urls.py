"""URL helpers for resolving README references against GitHub hosting conventions."""
import re
from typing import NamedTuple, Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

from repo_icons.constants import (
    GITHUB_HOST,
    RAW_CONTENT_HOSTS,
    OPAQUE_URL_SCHEMES,
)
from repo_icons.exceptions import UrlResolutionError


GITHUB_PATH_RE = re.compile(r"^/([^/]+)/([^/]+)/[^/]+/([^/]+)/(.+)")
RAW_PATH_RE = re.compile(r"^/([^/]+)/([^/]+)/([^/]+)/(.+)")
GITHUB_PAGES_RE = re.compile(r"^([^.]+)\.github\.(?:com|io)$")
FIRST_SEGMENT_RE = re.compile(r"^/([^/]+)")


# Models
class RepoPath(NamedTuple):
    owner: str
    repo: str
    branch: str
    path: str


# Resolution
def is_absolute_url(url: str) -> bool:
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    if not parts.scheme:
        return False
    return bool(parts.netloc) or parts.scheme.lower() in OPAQUE_URL_SCHEMES


def qualify(base: str, path: str) -> str:
    """Resolve a README reference against the repository link base.

    Root-relative paths are anchored at the base instead of escaping to the
    host root, so ``/docs/logo.png`` stays inside the repository.
    """
    path = path.strip()
    if path.startswith("/"):
        path = f".{path}"

    try:
        url = urljoin(base, path)
    except ValueError as e:
        raise UrlResolutionError(path, str(e)) from e

    if not is_absolute_url(url):
        raise UrlResolutionError(path)
    return url


def domain(url: str) -> Optional[str]:
    try:
        host = urlsplit(url).hostname
    except ValueError:
        return None
    return host.lower() if host else None


def path_of(url: str) -> str:
    try:
        return urlsplit(url).path
    except ValueError:
        return ""


# Repository Paths
def parse_repo_path(url: str) -> Optional[RepoPath]:
    """Split a GitHub content URL into owner, repo, branch and file path."""
    host = domain(url)
    if host == GITHUB_HOST:
        pattern = GITHUB_PATH_RE
    elif host in RAW_CONTENT_HOSTS:
        pattern = RAW_PATH_RE
    else:
        return None

    match = pattern.match(path_of(url))
    if not match:
        return None
    return RepoPath(*match.groups())


def github_pages_user(url: str) -> Optional[str]:
    host = domain(url)
    if not host:
        return None
    match = GITHUB_PAGES_RE.match(host)
    return match.group(1) if match else None


def first_path_segment(url: str) -> Optional[str]:
    match = FIRST_SEGMENT_RE.match(path_of(url))
    return match.group(1) if match else None


def blob_companion(url: str) -> str:
    # GitHub wraps rendered repo images in a link to the blob view of the same file
    parts = urlsplit(url)
    return urlunsplit(parts._replace(path=parts.path.replace("/raw/", "/blob/", 1)))


def normalize_homepage(value: Optional[str]) -> Optional[str]:
    """Parse a repository homepage, accepting bare domains like ``example.com``."""
    if not value or not value.strip():
        return None
    value = value.strip()
    if domain(value):
        return value
    fallback = f"http://{value}"
    return fallback if domain(fallback) else None
