"""Status badge detection for README images."""
import re

from repo_icons.constants import BADGE_HOSTS, BADGE_SEGMENTS
from repo_icons.urls import domain, path_of


WORKFLOW_BADGE_RE = re.compile(r"/(?:actions/)?workflows/[^/]+/badge\.svg$", re.IGNORECASE)


def _host_matches(host: str) -> bool:
    return any(host == badge_host or host.endswith(f".{badge_host}") for badge_host in BADGE_HOSTS)


def is_badge(url: str) -> bool:
    """Check whether an image URL is a build/version/metric badge."""
    host = domain(url)
    if host is None:
        return False

    if _host_matches(host):
        return True

    path = path_of(url).lower()
    if WORKFLOW_BADGE_RE.search(path):
        return True

    segments = [s for s in path.split("/") if s]
    return bool(segments) and segments[-1] in BADGE_SEGMENTS
