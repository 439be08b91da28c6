# Tests
import pytest

from repo_icons.badges import is_badge
from repo_icons.exceptions import UrlResolutionError
from repo_icons.urls import (
    blob_companion,
    github_pages_user,
    normalize_homepage,
    parse_repo_path,
    qualify,
)

BASE = "https://github.com/Octo/Widget/raw/main/"


# Qualification Tests
class TestQualify:

    def test_resolves_relative_path(self):
        assert qualify(BASE, "docs/logo.png") == "https://github.com/Octo/Widget/raw/main/docs/logo.png"

    def test_root_relative_stays_in_repo(self):
        assert qualify(BASE, "/docs/logo.png") == "https://github.com/Octo/Widget/raw/main/docs/logo.png"

    def test_strips_whitespace_before_anchoring(self):
        assert qualify(BASE, " /docs/logo.png ") == "https://github.com/Octo/Widget/raw/main/docs/logo.png"

    def test_keeps_absolute_url(self):
        assert qualify(BASE, "https://example.com/a.png") == "https://example.com/a.png"

    def test_rejects_non_url(self):
        with pytest.raises(UrlResolutionError):
            qualify(BASE, "javascript:void(0)")

    def test_rejects_malformed_host(self):
        with pytest.raises(UrlResolutionError):
            qualify(BASE, "http://[::1")


# Repository Path Tests
class TestRepoPaths:

    def test_parses_github_blob(self):
        parsed = parse_repo_path("https://github.com/owner/repo/blob/main/assets/logo.png")
        assert (parsed.owner, parsed.repo, parsed.branch, parsed.path) == (
            "owner", "repo", "main", "assets/logo.png"
        )

    def test_parses_raw_content(self):
        parsed = parse_repo_path("https://raw.githubusercontent.com/owner/repo/main/assets/logo.png")
        assert (parsed.branch, parsed.path) == ("main", "assets/logo.png")

    def test_parses_legacy_raw_host(self):
        parsed = parse_repo_path("https://RAW.GITHUB.COM/owner/repo/dev/logo.png")
        assert (parsed.branch, parsed.path) == ("dev", "logo.png")

    def test_ignores_unknown_host(self):
        assert parse_repo_path("https://gitlab.com/owner/repo/blob/main/logo.png") is None

    def test_ignores_short_path(self):
        assert parse_repo_path("https://github.com/owner/repo") is None

    def test_pages_user(self):
        assert github_pages_user("https://octo.github.io/widget") == "octo"
        assert github_pages_user("https://example.com") is None

    def test_blob_companion_replaces_first_raw(self):
        url = "https://github.com/o/r/raw/main/raw/logo.png"
        assert blob_companion(url) == "https://github.com/o/r/blob/main/raw/logo.png"


# Homepage Tests
class TestHomepage:

    def test_accepts_full_url(self):
        assert normalize_homepage("https://widget.dev") == "https://widget.dev"

    def test_accepts_bare_domain(self):
        assert normalize_homepage("widget.dev") == "http://widget.dev"

    def test_empty_is_none(self):
        assert normalize_homepage("") is None
        assert normalize_homepage(None) is None


# Badge Tests
class TestBadges:

    @pytest.mark.parametrize("url", [
        "https://img.shields.io/badge/build-passing-green.svg",
        "https://badgen.net/npm/v/widget",
        "https://travis-ci.org/octo/widget.svg?branch=main",
        "https://codecov.io/gh/octo/widget/branch/main/graph/badge.svg",
        "https://github.com/octo/widget/actions/workflows/ci.yml/badge.svg",
        "https://github.com/octo/widget/workflows/CI/badge.svg",
    ])
    def test_detects_badges(self, url):
        assert is_badge(url)

    @pytest.mark.parametrize("url", [
        "https://github.com/octo/widget/raw/main/assets/logo.png",
        "https://raw.githubusercontent.com/octo/widget/main/banner.svg",
        "https://example.com/images/header.png",
        "https://github.com/badges/shields/raw/master/readme-logo.svg",
        "https://github.com/octo/widget/raw/main/assets/badges/logo.png",
    ])
    def test_keeps_regular_images(self, url):
        assert not is_badge(url)
