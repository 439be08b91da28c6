# Test Fixtures
import pytest

from repo_icons.readme import Readme


class FakeResolver:
    """Identity resolver backed by a static rename table."""

    def __init__(self, renames=None):
        self._renames = {
            (o.lower(), r.lower()): (no.lower(), nr.lower())
            for (o, r), (no, nr) in (renames or {}).items()
        }
        self.calls = []

    def _canonical(self, repo_id):
        repo_id = (repo_id[0].lower(), repo_id[1].lower())
        return self._renames.get(repo_id, repo_id)

    async def is_same_repo(self, first, second):
        self.calls.append((first, second))
        return self._canonical(first) == self._canonical(second)


class FakeClient:
    """Repository client returning canned responses."""

    def __init__(self, response=None, body="", error=None):
        self._response = response
        self._body = body
        self._error = error
        self.closed = False

    async def fetch_repo(self, owner, repo):
        return self._response

    async def fetch_readme_html(self, owner, repo):
        if self._error is not None:
            raise self._error
        return self._body

    def close(self):
        self.closed = True


@pytest.fixture
def mock_token(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test_12345")


@pytest.fixture
def resolver():
    return FakeResolver({("octo", "old-widget"): ("octo", "widget")})


@pytest.fixture
def make_readme(resolver):
    def _make(body: str = "", private: bool = False, homepage=None, token=None, owner="octo", repo="widget"):
        return Readme(
            owner,
            repo,
            body,
            private,
            "main",
            homepage,
            token=token,
            resolver=resolver,
        )
    return _make


@pytest.fixture
def rendered_readme():
    return """<div id="readme" class="md" data-path="README.md"><article class="markdown-body entry-content container-lg" itemprop="text">
<p align="center">
  <a href="https://widget.dev"><img src="https://github.com/octo/widget/raw/main/assets/logo.svg" alt="Widget" width="120" style="max-width: 100%;"></a>
</p>
<div class="markdown-heading"><h1 align="center" class="heading-element">Widget</h1><a id="user-content-widget" class="anchor" href="#widget"></a></div>
<p align="center">
  <a href="https://github.com/octo/widget/actions"><img src="https://github.com/octo/widget/actions/workflows/ci.yml/badge.svg" alt="CI"></a>
  <a href="https://pypi.org/project/widget"><img src="https://camo.githubusercontent.com/123abc" data-canonical-src="https://img.shields.io/pypi/v/widget.svg" alt="PyPI"></a>
</p>
<p>Widget is a library for things.</p>
<p><a target="_blank" rel="noopener noreferrer" href="https://github.com/octo/widget/blob/main/docs/screenshot.png"><img src="https://github.com/octo/widget/raw/main/docs/screenshot.png" alt="screenshot" style="max-width: 100%;"></a></p>
</article></div>
"""


@pytest.fixture
def fake_client():
    return FakeClient
