# GitHub Hosts
GITHUB_HOST = "github.com"
RAW_CONTENT_HOSTS = ("raw.githubusercontent.com", "raw.github.com")
RAW_CONTENT_BASE = "https://raw.githubusercontent.com"

LINK_BASE_TEMPLATE = "https://github.com/{owner}/{repo}/raw/{branch}/"

# API
DEFAULT_API_URL = "https://api.github.com"
JSON_MEDIA_TYPE = "application/vnd.github+json"
HTML_MEDIA_TYPE = "application/vnd.github.html"
DEFAULT_USER_AGENT = "repo-icons/0.2"

REPO_REQUIRED_FIELDS = ("owner", "name", "default_branch", "private")

# URL Resolution
VALID_URL_SCHEMES = ("http", "https")
OPAQUE_URL_SCHEMES = ("data",)

# Keyword Detection
LOGO_KEYWORD = "logo"
BANNER_KEYWORD = "banner"

# Badge Detection
BADGE_HOSTS = frozenset([
    "shields.io",
    "badgen.net",
    "badge.fury.io",
    "badges.gitter.im",
    "badgesize.io",
    "travis-ci.org",
    "travis-ci.com",
    "circleci.com",
    "codecov.io",
    "coveralls.io",
    "ci.appveyor.com",
    "david-dm.org",
    "snyk.io",
    "codacy.com",
    "codeclimate.com",
    "codefactor.io",
    "sonarcloud.io",
    "deepscan.io",
    "app.fossa.com",
    "bestpractices.coreinfrastructure.org",
    "requires.io",
    "pepy.tech",
    "readthedocs.org",
    "api.netlify.com",
    "img.buymeacoffee.com",
    "ko-fi.com",
    "liberapay.com",
    "discordapp.com",
    "vercel.com",
])

BADGE_SEGMENTS = frozenset(["badge", "badges", "badge.svg", "badge.png"])

# Primary Heading
PRIMARY_HEADING_TAGS = ("h1", "h2")
