import logging
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Set

from bs4 import Tag
from pydantic import BaseModel, Field, computed_field, field_serializer

from repo_icons.badges import is_badge
from repo_icons.constants import BANNER_KEYWORD, LOGO_KEYWORD, RAW_CONTENT_BASE
from repo_icons.exceptions import UrlResolutionError
from repo_icons.primary_heading import PrimaryHeading
from repo_icons.urls import blob_companion, path_of

if TYPE_CHECKING:
    from repo_icons.readme import Readme

logger = logging.getLogger(__name__)


# Enums
class ProjectLink(str, Enum):
    WEBSITE = "Website"
    REPO = "Repo"


class KeywordMention(str, Enum):
    LOGO = "logo"
    BANNER = "banner"
    REPO_NAME = "repo_name"


# Models
class ReadmeImage(BaseModel):
    src: str
    headers: Dict[str, str] = Field(default_factory=dict)
    # whether the image was in the primary markdown heading
    in_primary_heading: bool = False
    # whether the image was the first/last one in the heading
    edge_of_primary_heading: bool = False
    # whether the image mentions a keyword in its src / alt text
    keyword_mentions: Set[KeywordMention] = Field(default_factory=set)
    # whether the image src points to a file inside of the repo
    sourced_from_repo: bool = False
    # whether the image links to the project website or repo
    links_to: Optional[ProjectLink] = None
    # whether an ancestor has align="center"
    is_align_center: bool = False
    # whether the image has height or width attributes
    has_size_attrs: bool = False

    @field_serializer("keyword_mentions")
    def serialize_mentions(self, mentions: Set[KeywordMention]) -> List[str]:
        return sorted(mention.value for mention in mentions)

    @computed_field
    @property
    def weight(self) -> int:
        weight = 0

        if self.in_primary_heading:
            weight += 2

            if self.is_align_center:
                weight += 2

            if self.has_size_attrs:
                weight += 2

            if self.sourced_from_repo:
                weight += 4

        if self.edge_of_primary_heading:
            weight += 4

        if self.links_to == ProjectLink.WEBSITE:
            weight += 8
        elif self.links_to == ProjectLink.REPO:
            weight += 4

        if KeywordMention.LOGO in self.keyword_mentions:
            weight += 16

        if KeywordMention.BANNER in self.keyword_mentions:
            weight += 8

        if KeywordMention.REPO_NAME in self.keyword_mentions:
            weight += 4

        return weight

    @classmethod
    async def get(
        cls,
        readme: "Readme",
        element: Tag,
        primary_heading: PrimaryHeading,
    ) -> Optional["ReadmeImage"]:
        """Build a candidate from an ``<img>`` node, or None if it doesn't qualify."""
        canonical = element.get("data-canonical-src")
        raw_src = canonical or element.get("src")
        if not raw_src:
            return None

        try:
            src = readme.qualify_url(raw_src)
        except UrlResolutionError as e:
            logger.debug(f"Dropping image: {e}")
            return None

        if is_badge(src):
            logger.debug(f"Dropping badge: {src}")
            return None

        # src was rewritten by GitHub's image proxy, data-canonical-src holds the original
        cdn_src = None
        if canonical and element.get("src"):
            try:
                cdn_src = readme.qualify_url(element["src"])
            except UrlResolutionError:
                cdn_src = None

        is_align_center = False
        links_to = None
        seen_link = False
        for ancestor in element.parents:
            if ancestor.name is None or ancestor.name == "[document]":
                continue

            if str(ancestor.get("align", "")).lower() == "center":
                is_align_center = True

            if ancestor.name == "a" and not seen_link:
                seen_link = True
                links_to = await _classify_link(readme, ancestor, src)

        branch_and_path = await readme.get_branch_and_path(src)

        path = branch_and_path[1] if branch_and_path else path_of(src)
        alt = str(element.get("alt") or "")
        keyword_mentions = _keyword_mentions(readme, path.lower(), alt.lower())

        headers: Dict[str, str] = {}
        if cdn_src is not None:
            src = cdn_src
        elif branch_and_path is not None:
            branch, file_path = branch_and_path
            src = f"{RAW_CONTENT_BASE}/{readme.owner}/{readme.repo}/{branch}/{file_path}"
            if readme.private:
                if readme.token:
                    headers["Authorization"] = f"Bearer {readme.token}"
                else:
                    logger.warning(f"No token configured for private image: {src}")

        return cls(
            src=src,
            headers=headers,
            in_primary_heading=primary_heading.contains(element),
            edge_of_primary_heading=False,
            keyword_mentions=keyword_mentions,
            sourced_from_repo=branch_and_path is not None,
            links_to=links_to,
            is_align_center=is_align_center,
            has_size_attrs=element.get("width") is not None or element.get("height") is not None,
        )


# Helpers
async def _classify_link(readme: "Readme", anchor: Tag, src: str) -> Optional[ProjectLink]:
    href = anchor.get("href")
    if not href:
        return None

    try:
        href = readme.qualify_url(href)
    except UrlResolutionError:
        return None

    # GitHub links every rendered repo image to its own blob page
    if href == blob_companion(src):
        return None
    return await readme.is_link_to_project(href)


def _keyword_mentions(readme: "Readme", path: str, alt: str) -> Set[KeywordMention]:
    mentions = set()

    if LOGO_KEYWORD in path or LOGO_KEYWORD in alt:
        mentions.add(KeywordMention.LOGO)

    if BANNER_KEYWORD in path or BANNER_KEYWORD in alt:
        mentions.add(KeywordMention.BANNER)

    if readme.repo in path or readme.repo in alt:
        mentions.add(KeywordMention.REPO_NAME)

    return mentions


# Ranking
def mark_primary_heading_edges(images: List[ReadmeImage]) -> None:
    """Flag the terminal image of each run of primary-heading images (and position 0)."""
    for idx, image in enumerate(images):
        if not image.in_primary_heading:
            continue
        following = images[idx + 1] if idx + 1 < len(images) else None
        if idx == 0 or following is None or not following.in_primary_heading:
            image.edge_of_primary_heading = True


def rank_images(images: List[ReadmeImage]) -> List[ReadmeImage]:
    # sorted() is stable, ties keep document order
    return sorted(images, key=lambda image: image.weight, reverse=True)
