import logging
from itertools import chain
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from repo_icons.constants import PRIMARY_HEADING_TAGS

logger = logging.getLogger(__name__)


def _is_media_only(element: Tag) -> bool:
    """Check if block contains images but no visible text (logo/badge rows)."""
    if element.name == "img":
        return True
    return element.find("img") is not None and not element.get_text(strip=True)


class PrimaryHeading:
    """The README's title area: its first top-level heading plus adjoining image rows.

    Blocks are direct children of the content root (the rendered ``<article>``
    when present). Image-only blocks directly before or after the heading
    block belong to the region, so logos placed above the title and badge
    rows placed below it count as part of the heading.
    """

    def __init__(self, document: BeautifulSoup):
        self._blocks: List[Tag] = self._locate(document)
        self._block_ids = {id(block) for block in self._blocks}

    @property
    def blocks(self) -> List[Tag]:
        return list(self._blocks)

    def contains(self, node: Tag) -> bool:
        if not self._block_ids:
            return False
        return any(id(element) in self._block_ids for element in chain([node], node.parents))

    def _locate(self, document: BeautifulSoup) -> List[Tag]:
        heading = self._find_heading(document)
        if heading is None:
            logger.debug("README has no primary heading")
            return []

        root = heading.find_parent("article") or document.body or document
        block = heading
        while block.parent is not None and block.parent is not root:
            block = block.parent

        before = list(self._media_run(block.previous_siblings))
        after = list(self._media_run(block.next_siblings))
        return list(reversed(before)) + [block] + after

    def _find_heading(self, document: BeautifulSoup) -> Optional[Tag]:
        for name in PRIMARY_HEADING_TAGS:
            heading = document.find(name)
            if heading is not None:
                return heading
        return None

    def _media_run(self, siblings: Iterable) -> Iterable[Tag]:
        for sibling in siblings:
            if isinstance(sibling, Comment):
                continue
            if isinstance(sibling, NavigableString):
                if sibling.strip():
                    return
                continue
            if not isinstance(sibling, Tag) or not _is_media_only(sibling):
                return
            yield sibling
