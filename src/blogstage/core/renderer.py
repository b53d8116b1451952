"""Listing page rendering.

Combines post blocks and navigation controls into a single page fragment.
Rendering is pure: identical inputs always produce identical output.
"""

import logging
from dataclasses import dataclass
from typing import TypedDict

from blogstage.config import SiteConfig
from blogstage.core.listing import PostBlock, PostBlockDict, render_post_list
from blogstage.core.pagination import NavBlock, NavBlockDict, render_navigation
from blogstage.core.posts import Paginator

logger = logging.getLogger(__name__)


class RenderedPageDict(TypedDict):
    """Dictionary representation of a rendered page."""

    posts: list[PostBlockDict]
    navigation: NavBlockDict | None


@dataclass(frozen=True)
class RenderedPage:
    """Result of rendering a listing page."""

    posts: list[PostBlock]
    navigation: NavBlock | None

    def to_dict(self) -> RenderedPageDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "posts": [block.to_dict() for block in self.posts],
            "navigation": self.navigation.to_dict() if self.navigation else None,
        }


def render_page(paginator: Paginator, site: SiteConfig) -> RenderedPage:
    """Render post blocks and navigation for one listing page.

    The paginator is trusted to satisfy its invariants; nothing is validated
    here. Use blogstage.core.loader to build a checked Paginator from a page
    document.

    Args:
        paginator: Pagination state and posts of the current page
        site: Site configuration

    Returns:
        RenderedPage with post blocks and optional navigation block
    """
    logger.debug(
        f"Rendering page {paginator.page}/{paginator.total_pages} "
        f"with base path {site.base_path!r}"
    )
    return RenderedPage(
        posts=render_post_list(paginator, site),
        navigation=render_navigation(paginator, site),
    )
