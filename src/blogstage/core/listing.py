"""Post summary blocks for a listing page.

Turns the posts of one page into summary blocks: title link, optional
taxonomy line, excerpt and read-more link. Order and content are taken
verbatim from the paginator.
"""

import logging
from dataclasses import dataclass, field
from typing import TypedDict

from blogstage.config import SiteConfig
from blogstage.core.links import Link, LinkDict
from blogstage.core.paths import normalize
from blogstage.core.posts import Paginator, Post

logger = logging.getLogger(__name__)

READ_MORE_LABEL = "Read More"


class TaxonomyGroupDict(TypedDict):
    """Dictionary representation of a taxonomy group."""

    category: LinkDict | None
    tags: list[LinkDict]


class PostBlockDict(TypedDict):
    """Dictionary representation of a post block."""

    title: LinkDict
    taxonomy: list[TaxonomyGroupDict] | None
    excerpt: str
    read_more: LinkDict


@dataclass(frozen=True)
class TaxonomyGroup:
    """Category link followed by the post's tag links.

    category is None only for posts that have tags but no categories.
    """

    category: Link | None
    tags: list[Link] = field(default_factory=list)

    def to_dict(self) -> TaxonomyGroupDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "category": self.category.to_dict() if self.category else None,
            "tags": [tag.to_dict() for tag in self.tags],
        }


@dataclass(frozen=True)
class PostBlock:
    """Rendered summary of one post."""

    title: Link
    taxonomy: list[TaxonomyGroup] | None
    excerpt: str
    read_more: Link

    def to_dict(self) -> PostBlockDict:
        """Convert to dictionary for JSON serialization."""
        taxonomy = None
        if self.taxonomy is not None:
            taxonomy = [group.to_dict() for group in self.taxonomy]
        return {
            "title": self.title.to_dict(),
            "taxonomy": taxonomy,
            "excerpt": self.excerpt,
            "read_more": self.read_more.to_dict(),
        }


def render_post_list(paginator: Paginator, site: SiteConfig) -> list[PostBlock]:
    """Build summary blocks for the posts of the current page.

    Args:
        paginator: Pagination state holding the page's posts in display order
        site: Site configuration providing base and taxonomy index paths

    Returns:
        One PostBlock per post, in input order
    """
    logger.debug(f"Rendering {len(paginator.posts)} post blocks for page {paginator.page}")
    return [_render_post(post, site) for post in paginator.posts]


def _render_post(post: Post, site: SiteConfig) -> PostBlock:
    """Build the summary block of a single post."""
    target = normalize(site.base_path, post.url)
    return PostBlock(
        title=Link(label=post.title, path=target),
        taxonomy=_render_taxonomy(post, site),
        excerpt=post.excerpt,
        read_more=Link(label=READ_MORE_LABEL, path=target),
    )


def _render_taxonomy(post: Post, site: SiteConfig) -> list[TaxonomyGroup] | None:
    """Build the taxonomy line, or None when the post has no categories or tags."""
    if not post.categories and not post.tags:
        return None

    tags = [
        Link(label=tag, path=normalize(site.base_path, f"{site.tags_path}#{tag}"))
        for tag in post.tags
    ]
    if not post.categories:
        return [TaxonomyGroup(category=None, tags=tags)]

    return [
        TaxonomyGroup(
            category=Link(
                label=category,
                path=normalize(site.base_path, f"{site.categories_path}#{category}"),
            ),
            tags=list(tags),
        )
        for category in post.categories
    ]
