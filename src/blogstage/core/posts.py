"""Post and pagination state.

Both are produced upstream (sorting, page slicing, excerpt extraction)
and handed to the renderer already computed.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Post:
    """Post summary data."""

    title: str
    url: str
    excerpt: str
    categories: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class Paginator:
    """Pagination state for one output page.

    Invariants guaranteed by the producer:
        1 <= page <= total_pages
        previous_page is set iff page > 1
        next_page is set iff page < total_pages
        previous_page_path/next_page_path are set iff their page is set
    """

    page: int
    total_pages: int
    paginate_path_template: str
    posts: tuple[Post, ...] = field(default_factory=tuple)
    previous_page: int | None = None
    next_page: int | None = None
    previous_page_path: str | None = None
    next_page_path: str | None = None
