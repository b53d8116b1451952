"""Shared test fixtures."""

import pytest
from blogstage.config import SiteConfig
from blogstage.core.posts import Paginator, Post


def _make_paginator(page: int, total_pages: int, **kwargs) -> Paginator:
    """Build a paginator with neighbour pages and paths consistent with page."""
    template = kwargs.pop("paginate_path_template", "/blog/page:num/")
    previous_page = page - 1 if page > 1 else None
    next_page = page + 1 if page < total_pages else None

    defaults = {
        "previous_page": previous_page,
        "next_page": next_page,
        "previous_page_path": (
            None if previous_page is None
            else "/blog/" if previous_page == 1
            else template.replace(":num", str(previous_page))
        ),
        "next_page_path": None if next_page is None else template.replace(":num", str(next_page)),
    }
    defaults.update(kwargs)
    return Paginator(
        page=page,
        total_pages=total_pages,
        paginate_path_template=template,
        **defaults,
    )


@pytest.fixture
def site() -> SiteConfig:
    """Site configuration without base path."""
    return SiteConfig()


@pytest.fixture
def posts() -> tuple[Post, ...]:
    """Three posts with varying taxonomy."""
    return (
        Post(
            title="Hello World",
            url="/2024/01/05/hello-world/",
            excerpt="<p>First post.</p>",
            categories=("news",),
            tags=("intro", "meta"),
        ),
        Post(
            title="Untagged",
            url="/2024/02/10/untagged/",
            excerpt="<p>No taxonomy.</p>",
        ),
        Post(
            title="Only Tags",
            url="/2024/03/15/only-tags/",
            excerpt="<p>Tags without category.</p>",
            tags=("python",),
        ),
    )


@pytest.fixture
def make_paginator():
    """Factory for paginators with consistent neighbour pages."""
    return _make_paginator
