"""Page document loading.

Builds a Paginator from the JSON page document written by the page
generation step. Field types and the pagination invariants are checked
here so the renderer can trust its input.
"""

import json
import logging
from pathlib import Path

from blogstage.core.posts import Paginator, Post

logger = logging.getLogger(__name__)

DEFAULT_PAGINATE_PATH = "/page:num/"


def load_paginator(path: Path) -> Paginator:
    """Load a page document from a JSON file.

    Args:
        path: Path to the page document

    Returns:
        Validated Paginator

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the document is not valid JSON or is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Page document not found: {path}")

    logger.info(f"Loading page document from {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

    return parse_paginator(data)


def parse_paginator(data: object) -> Paginator:
    """Parse and validate a page document.

    Args:
        data: Decoded page document

    Returns:
        Validated Paginator

    Raises:
        ValueError: If a field has the wrong type or an invariant is violated
    """
    if not isinstance(data, dict):
        raise ValueError("Page document must be a dictionary")

    page = _require_int(data, "page")
    total_pages = _require_int(data, "total_pages")
    previous_page = _optional_int(data, "previous_page")
    next_page = _optional_int(data, "next_page")
    previous_page_path = _optional_str(data, "previous_page_path")
    next_page_path = _optional_str(data, "next_page_path")

    paginate_path = data.get("paginate_path", DEFAULT_PAGINATE_PATH)
    if not isinstance(paginate_path, str):
        raise ValueError("paginate_path must be a string")

    posts_raw = data.get("posts", [])
    if not isinstance(posts_raw, list):
        raise ValueError("posts must be a list")
    posts = tuple(_parse_post(item, f"posts[{i}]") for i, item in enumerate(posts_raw))

    paginator = Paginator(
        page=page,
        total_pages=total_pages,
        paginate_path_template=paginate_path,
        posts=posts,
        previous_page=previous_page,
        next_page=next_page,
        previous_page_path=previous_page_path,
        next_page_path=next_page_path,
    )
    _check_invariants(paginator)
    return paginator


def _parse_post(data: object, name: str) -> Post:
    """Parse a single post entry."""
    if not isinstance(data, dict):
        raise ValueError(f"{name} must be a dictionary")

    values: dict[str, str] = {}
    for key in ("title", "url", "excerpt"):
        value = data.get(key, "" if key == "excerpt" else None)
        if not isinstance(value, str):
            raise ValueError(f"{name}.{key} must be a string")
        values[key] = value

    return Post(
        title=values["title"],
        url=values["url"],
        excerpt=values["excerpt"],
        categories=_parse_str_list(data.get("categories", []), f"{name}.categories"),
        tags=_parse_str_list(data.get("tags", []), f"{name}.tags"),
    )


def _parse_str_list(data: object, name: str) -> tuple[str, ...]:
    if not isinstance(data, list):
        raise ValueError(f"{name} must be a list")
    for item in data:
        if not isinstance(item, str):
            raise ValueError(f"{name} items must be strings")
    return tuple(data)


def _require_int(data: dict, key: str) -> int:
    value = data.get(key)
    # bool is a subclass of int
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{key} must be an integer")
    return value


def _optional_int(data: dict, key: str) -> int | None:
    if data.get(key) is None:
        return None
    return _require_int(data, key)


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


def _check_invariants(paginator: Paginator) -> None:
    """Check the pagination invariants the renderer relies on.

    Raises:
        ValueError: If any invariant is violated
    """
    if paginator.total_pages < 1:
        raise ValueError("total_pages must be at least 1")
    if not 1 <= paginator.page <= paginator.total_pages:
        raise ValueError(
            f"page must be between 1 and {paginator.total_pages}, got {paginator.page}"
        )

    has_previous = paginator.page > 1
    if (paginator.previous_page is not None) != has_previous:
        raise ValueError("previous_page must be set if and only if page > 1")
    if (paginator.previous_page_path is not None) != has_previous:
        raise ValueError("previous_page_path must be set if and only if previous_page is set")

    has_next = paginator.page < paginator.total_pages
    if (paginator.next_page is not None) != has_next:
        raise ValueError("next_page must be set if and only if page < total_pages")
    if (paginator.next_page_path is not None) != has_next:
        raise ValueError("next_page_path must be set if and only if next_page is set")
