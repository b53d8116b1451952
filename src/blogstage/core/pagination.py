"""Pagination controls for a listing page.

Builds the previous/next controls and one numbered control per page.
Numbered controls for pages other than the current one and page 1 are
built from the paginate path template.
"""

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypedDict

from blogstage.config import SiteConfig
from blogstage.core.paths import normalize, substitute
from blogstage.core.posts import Paginator
from blogstage.core.types import URLPath

logger = logging.getLogger(__name__)

PREVIOUS_LABEL = "Previous"
NEXT_LABEL = "Next"


class ControlState(StrEnum):
    """Display state of a navigation control."""

    LINK = "link"
    ACTIVE = "active"
    DISABLED = "disabled"


class NavControlDict(TypedDict):
    """Dictionary representation of a navigation control."""

    label: str
    state: str
    path: str | None


class NavBlockDict(TypedDict):
    """Dictionary representation of the navigation block."""

    previous: NavControlDict
    pages: list[NavControlDict]
    next: NavControlDict


@dataclass(frozen=True)
class NavControl:
    """Single pagination control.

    Only LINK controls carry a path; ACTIVE and DISABLED controls are inert.
    """

    label: str
    state: ControlState
    path: URLPath | None = None

    @property
    def is_link(self) -> bool:
        return self.state is ControlState.LINK

    def to_dict(self) -> NavControlDict:
        """Convert to dictionary for JSON serialization."""
        return {"label": self.label, "state": str(self.state), "path": self.path}


@dataclass(frozen=True)
class NavBlock:
    """Previous control, numbered page controls and next control."""

    previous: NavControl
    next: NavControl
    pages: list[NavControl] = field(default_factory=list)

    def to_dict(self) -> NavBlockDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "previous": self.previous.to_dict(),
            "pages": [control.to_dict() for control in self.pages],
            "next": self.next.to_dict(),
        }


def render_navigation(paginator: Paginator, site: SiteConfig) -> NavBlock | None:
    """Build the navigation block for the current page.

    Page 1 is linked through the paginator's previous-page path rather than
    a dedicated first-page path, matching the blog's existing links.

    Args:
        paginator: Pagination state of the current page
        site: Site configuration providing the base path

    Returns:
        NavBlock, or None when the listing has a single page
    """
    if paginator.total_pages <= 1:
        return None

    logger.debug(f"Rendering navigation for page {paginator.page} of {paginator.total_pages}")

    base_path = site.base_path
    return NavBlock(
        previous=_adjacent_control(
            PREVIOUS_LABEL,
            base_path,
            paginator.previous_page,
            paginator.previous_page_path,
        ),
        pages=[
            _page_control(paginator, base_path, page)
            for page in range(1, paginator.total_pages + 1)
        ],
        next=_adjacent_control(
            NEXT_LABEL,
            base_path,
            paginator.next_page,
            paginator.next_page_path,
        ),
    )


def _adjacent_control(
    label: str,
    base_path: str,
    page: int | None,
    path: str | None,
) -> NavControl:
    """Build the previous or next control."""
    if page is None:
        return NavControl(label=label, state=ControlState.DISABLED)
    return NavControl(label=label, state=ControlState.LINK, path=normalize(base_path, path or ""))


def _page_control(paginator: Paginator, base_path: str, page: int) -> NavControl:
    """Build the numbered control for one page."""
    label = str(page)
    if page == paginator.page:
        return NavControl(label=label, state=ControlState.ACTIVE)
    if page == 1:
        target = normalize(base_path, paginator.previous_page_path or "")
    else:
        target = normalize(base_path, substitute(paginator.paginate_path_template, page))
    return NavControl(label=label, state=ControlState.LINK, path=target)
