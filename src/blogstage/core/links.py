"""Link value shared by post blocks and navigation controls."""

from dataclasses import dataclass
from typing import TypedDict

from blogstage.core.types import URLPath


class LinkDict(TypedDict):
    """Dictionary representation of a link."""

    label: str
    path: str


@dataclass(frozen=True)
class Link:
    """Navigable label with its normalized target path."""

    label: str
    path: URLPath

    def to_dict(self) -> LinkDict:
        """Convert to dictionary for JSON serialization."""
        return {"label": self.label, "path": self.path}
