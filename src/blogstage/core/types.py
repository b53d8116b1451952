"""Core type definitions."""

from typing import NewType

# Site-relative URL path after base path normalization (e.g., "/blog/page2/")
URLPath = NewType("URLPath", str)
