"""Configuration management for Blogstage.

Supports TOML configuration format with auto-discovery.
"""

import logging
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "blogstage.toml"


@dataclass(frozen=True)
class SiteConfig:
    """Site-wide link configuration."""

    base_path: str = ""
    categories_path: str = "/categories/"
    tags_path: str = "/tags/"


@dataclass
class Config:
    """Application configuration."""

    site: SiteConfig = field(default_factory=SiteConfig)
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for blogstage.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            logger.debug("No configuration file found, using defaults")
            return cls()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Raises:
            ValueError: If configuration is invalid
        """
        logger.info(f"Loading configuration from {path}")
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        site = cls._parse_site(data.get("site"))
        return cls(site=site, config_path=path)

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        """Parse site configuration section.

        Args:
            data: Raw site section data

        Returns:
            SiteConfig instance
        """
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        defaults = SiteConfig()
        values: dict[str, str] = {}
        for key in ("base_path", "categories_path", "tags_path"):
            value = data.get(key, getattr(defaults, key))
            if not isinstance(value, str):
                raise ValueError(f"site.{key} must be a string")
            values[key] = value

        return SiteConfig(**values)

    def with_overrides(self, *, base_path: str | None = None) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            base_path: Override site.base_path

        Returns:
            New Config instance with overrides applied
        """
        site = self.site
        if base_path is not None:
            site = replace(self.site, base_path=base_path)

        return replace(self, site=site)
