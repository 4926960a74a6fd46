"""Configuration and constants for the sitemap writer."""

from .types import SitemapConfig

# Document framing
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
INDENT = "  "
DEFAULT_ENCODING = "utf-8"

# sitemaps.org limit
DEFAULT_MAX_URLS_PER_SITEMAP = 50000

# File names
SITEMAP_FILENAME = "sitemap.xml"
SITEMAP_CHUNK_FILENAME = "sitemap_{index:03d}.xml"
SITEMAP_INDEX_FILENAME = "sitemap_index.xml"
ROBOTS_FILENAME = "robots.txt"

# URL path under which the sitemap files are served
DEFAULT_SITEMAP_PATH = "sitemap/"


def make_config(
    output_dir: str,
    base_url: str,
    max_urls_per_sitemap: int = DEFAULT_MAX_URLS_PER_SITEMAP,
    sitemap_path: str = DEFAULT_SITEMAP_PATH,
) -> SitemapConfig:
    """Create generator configuration, rejecting limits that cannot be met."""
    config = SitemapConfig(
        output_dir=output_dir,
        base_url=base_url,
        max_urls_per_sitemap=max_urls_per_sitemap,
        sitemap_path=sitemap_path,
    )
    validate_config(config)
    return config


def validate_config(config: SitemapConfig) -> None:
    """Validate generator configuration."""
    if config.max_urls_per_sitemap < 1:
        raise ValueError("Max URLs per sitemap must be at least 1")
    if config.max_urls_per_sitemap > DEFAULT_MAX_URLS_PER_SITEMAP:
        raise ValueError(
            f"Max URLs per sitemap cannot exceed {DEFAULT_MAX_URLS_PER_SITEMAP}"
        )
