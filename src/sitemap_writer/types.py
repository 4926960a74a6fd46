"""Type definitions for the sitemap writer."""

from dataclasses import dataclass
from typing import Optional
from enum import Enum


class ChangeFrequency(Enum):
    """Sitemap change frequency values."""
    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


@dataclass(frozen=True)
class UrlRecord:
    """A single <url> entry of a sitemap.

    Only ``loc`` is required. Values are written as given: ``lastmod`` is not
    checked against the W3C datetime format and ``priority`` is not checked
    against the 0.0-1.0 range.
    """
    loc: str
    lastmod: Optional[str] = None
    changefreq: Optional[ChangeFrequency] = None
    priority: Optional[float] = None


@dataclass(frozen=True)
class SitemapIndexRecord:
    """A single <sitemap> entry of a sitemap index."""
    loc: str
    lastmod: Optional[str] = None


@dataclass
class SitemapConfig:
    """Configuration for splitting URLs across sitemap files."""
    output_dir: str
    base_url: str
    max_urls_per_sitemap: int = 50000
    sitemap_path: str = "sitemap/"
