"""
Sitemap Writer

A small library for generating sitemaps.org compliant XML sitemaps and
sitemap index files.

Key Features:
- Builds <urlset> and <sitemapindex> documents as strings
- Writes documents straight to a file path
- Escapes reserved XML characters in URLs and dates
- Optional lastmod, changefreq and priority elements
- Splits large URL sets across files with a generated sitemap index
"""

__version__ = "1.0.0"

from .types import ChangeFrequency, UrlRecord, SitemapIndexRecord, SitemapConfig
from .sitemap_writer import SitemapWriter
from .sitemap_index import SitemapIndexWriter
from .generator import SitemapGenerator, create_sitemap_generator
from .utils import escape_xml, setup_logging

__all__ = [
    "ChangeFrequency",
    "UrlRecord",
    "SitemapIndexRecord",
    "SitemapConfig",
    "SitemapWriter",
    "SitemapIndexWriter",
    "SitemapGenerator",
    "create_sitemap_generator",
    "escape_xml",
    "setup_logging",
]
