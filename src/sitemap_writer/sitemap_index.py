"""Sitemap index writer for sites whose URLs span several sitemap files."""

import logging
from typing import Iterable, List

from .types import SitemapIndexRecord
from .config import XML_DECLARATION, SITEMAP_NAMESPACE, INDENT
from .utils import escape_xml, write_document

logger = logging.getLogger(__name__)


class SitemapIndexWriter:
    """Generates <sitemapindex> documents referencing child sitemaps."""

    @staticmethod
    def build(sitemaps: Iterable[SitemapIndexRecord]) -> str:
        """Build a sitemap index XML document, keeping the input order."""
        lines = [
            XML_DECLARATION,
            f'<sitemapindex xmlns="{SITEMAP_NAMESPACE}">',
        ]

        for sitemap in sitemaps:
            lines.extend(_sitemap_element(sitemap))

        lines.append("</sitemapindex>")
        return "\n".join(lines) + "\n"

    @staticmethod
    def make(path: str, sitemaps: Iterable[SitemapIndexRecord]) -> None:
        """Build a sitemap index and write it to ``path``; OSError propagates."""
        sitemaps = list(sitemaps)
        content = SitemapIndexWriter.build(sitemaps)

        try:
            write_document(path, content)
        except OSError as e:
            logger.error(f"Error writing sitemap index to {path}: {e}")
            raise

        logger.debug(f"Written sitemap index with {len(sitemaps)} sitemaps to {path}")


def _sitemap_element(sitemap: SitemapIndexRecord) -> List[str]:
    child = INDENT * 2
    lines = [
        f"{INDENT}<sitemap>",
        f"{child}<loc>{escape_xml(sitemap.loc)}</loc>",
    ]
    if sitemap.lastmod is not None:
        lines.append(f"{child}<lastmod>{escape_xml(sitemap.lastmod)}</lastmod>")
    lines.append(f"{INDENT}</sitemap>")
    return lines
