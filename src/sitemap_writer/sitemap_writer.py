"""Sitemap writer for generating XML sitemaps compliant with sitemaps.org standards."""

import logging
from typing import Iterable, List

from .types import UrlRecord
from .config import XML_DECLARATION, SITEMAP_NAMESPACE, INDENT
from .utils import escape_xml, format_priority, write_document, format_number

logger = logging.getLogger(__name__)


class SitemapWriter:
    """
    Generates <urlset> sitemap documents.

    Use ``build`` to get the document as a string (for example to serve it
    from a web view) and ``make`` to write it to a file.
    """

    @staticmethod
    def build(urls: Iterable[UrlRecord]) -> str:
        """
        Build a sitemap XML document from URL records.

        Args:
            urls: URL records, written in the given order

        Returns:
            The complete XML document
        """
        lines = [
            XML_DECLARATION,
            f'<urlset xmlns="{SITEMAP_NAMESPACE}">',
        ]

        for url in urls:
            lines.extend(_url_element(url))

        lines.append("</urlset>")
        return "\n".join(lines) + "\n"

    @staticmethod
    def make(path: str, urls: Iterable[UrlRecord]) -> None:
        """
        Build a sitemap and write it to ``path``.

        Raises:
            OSError: if the file cannot be created or written
        """
        urls = list(urls)
        content = SitemapWriter.build(urls)

        try:
            write_document(path, content)
        except OSError as e:
            logger.error(f"Error writing sitemap to {path}: {e}")
            raise

        logger.debug(f"Written sitemap with {format_number(len(urls))} URLs to {path}")


def _url_element(url: UrlRecord) -> List[str]:
    child = INDENT * 2
    lines = [
        f"{INDENT}<url>",
        f"{child}<loc>{escape_xml(url.loc)}</loc>",
    ]

    # Optional elements are omitted rather than written empty
    if url.lastmod is not None:
        lines.append(f"{child}<lastmod>{escape_xml(url.lastmod)}</lastmod>")

    if url.changefreq is not None:
        lines.append(f"{child}<changefreq>{url.changefreq.value}</changefreq>")

    if url.priority is not None:
        lines.append(f"{child}<priority>{format_priority(url.priority)}</priority>")

    lines.append(f"{INDENT}</url>")
    return lines
