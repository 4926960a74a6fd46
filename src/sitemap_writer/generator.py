"""Splits large URL sets across sitemap files tied together by a sitemap index."""

import logging
import os
from typing import List, Sequence
from urllib.parse import urljoin

from .types import UrlRecord, SitemapIndexRecord, SitemapConfig
from .config import (
    DEFAULT_MAX_URLS_PER_SITEMAP,
    DEFAULT_SITEMAP_PATH,
    SITEMAP_FILENAME,
    SITEMAP_CHUNK_FILENAME,
    SITEMAP_INDEX_FILENAME,
    ROBOTS_FILENAME,
    make_config,
    validate_config,
)
from .sitemap_writer import SitemapWriter
from .sitemap_index import SitemapIndexWriter
from .utils import (
    chunk_records,
    create_directory_if_not_exists,
    format_number,
    get_current_timestamp,
    write_document,
)

logger = logging.getLogger(__name__)


class SitemapGenerator:
    """Writes one or more sitemap files, plus an index when more than one is needed."""

    def __init__(self, config: SitemapConfig):
        validate_config(config)
        self.config = config

        # Ensure output directory exists
        create_directory_if_not_exists(config.output_dir)

    @property
    def output_dir(self) -> str:
        return self.config.output_dir

    @property
    def index_path(self) -> str:
        return os.path.join(self.output_dir, SITEMAP_INDEX_FILENAME)

    def generate_sitemaps(self, urls: Sequence[UrlRecord]) -> List[str]:
        """
        Generate sitemap files from URL records.

        Args:
            urls: URL records to include in sitemaps

        Returns:
            List of generated sitemap file paths, in URL order
        """
        # Remove files left by a previous run, including a stale index
        self.cleanup_old_sitemaps()

        if not urls:
            logger.warning("No URLs provided for sitemap generation")
            return []

        logger.info(f"Generating sitemaps for {format_number(len(urls))} URLs")

        sitemap_files = []

        if len(urls) <= self.config.max_urls_per_sitemap:
            filepath = os.path.join(self.output_dir, SITEMAP_FILENAME)
            SitemapWriter.make(filepath, urls)
            sitemap_files.append(filepath)
            logger.info(f"Generated single sitemap: {SITEMAP_FILENAME}")
        else:
            chunks = chunk_records(urls, self.config.max_urls_per_sitemap)

            for i, chunk in enumerate(chunks, 1):
                filename = SITEMAP_CHUNK_FILENAME.format(index=i)
                filepath = os.path.join(self.output_dir, filename)
                SitemapWriter.make(filepath, chunk)
                sitemap_files.append(filepath)

            logger.info(f"Generated {len(chunks)} sitemap files")

        if len(sitemap_files) > 1:
            self._generate_sitemap_index(sitemap_files)
            logger.info(f"Generated sitemap index: {SITEMAP_INDEX_FILENAME}")

        return sitemap_files

    def sitemap_url(self, filename: str) -> str:
        """Public URL of a file in the sitemap directory."""
        path = self.config.sitemap_path.strip("/")
        relative = f"{path}/{filename}" if path else filename
        return urljoin(self.config.base_url.rstrip("/") + "/", relative)

    def _generate_sitemap_index(self, sitemap_files: List[str]) -> str:
        current_time = get_current_timestamp()

        records = [
            SitemapIndexRecord(
                loc=self.sitemap_url(os.path.basename(sitemap_file)),
                lastmod=current_time,
            )
            for sitemap_file in sitemap_files
        ]

        SitemapIndexWriter.make(self.index_path, records)
        return self.index_path

    def generate_robots_txt(self, sitemap_files: List[str]) -> str:
        """Generate robots.txt file with sitemap references."""
        robots_filepath = os.path.join(self.output_dir, ROBOTS_FILENAME)

        lines = ["User-agent: *", "Allow: /", ""]

        if len(sitemap_files) == 1:
            filename = os.path.basename(sitemap_files[0])
        else:
            # Multiple sitemaps - reference index
            filename = SITEMAP_INDEX_FILENAME
        lines.append(f"Sitemap: {self.sitemap_url(filename)}")

        try:
            write_document(robots_filepath, "\n".join(lines) + "\n")
        except OSError as e:
            logger.error(f"Error generating robots.txt: {e}")
            raise

        logger.info(f"Generated robots.txt: {robots_filepath}")
        return robots_filepath

    def cleanup_old_sitemaps(self) -> None:
        """Remove old sitemap files from output directory."""
        for filename in os.listdir(self.output_dir):
            if filename.startswith("sitemap") and filename.endswith(".xml"):
                os.remove(os.path.join(self.output_dir, filename))
                logger.debug(f"Removed old sitemap: {filename}")

        logger.info("Cleaned up old sitemap files")


def create_sitemap_generator(
    output_dir: str,
    base_url: str,
    max_urls_per_sitemap: int = DEFAULT_MAX_URLS_PER_SITEMAP,
    sitemap_path: str = DEFAULT_SITEMAP_PATH,
) -> SitemapGenerator:
    """Factory function to create sitemap generator."""
    return SitemapGenerator(
        make_config(output_dir, base_url, max_urls_per_sitemap, sitemap_path)
    )
