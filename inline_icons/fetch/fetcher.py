"""Icon fetcher: (collection, name) → IconDocument, consulting the URL cache first."""

from __future__ import annotations

import logging

import requests

from inline_icons.errors import FetchFailure
from inline_icons.fetch.cache import UrlCache
from inline_icons.fetch.registry import CollectionRegistry
from inline_icons.models.icon_document import IconDocument
from inline_icons.svg.parser import parse_icon

logger = logging.getLogger(__name__)


class IconFetcher:
    """Resolves icon URLs, fetches on cache miss and parses the result."""

    def __init__(
        self,
        registry: CollectionRegistry,
        cache: UrlCache,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.registry = registry
        self.cache = cache
        self.session = session or requests.Session()
        self.timeout = timeout

    def get_bytes(self, collection: str, name: str, force_reload: bool = False) -> bytes:
        """Return the raw icon bytes, fetching them when not cached or when forced."""
        url = self.registry.resolve_url(collection, name)

        if not force_reload and self.cache.contains(url):
            logger.debug("Cache hit: %s", url)
            return self.cache.read(url)

        self.cache.write(url, self._download(url))
        return self.cache.read(url)

    def get(self, collection: str, name: str, force_reload: bool = False) -> IconDocument:
        """Return the parsed icon document."""
        return parse_icon(self.get_bytes(collection, name, force_reload=force_reload))

    def _download(self, url: str) -> bytes:
        logger.info("Fetching %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise FetchFailure(url, str(e)) from e
        return response.content
