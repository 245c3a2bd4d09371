"""
Schema text cache and loader.

The cache is an explicit object handed to the loader, so separate validator
instances can share one cache or keep their own. Entries are never evicted.
"""

from typing import Awaitable, Callable, Dict, Optional
import logging

from prometheus_client import Counter

from sepa_validator.core.exceptions import SchemaLoadException

logger = logging.getLogger(__name__)

SCHEMA_CACHE_REQUESTS = Counter(
    "sepa_schema_cache_requests_total",
    "Schema lookups by cache result",
    ["result"],
)

FetchText = Callable[[str], Awaitable[str]]


class SchemaCache:
    """Append-only mapping of schema URL to schema text."""

    def __init__(self):
        self._entries: Dict[str, str] = {}

    def get(self, url: str) -> Optional[str]:
        return self._entries.get(url)

    def set(self, url: str, text: str) -> None:
        # Concurrent misses may both land here; last write wins
        self._entries[url] = text

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, url: str) -> bool:
        return url in self._entries

    def __len__(self) -> int:
        return len(self._entries)


class SchemaLoader:
    """Retrieves schema text through an injected fetch coroutine, caching by URL."""

    def __init__(self, fetch_text: FetchText, cache: Optional[SchemaCache] = None):
        """
        Args:
            fetch_text: Coroutine function returning the text at a URL
            cache: Cache to use; a private one is created when omitted
        """
        self.fetch_text = fetch_text
        self.cache = cache if cache is not None else SchemaCache()

    async def load(self, url: str) -> str:
        """
        Return the schema text for ``url``, fetching it on a cache miss.

        Raises:
            SchemaLoadException: the fetch failed
        """
        cached = self.cache.get(url)
        if cached is not None:
            SCHEMA_CACHE_REQUESTS.labels(result="hit").inc()
            return cached

        SCHEMA_CACHE_REQUESTS.labels(result="miss").inc()
        logger.info(f"Fetching XSD schema from {url}")

        try:
            text = await self.fetch_text(url)
        except SchemaLoadException:
            raise
        except Exception as e:
            logger.error(f"Schema fetch failed for {url}: {e}")
            raise SchemaLoadException(f"Unable to load XSD schema: {e}", url=url) from e

        self.cache.set(url, text)
        return text
