"""
HTTP schema fetcher backed by aiohttp.
"""

import asyncio
import logging

import aiohttp

from sepa_validator.core.exceptions import SchemaLoadException

logger = logging.getLogger(__name__)


class HttpSchemaFetcher:
    """Coroutine callable that downloads schema text over HTTP."""

    def __init__(self, timeout: float = 30.0):
        self.timeout = timeout

    async def __call__(self, url: str) -> str:
        client_timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with aiohttp.ClientSession(timeout=client_timeout) as session:
                async with session.get(url) as response:
                    if not 200 <= response.status < 300:
                        raise SchemaLoadException(
                            "Unable to load XSD schema",
                            url=url,
                            status=response.status,
                        )
                    return await response.text()
        except asyncio.TimeoutError as e:
            raise SchemaLoadException(
                f"Timed out loading XSD schema after {self.timeout}s", url=url
            ) from e
        except aiohttp.ClientError as e:
            raise SchemaLoadException(f"Unable to load XSD schema: {e}", url=url) from e
