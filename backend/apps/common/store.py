from functools import lru_cache

import redis
from django.conf import settings

from .logger import get_logger

logger = get_logger(__name__).bind(component="common", layer="store")


@lru_cache(maxsize=None)
def get_document_store_client() -> redis.Redis:
    """Shared client for the document store. Connections are opened lazily."""
    url = settings.DOCUMENT_STORE_URL
    logger.debug("Creating document store client", url=url)
    return redis.Redis.from_url(
        url,
        decode_responses=True,
        socket_connect_timeout=settings.DOCUMENT_STORE_CONNECT_TIMEOUT,
    )
