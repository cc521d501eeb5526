import os
import sys

import fakeredis
import pytest

# Ensure backend package is importable when running `pytest` from repo root
BASE_DIR = os.path.dirname(__file__)
BACKEND_DIR = os.path.join(BASE_DIR, 'backend')
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)


@pytest.fixture
def redis_client():
    """A private in-memory Redis per test."""
    return fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture(autouse=True)
def _clear_caches():
    # Session attributes live in the local-memory caches under pytest
    from django.core.cache import caches

    yield
    for cache in caches.all():
        cache.clear()
