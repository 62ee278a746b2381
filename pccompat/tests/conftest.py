"""
Shared test configuration
"""
import os

# Console logging only while testing
os.environ.setdefault("LOG_DIR", "")

import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def clear_result_cache():
    """Each test starts with an empty compatibility result cache"""
    from pccompat.core.cache import cache
    cache.memory_cache.clear()
    yield
    cache.memory_cache.clear()
