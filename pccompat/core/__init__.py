# Core package
from .config import settings
from .cache import cache, generate_cache_key

__all__ = [
    "settings",
    "cache",
    "generate_cache_key"
]
