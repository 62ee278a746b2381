"""
In-memory result cache for compatibility checks
"""
import hashlib
from typing import Any, Optional, Dict
from datetime import datetime, timedelta

from pccompat.core.config import settings


class Cache:
    """Simple in-memory TTL cache"""

    def __init__(self, default_ttl: int = 300, prefix: str = "pc_compat"):
        self.default_ttl = default_ttl
        self.prefix = prefix
        self.memory_cache: Dict[str, Dict[str, Any]] = {}

    def _get_cache_key(self, key: str) -> str:
        """Generate a consistent cache key"""
        return f"{self.prefix}:{key}"

    async def get(self, key: str) -> Optional[Any]:
        """Get value from cache"""
        cache_key = self._get_cache_key(key)

        if cache_key in self.memory_cache:
            entry = self.memory_cache[cache_key]
            if entry['expires_at'] > datetime.utcnow():
                return entry['value']
            # Remove expired entry
            del self.memory_cache[cache_key]

        return None

    def _evict_expired(self, now: datetime) -> None:
        expired = [k for k, entry in self.memory_cache.items() if entry['expires_at'] <= now]
        for k in expired:
            del self.memory_cache[k]

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """Set value in cache, dropping entries that have already expired"""
        cache_key = self._get_cache_key(key)
        now = datetime.utcnow()
        self._evict_expired(now)
        self.memory_cache[cache_key] = {
            'value': value,
            'expires_at': now + timedelta(seconds=self.default_ttl if ttl is None else ttl),
            'created_at': now
        }

    async def clear(self) -> None:
        """Drop every cached entry"""
        self.memory_cache.clear()

    async def health_check(self) -> Dict[str, Any]:
        """Check cache health"""
        return {
            'memory_cache': {
                'entries': len(self.memory_cache),
                'default_ttl': self.default_ttl,
                'healthy': True
            }
        }


def generate_cache_key(*args, **kwargs) -> str:
    """Generate a deterministic cache key from arguments"""
    key_parts = [str(arg) for arg in args]
    key_parts.extend([f"{k}:{v}" for k, v in sorted(kwargs.items())])

    key_string = "|".join(key_parts)
    return hashlib.md5(key_string.encode()).hexdigest()


# Global cache instance
cache = Cache(default_ttl=settings.result_cache_ttl)
