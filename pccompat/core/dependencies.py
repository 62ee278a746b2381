"""
FastAPI dependencies for dependency injection
"""
from pccompat.core.config import settings
from pccompat.api.services.compatibility_engine import CompatibilityEngine
from pccompat.api.services.socket_registry import build_socket_registry


_engine = CompatibilityEngine(build_socket_registry(settings.socket_generation_overrides))


def get_engine() -> CompatibilityEngine:
    """Dependency returning the engine configured with the socket overrides from settings"""
    return _engine
