# Services package
from .compatibility_engine import compatibility_engine, check_pc_compatibility, get_compatibility_suggestions
from .performance import estimate_performance

__all__ = [
    "compatibility_engine",
    "check_pc_compatibility",
    "get_compatibility_suggestions",
    "estimate_performance",
]
