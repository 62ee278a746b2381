"""PC component compatibility engine"""
from pccompat.api.models.component import ComponentCategory, ComponentSpecification
from pccompat.api.models.compatibility import CompatibilityIssue, CompatibilityResult, Severity
from pccompat.api.services.compatibility_engine import check_pc_compatibility, get_compatibility_suggestions

__version__ = "1.0.0"

__all__ = [
    "ComponentCategory",
    "ComponentSpecification",
    "CompatibilityIssue",
    "CompatibilityResult",
    "Severity",
    "check_pc_compatibility",
    "get_compatibility_suggestions",
]
