# Models package
from .component import (
    ComponentCategory,
    ComponentSpecification,
    COMPONENT_CATEGORIES_VI,
    CpuSpec,
    MotherboardSpec,
    RamSpec,
    GpuSpec,
    StorageSpec,
    PsuSpec,
    CaseSpec,
    CoolingSpec,
)
from .compatibility import CompatibilityIssue, CompatibilityResult, PerformanceEstimate, Severity

__all__ = [
    "ComponentCategory",
    "ComponentSpecification",
    "COMPONENT_CATEGORIES_VI",
    "CpuSpec",
    "MotherboardSpec",
    "RamSpec",
    "GpuSpec",
    "StorageSpec",
    "PsuSpec",
    "CaseSpec",
    "CoolingSpec",
    "CompatibilityIssue",
    "CompatibilityResult",
    "PerformanceEstimate",
    "Severity",
]
