from pydantic import BaseModel, Field, computed_field
from typing import List, Dict, Optional, Union
from enum import Enum

from .component import ComponentSpecification, ComponentCategory


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class CompatibilityIssue(BaseModel):
    severity: Severity
    message: str
    message_localized: str
    components: List[str] = Field(..., min_length=1, description="Ids of the implicated components")
    suggestion: Optional[str] = None
    suggestion_localized: Optional[str] = None

    model_config = {
        "use_enum_values": True,
    }


class CompatibilityResult(BaseModel):
    issues: List[CompatibilityIssue] = Field(default_factory=list)
    power_requirement: float = Field(default=0, description="Total watts drawn by every supplied component")
    estimated_price: float = Field(default=0, description="Total price of every supplied component")

    @computed_field
    @property
    def is_compatible(self) -> bool:
        return not any(issue.severity == Severity.ERROR for issue in self.issues)

    def issues_by_severity(self) -> Dict[str, List[CompatibilityIssue]]:
        """Group issues for display, keeping discovery order inside each tier"""
        grouped: Dict[str, List[CompatibilityIssue]] = {severity.value: [] for severity in Severity}
        for issue in self.issues:
            grouped[issue.severity].append(issue)
        return grouped

    def count(self, severity: Union[Severity, str]) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)


class PerformanceEstimate(BaseModel):
    gaming: int = Field(..., ge=0)
    productivity: int = Field(..., ge=0)
    overall: int = Field(..., ge=0)


class CompatibilityCheckRequest(BaseModel):
    components: List[ComponentSpecification] = Field(default_factory=list)


class CompatibilityReport(BaseModel):
    """Check result as returned over HTTP"""
    is_compatible: bool
    issues: List[CompatibilityIssue]
    power_requirement: float
    estimated_price: float
    error_count: int = Field(..., ge=0)
    warning_count: int = Field(..., ge=0)
    info_count: int = Field(..., ge=0)
    performance: PerformanceEstimate
    cached: bool = False


class SuggestionRequest(BaseModel):
    existing_components: List[ComponentSpecification] = Field(default_factory=list)
    target_category: str
    locale: str = Field(default="en", pattern="^(en|vi)$")


class SuggestionResponse(BaseModel):
    target_category: str
    suggestions: List[str]


class CartProduct(BaseModel):
    """Product record as stored by the catalog"""
    id: Union[str, int]
    name: str
    name_vi: Optional[str] = None
    category_name: Optional[str] = None
    specifications: Optional[Dict] = None
    compatibility_info: Optional[Dict] = None

    model_config = {
        "extra": "allow",
    }


class CartItem(BaseModel):
    product: CartProduct
    quantity: int = Field(default=1, ge=1)


class CartCheckRequest(BaseModel):
    items: List[CartItem] = Field(default_factory=list)


class CartCheckResponse(CompatibilityReport):
    checkout_allowed: bool
    compatibility_check_recommended: bool


class CategoryLabel(BaseModel):
    category: ComponentCategory
    label: str
