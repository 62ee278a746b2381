from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Dict, Any, Optional, Union
from types import MappingProxyType
from enum import Enum
import re


Number = Union[int, float]

# Fallbacks applied when a catalog record omits an attribute
DEFAULT_MAX_MEMORY_GB = 128
DEFAULT_MEMORY_SLOTS = 4
DEFAULT_MEMORY_TYPE = "DDR4"
DEFAULT_MAX_GPU_LENGTH_MM = 300
DEFAULT_MAX_CPU_COOLER_HEIGHT_MM = 160


class ComponentCategory(str, Enum):
    CPU = "CPU"
    GPU = "GPU"
    RAM = "RAM"
    MOTHERBOARD = "MOTHERBOARD"
    STORAGE = "STORAGE"
    PSU = "PSU"
    CASE = "CASE"
    COOLING = "COOLING"

    @classmethod
    def parse(cls, value: Any) -> Optional["ComponentCategory"]:
        """Return the matching category, or None for values outside the closed set"""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


COMPONENT_CATEGORIES_VI = MappingProxyType({
    ComponentCategory.CPU: "Bộ vi xử lý (CPU)",
    ComponentCategory.GPU: "Card đồ họa (VGA)",
    ComponentCategory.RAM: "Bộ nhớ RAM",
    ComponentCategory.MOTHERBOARD: "Bo mạch chủ (Mainboard)",
    ComponentCategory.STORAGE: "Ổ cứng lưu trữ",
    ComponentCategory.PSU: "Nguồn máy tính (PSU)",
    ComponentCategory.CASE: "Vỏ máy tính (Case)",
    ComponentCategory.COOLING: "Tản nhiệt",
})


class BaseSpec(BaseModel):
    """Attributes shared by every component category"""
    power_consumption: Number = Field(default=0, description="Power draw in watts")
    price: Number = Field(default=0, description="Unit price")

    model_config = {
        "extra": "allow",  # Catalog records carry many more keys than the checks read
        "frozen": True,
    }

    @model_validator(mode="before")
    @classmethod
    def drop_null_attributes(cls, data):
        # An explicit null means "not provided" so the field default applies
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class CpuSpec(BaseSpec):
    socket: Optional[str] = None
    generation: str = ""
    chipset: Optional[str] = None
    benchmark_score: Optional[Number] = None


class MotherboardSpec(BaseSpec):
    socket: Optional[str] = None
    chipset: Optional[str] = None
    max_memory: Number = DEFAULT_MAX_MEMORY_GB
    memory_slots: int = DEFAULT_MEMORY_SLOTS
    memory_type: List[str] = Field(default_factory=lambda: [DEFAULT_MEMORY_TYPE])

    @field_validator("memory_type", mode="before")
    @classmethod
    def split_memory_types(cls, v):
        """Accept "DDR4", "DDR4/DDR5" or "DDR4, DDR5" as well as a list"""
        if isinstance(v, str):
            return [part for part in re.split(r"[,/;|]\s*|\s+", v.strip()) if part]
        return v


class RamSpec(BaseSpec):
    capacity: Number = Field(default=0, description="Module capacity in GB")
    type: str = DEFAULT_MEMORY_TYPE
    speed: Optional[Number] = Field(default=None, description="Rated speed in MT/s")


class GpuSpec(BaseSpec):
    length: Number = Field(default=0, description="Card length in mm")
    benchmark_score: Optional[Number] = None


class StorageSpec(BaseSpec):
    pass


class PsuSpec(BaseSpec):
    wattage: Number = 0


class CaseSpec(BaseSpec):
    max_gpu_length: Number = DEFAULT_MAX_GPU_LENGTH_MM
    max_cpu_cooler_height: Number = DEFAULT_MAX_CPU_COOLER_HEIGHT_MM


class CoolingSpec(BaseSpec):
    height: Number = Field(default=0, description="Cooler height in mm")


SPEC_MODELS = MappingProxyType({
    ComponentCategory.CPU: CpuSpec,
    ComponentCategory.GPU: GpuSpec,
    ComponentCategory.RAM: RamSpec,
    ComponentCategory.MOTHERBOARD: MotherboardSpec,
    ComponentCategory.STORAGE: StorageSpec,
    ComponentCategory.PSU: PsuSpec,
    ComponentCategory.CASE: CaseSpec,
    ComponentCategory.COOLING: CoolingSpec,
})

AnySpec = Union[CpuSpec, MotherboardSpec, RamSpec, GpuSpec, StorageSpec, PsuSpec, CaseSpec, CoolingSpec, BaseSpec]


class ComponentSpecification(BaseModel):
    """One hardware part under consideration, immutable once built"""
    id: str = Field(..., min_length=1, description="Identifier unique within one check")
    name: str = Field(..., description="Display name")
    category: str = Field(..., description="Component category, unknown values are ignored by the checks")
    specifications: AnySpec = Field(default_factory=BaseSpec)
    compatibility_info: Dict[str, Any] = Field(default_factory=dict)

    model_config = {
        "frozen": True,
    }

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, v):
        if isinstance(v, ComponentCategory):
            return v.value
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("compatibility_info", mode="before")
    @classmethod
    def default_compatibility_info(cls, v):
        return {} if v is None else v

    @model_validator(mode="before")
    @classmethod
    def build_typed_specifications(cls, data):
        """Pick the specification payload model matching the category"""
        if not isinstance(data, dict):
            return data
        raw = data.get("specifications")
        if raw is None:
            raw = {}
        if isinstance(raw, BaseModel):
            raw = raw.model_dump()
        spec_model = SPEC_MODELS.get(ComponentCategory.parse(data.get("category")), BaseSpec)
        return {**data, "specifications": spec_model.model_validate(raw)}

    @property
    def component_category(self) -> Optional[ComponentCategory]:
        return ComponentCategory.parse(self.category)

    @property
    def display_category(self) -> str:
        category = self.component_category
        return COMPONENT_CATEGORIES_VI[category] if category else self.category
