"""
Catalog record to component specification mapping

Product records come from the store catalog with free-form attribute values
("650W", "32 GB", "LGA 1700"). This module turns them into the typed
ComponentSpecification the compatibility engine reads.
"""
import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pccompat.api.models.component import ComponentCategory, ComponentSpecification
from pccompat.api.models.compatibility import CartItem, CartProduct


logger = logging.getLogger(__name__)

FALLBACK_CATEGORY = "ACCESSORIES"

NUMERIC_ATTRIBUTES = (
    "power_consumption",
    "price",
    "capacity",
    "wattage",
    "length",
    "height",
    "max_memory",
    "memory_slots",
    "max_gpu_length",
    "max_cpu_cooler_height",
    "speed",
    "benchmark_score",
)

# Categories whose presence in a cart makes a compatibility check worthwhile
PC_BUILD_CATEGORIES = frozenset({
    ComponentCategory.CPU,
    ComponentCategory.GPU,
    ComponentCategory.RAM,
    ComponentCategory.MOTHERBOARD,
    ComponentCategory.PSU,
})

# "1,000" and "12.990.000" are digit grouping; a separator followed by one or two digits is a decimal point
_NUMBER_PATTERN = re.compile(
    r"(?P<sign>-)?(?:"
    r"(?P<grouped>\d{1,3}(?P<sep>[.,])\d{3}(?:(?P=sep)\d{3})*)(?:[.,](?P<fraction>\d{1,2}))?(?!\d)"
    r"|(?P<plain>\d+)(?:[.,](?P<decimal>\d{1,2}))?(?!\d)"
    r")"
)


def parse_number(value: Any) -> Any:
    """
    Extract the leading number from a unit-suffixed string.

    :param value: Raw attribute value, e.g. '650W', '32 GB', '1.5'.
    :return: int or float when a number is found, None for a string without one,
        any non-string value unchanged.
    """
    if not isinstance(value, str):
        return value
    match = _NUMBER_PATTERN.search(value)
    if not match:
        return None
    digits = (match.group("grouped") or match.group("plain")).replace(",", "").replace(".", "")
    fraction = match.group("fraction") or match.group("decimal")
    number = float(f"{digits}.{fraction}") if fraction else int(digits)
    return -number if match.group("sign") else number


def normalize_socket(socket: Any) -> Any:
    """
    Compact a socket label into the registry format.

    'LGA 1700' -> 'LGA1700', 'socket am5' -> 'AM5'
    """
    if not isinstance(socket, str):
        return socket
    s = re.sub(r"\s+", "", socket).upper()
    if s.startswith("SOCKET"):
        s = s[len("SOCKET"):]
    return s or None


def normalize_specifications(
    specifications: Optional[Mapping[str, Any]],
    category: Optional[str] = None,
) -> Dict[str, Any]:
    """Coerce the attribute values the checks read; other keys pass through untouched"""
    normalized = dict(specifications or {})
    for key in NUMERIC_ATTRIBUTES:
        if key in normalized:
            normalized[key] = parse_number(normalized[key])
    if "socket" in normalized:
        normalized["socket"] = normalize_socket(normalized["socket"])
    # Only RAM modules compare "type" against the board's memory types
    if ComponentCategory.parse(category) == ComponentCategory.RAM and isinstance(normalized.get("type"), str):
        normalized["type"] = normalized["type"].strip().upper()
    memory_type = normalized.get("memory_type")
    if isinstance(memory_type, str):
        normalized["memory_type"] = memory_type.upper()
    elif isinstance(memory_type, list):
        normalized["memory_type"] = [str(t).strip().upper() for t in memory_type]
    return normalized


def to_component_specification(record: Union[CartProduct, Mapping[str, Any]]) -> ComponentSpecification:
    """Build a ComponentSpecification from a stored product record"""
    if isinstance(record, CartProduct):
        record = record.model_dump()

    category = record.get("category_name") or FALLBACK_CATEGORY
    if ComponentCategory.parse(category) is None:
        logger.debug(f"Product {record.get('id')} has non-PC category {category!r}")

    return ComponentSpecification(
        id=str(record["id"]),
        name=record.get("name_vi") or record["name"],
        category=category,
        specifications=normalize_specifications(record.get("specifications"), category),
        compatibility_info=record.get("compatibility_info") or {},
    )


def cart_to_components(items: Iterable[Union[CartItem, Mapping[str, Any]]]) -> List[ComponentSpecification]:
    """One specification per cart line; quantity is not expanded"""
    components = []
    for item in items:
        product = item.product if isinstance(item, CartItem) else item["product"]
        components.append(to_component_specification(product))
    return components


def has_pc_components(components: Iterable[ComponentSpecification]) -> bool:
    return any(c.component_category in PC_BUILD_CATEGORIES for c in components)
