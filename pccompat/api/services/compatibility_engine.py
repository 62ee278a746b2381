"""
Compatibility engine for PC component builds

Each checker inspects one category pair and returns the issues it finds.
The engine groups the input by category, runs the checkers whose categories
are present and aggregates power draw and price over the whole input.
"""
import logging
import math
from typing import Dict, List, Optional, Sequence, Union

from pccompat.api.models.component import (
    ComponentCategory,
    ComponentSpecification,
)
from pccompat.api.models.compatibility import (
    CompatibilityIssue,
    CompatibilityResult,
    Severity,
)
from pccompat.api.services.socket_registry import SOCKET_COMPATIBILITY, SocketRegistry, supported_generations


logger = logging.getLogger(__name__)

PSU_HEADROOM_FACTOR = 1.2

SINGLE_INSTANCE_CATEGORIES = (
    ComponentCategory.CPU,
    ComponentCategory.MOTHERBOARD,
    ComponentCategory.PSU,
    ComponentCategory.CASE,
)

ComponentGroups = Dict[ComponentCategory, List[ComponentSpecification]]


def _fmt(value) -> str:
    """Render 192.0 as "192" and keep real fractions"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def group_by_category(components: Sequence[ComponentSpecification]) -> ComponentGroups:
    """Group components by category in input order, skipping unknown categories"""
    groups: ComponentGroups = {}
    for component in components:
        category = component.component_category
        if category is None:
            logger.debug(f"Ignoring component {component.id} with unknown category {component.category!r}")
            continue
        groups.setdefault(category, []).append(component)
    return groups


def first_of(components: Sequence[ComponentSpecification], category: ComponentCategory) -> Optional[ComponentSpecification]:
    """Return the first component of the given category, or None"""
    for component in components:
        if component.component_category == category:
            return component
    return None


def total_power_draw(components: Sequence[ComponentSpecification]) -> float:
    return sum(c.specifications.power_consumption for c in components)


def total_price(components: Sequence[ComponentSpecification]) -> float:
    return sum(c.specifications.price for c in components)


def check_cpu_motherboard(
    cpu: ComponentSpecification,
    motherboard: ComponentSpecification,
    registry: SocketRegistry = SOCKET_COMPATIBILITY,
) -> List[CompatibilityIssue]:
    """Socket equality, then generation support for registered sockets"""
    issues: List[CompatibilityIssue] = []
    cpu_socket = cpu.specifications.socket
    board_socket = motherboard.specifications.socket

    if cpu_socket != board_socket:
        issues.append(CompatibilityIssue(
            severity=Severity.ERROR,
            message=f"CPU socket {cpu_socket or 'N/A'} does not match motherboard socket {board_socket or 'N/A'}",
            message_localized=f"Socket không tương thích: CPU {cpu_socket or 'N/A'} và bo mạch chủ {board_socket or 'N/A'}",
            components=[cpu.id, motherboard.id],
            suggestion="Choose a CPU and motherboard with the same socket",
            suggestion_localized="Chọn CPU và bo mạch chủ có cùng socket",
        ))

    generations = supported_generations(cpu_socket, registry)
    if generations is not None:
        generation = cpu.specifications.generation
        if not any(label in generation for label in generations):
            issues.append(CompatibilityIssue(
                severity=Severity.WARNING,
                message=(
                    f"Motherboard chipset {motherboard.specifications.chipset or 'N/A'} may not fully support "
                    f"CPU generation {generation or 'N/A'} on socket {cpu_socket}"
                ),
                message_localized=(
                    f"Chipset {motherboard.specifications.chipset or 'N/A'} có thể không hỗ trợ đầy đủ "
                    f"thế hệ CPU {generation or 'N/A'} trên socket {cpu_socket}"
                ),
                components=[cpu.id, motherboard.id],
                suggestion=f"Check the BIOS support list; {cpu_socket} supports: {', '.join(generations)}",
                suggestion_localized=f"Kiểm tra danh sách hỗ trợ BIOS; {cpu_socket} hỗ trợ: {', '.join(generations)}",
            ))

    return issues


def check_ram(
    motherboard: ComponentSpecification,
    ram_modules: Sequence[ComponentSpecification],
) -> List[CompatibilityIssue]:
    """Capacity, slot count and memory type of every RAM module against the motherboard"""
    issues: List[CompatibilityIssue] = []
    board = motherboard.specifications
    ram_ids = [ram.id for ram in ram_modules]

    total_ram = sum(ram.specifications.capacity for ram in ram_modules)
    if total_ram > board.max_memory:
        issues.append(CompatibilityIssue(
            severity=Severity.ERROR,
            message=f"Total RAM capacity {_fmt(total_ram)}GB exceeds the motherboard maximum of {_fmt(board.max_memory)}GB",
            message_localized=f"Tổng dung lượng RAM {_fmt(total_ram)}GB vượt quá mức tối đa {_fmt(board.max_memory)}GB của bo mạch chủ",
            components=[motherboard.id, *ram_ids],
            suggestion=f"Reduce total RAM to {_fmt(board.max_memory)}GB or less",
            suggestion_localized=f"Giảm tổng dung lượng RAM xuống tối đa {_fmt(board.max_memory)}GB",
        ))

    if len(ram_modules) > board.memory_slots:
        issues.append(CompatibilityIssue(
            severity=Severity.ERROR,
            message=f"{len(ram_modules)} RAM modules exceed the {board.memory_slots} memory slots on the motherboard",
            message_localized=f"Số thanh RAM ({len(ram_modules)}) vượt quá số khe cắm ({board.memory_slots}) của bo mạch chủ",
            components=[motherboard.id, *ram_ids],
            suggestion=f"Use at most {board.memory_slots} modules, e.g. higher-capacity sticks",
            suggestion_localized=f"Chỉ dùng tối đa {board.memory_slots} thanh RAM, ví dụ chọn thanh dung lượng lớn hơn",
        ))

    ram_types = list(dict.fromkeys(ram.specifications.type for ram in ram_modules))
    supported = ", ".join(board.memory_type)
    for ram_type in ram_types:
        if ram_type in board.memory_type:
            continue
        issues.append(CompatibilityIssue(
            severity=Severity.ERROR,
            message=f"RAM type {ram_type} is not supported by the motherboard (supports {supported})",
            message_localized=f"Loại RAM {ram_type} không được bo mạch chủ hỗ trợ (hỗ trợ {supported})",
            components=[motherboard.id, *(ram.id for ram in ram_modules if ram.specifications.type == ram_type)],
            suggestion=f"Choose {supported} memory",
            suggestion_localized=f"Chọn RAM loại {supported}",
        ))

    return issues


def check_psu(
    psu: ComponentSpecification,
    components: Sequence[ComponentSpecification],
) -> List[CompatibilityIssue]:
    """Supply wattage against the summed draw of every component, with 20% headroom"""
    power_draw = total_power_draw(components)
    psu_wattage = psu.specifications.wattage
    recommended = math.ceil(power_draw * PSU_HEADROOM_FACTOR)

    if psu_wattage < power_draw:
        return [CompatibilityIssue(
            severity=Severity.ERROR,
            message=f"PSU wattage {_fmt(psu_wattage)}W is below the system draw of {_fmt(power_draw)}W",
            message_localized=f"Nguồn {_fmt(psu_wattage)}W không đủ cho hệ thống cần {_fmt(power_draw)}W",
            components=[psu.id],
            suggestion=f"Choose a PSU of at least {recommended}W",
            suggestion_localized=f"Chọn nguồn có công suất tối thiểu {recommended}W",
        )]

    if psu_wattage < recommended:
        return [CompatibilityIssue(
            severity=Severity.WARNING,
            message=f"PSU wattage {_fmt(psu_wattage)}W leaves little headroom over the system draw of {_fmt(power_draw)}W",
            message_localized=f"Nguồn {_fmt(psu_wattage)}W đủ nhưng ít dư so với mức tiêu thụ {_fmt(power_draw)}W",
            components=[psu.id],
            suggestion=f"A PSU of {recommended}W or more is recommended",
            suggestion_localized=f"Nên chọn nguồn từ {recommended}W trở lên",
        )]

    return []


def check_case(
    case: ComponentSpecification,
    components: Sequence[ComponentSpecification],
) -> List[CompatibilityIssue]:
    """GPU length and cooler height clearance of the first GPU and first cooler"""
    issues: List[CompatibilityIssue] = []
    case_spec = case.specifications

    gpu = first_of(components, ComponentCategory.GPU)
    if gpu is not None and gpu.specifications.length > case_spec.max_gpu_length:
        issues.append(CompatibilityIssue(
            severity=Severity.ERROR,
            message=f"GPU length {_fmt(gpu.specifications.length)}mm exceeds case clearance of {_fmt(case_spec.max_gpu_length)}mm",
            message_localized=f"Card đồ họa dài {_fmt(gpu.specifications.length)}mm vượt quá giới hạn {_fmt(case_spec.max_gpu_length)}mm của vỏ máy",
            components=[gpu.id, case.id],
            suggestion="Choose a larger case or a shorter GPU",
            suggestion_localized="Chọn vỏ máy lớn hơn hoặc card đồ họa ngắn hơn",
        ))

    cooler = first_of(components, ComponentCategory.COOLING)
    if cooler is not None and cooler.specifications.height > case_spec.max_cpu_cooler_height:
        issues.append(CompatibilityIssue(
            severity=Severity.ERROR,
            message=f"CPU cooler height {_fmt(cooler.specifications.height)}mm exceeds case clearance of {_fmt(case_spec.max_cpu_cooler_height)}mm",
            message_localized=f"Tản nhiệt CPU cao {_fmt(cooler.specifications.height)}mm vượt quá giới hạn {_fmt(case_spec.max_cpu_cooler_height)}mm của vỏ máy",
            components=[cooler.id, case.id],
            suggestion="Choose a lower-profile cooler or a wider case",
            suggestion_localized="Chọn tản nhiệt thấp hơn hoặc vỏ máy rộng hơn",
        ))

    return issues


class CompatibilityEngine:
    """Runs the category checkers against one build"""

    def __init__(self, socket_registry: SocketRegistry = SOCKET_COMPATIBILITY):
        self.socket_registry = socket_registry

    def check(self, components: Sequence[ComponentSpecification]) -> CompatibilityResult:
        """
        Check a set of components for compatibility

        Args:
            components: Parts the customer intends to buy together

        Returns:
            Result with every issue found plus total power draw and price
        """
        groups = group_by_category(components)
        self._log_duplicates(groups)
        issues: List[CompatibilityIssue] = []

        cpus = groups.get(ComponentCategory.CPU)
        motherboards = groups.get(ComponentCategory.MOTHERBOARD)
        ram_modules = groups.get(ComponentCategory.RAM)
        psus = groups.get(ComponentCategory.PSU)
        cases = groups.get(ComponentCategory.CASE)

        if cpus and motherboards:
            found = check_cpu_motherboard(cpus[0], motherboards[0], self.socket_registry)
            logger.debug(f"CPU-motherboard check: {len(found)} issue(s)")
            issues.extend(found)

        if motherboards and ram_modules:
            found = check_ram(motherboards[0], ram_modules)
            logger.debug(f"RAM check over {len(ram_modules)} module(s): {len(found)} issue(s)")
            issues.extend(found)

        if psus:
            found = check_psu(psus[0], components)
            logger.debug(f"PSU check: {len(found)} issue(s)")
            issues.extend(found)

        if cases:
            found = check_case(cases[0], components)
            logger.debug(f"Case check: {len(found)} issue(s)")
            issues.extend(found)

        result = CompatibilityResult(
            issues=issues,
            power_requirement=total_power_draw(components),
            estimated_price=total_price(components),
        )
        logger.info(
            f"Checked {len(components)} component(s): compatible={result.is_compatible}, "
            f"errors={result.count(Severity.ERROR)}, warnings={result.count(Severity.WARNING)}"
        )
        return result

    def suggest(
        self,
        existing_components: Sequence[ComponentSpecification],
        target_category: Union[ComponentCategory, str],
        locale: str = "en",
    ) -> List[str]:
        """Advice for choosing a part of target_category given the parts already chosen"""
        category = ComponentCategory.parse(target_category)
        vietnamese = locale == "vi"
        suggestions: List[str] = []

        if category == ComponentCategory.CPU:
            motherboard = first_of(existing_components, ComponentCategory.MOTHERBOARD)
            if motherboard is not None and motherboard.specifications.socket:
                socket = motherboard.specifications.socket
                suggestions.append(
                    f"Chọn CPU có socket {socket}" if vietnamese else f"Choose a CPU with socket {socket}"
                )

        elif category == ComponentCategory.RAM:
            motherboard = first_of(existing_components, ComponentCategory.MOTHERBOARD)
            if motherboard is not None:
                board = motherboard.specifications
                memory_type = board.memory_type[0] if board.memory_type else None
                if memory_type:
                    suggestions.append(
                        f"Chọn RAM loại {memory_type}" if vietnamese else f"Choose {memory_type} memory"
                    )
                suggestions.append(
                    f"Dung lượng RAM tối đa: {_fmt(board.max_memory)}GB" if vietnamese
                    else f"Maximum total capacity: {_fmt(board.max_memory)}GB"
                )

        elif category == ComponentCategory.GPU:
            case = first_of(existing_components, ComponentCategory.CASE)
            if case is not None:
                max_length = _fmt(case.specifications.max_gpu_length)
                suggestions.append(
                    f"Chọn card đồ họa dài tối đa {max_length}mm" if vietnamese
                    else f"Choose a GPU no longer than {max_length}mm"
                )

        return suggestions

    def _log_duplicates(self, groups: ComponentGroups) -> None:
        for category in SINGLE_INSTANCE_CATEGORIES:
            members = groups.get(category, [])
            if len(members) > 1:
                logger.warning(
                    f"{len(members)} {category.value} components supplied, checking only the first ({members[0].id})"
                )


# Global engine instance
compatibility_engine = CompatibilityEngine()


def check_pc_compatibility(components: Sequence[ComponentSpecification]) -> CompatibilityResult:
    return compatibility_engine.check(components)


def get_compatibility_suggestions(
    existing_components: Sequence[ComponentSpecification],
    target_category: Union[ComponentCategory, str],
    locale: str = "en",
) -> List[str]:
    return compatibility_engine.suggest(existing_components, target_category, locale)
