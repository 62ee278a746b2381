"""
Rough build performance estimate from benchmark attributes
"""
import math
from typing import Sequence

from pccompat.api.models.component import ComponentCategory, ComponentSpecification
from pccompat.api.models.compatibility import PerformanceEstimate
from pccompat.api.services.compatibility_engine import first_of


NEUTRAL_SCORE = 50


def _round_half_up(value: float) -> int:
    return max(0, int(math.floor(value + 0.5)))


def estimate_performance(components: Sequence[ComponentSpecification]) -> PerformanceEstimate:
    """Weighted score of the first CPU, GPU and RAM; missing parts count as neutral"""
    cpu = first_of(components, ComponentCategory.CPU)
    gpu = first_of(components, ComponentCategory.GPU)
    ram = first_of(components, ComponentCategory.RAM)

    cpu_score = (cpu.specifications.benchmark_score if cpu else None) or NEUTRAL_SCORE
    gpu_score = (gpu.specifications.benchmark_score if gpu else None) or NEUTRAL_SCORE
    ram_speed = ram.specifications.speed if ram else None
    ram_score = min(ram_speed / 100, 100) if ram_speed else NEUTRAL_SCORE

    return PerformanceEstimate(
        gaming=_round_half_up(gpu_score * 0.6 + cpu_score * 0.3 + ram_score * 0.1),
        productivity=_round_half_up(cpu_score * 0.6 + ram_score * 0.3 + gpu_score * 0.1),
        overall=_round_half_up((cpu_score + gpu_score + ram_score) / 3),
    )
