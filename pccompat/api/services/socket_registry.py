"""
CPU socket to supported CPU generation lookup
"""
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple


SocketRegistry = Mapping[str, Tuple[str, ...]]

# Generation labels are matched as substrings of the CPU "generation" attribute
SOCKET_COMPATIBILITY: SocketRegistry = MappingProxyType({
    "LGA1700": ("12th Gen", "13th Gen", "14th Gen"),
    "LGA1200": ("10th Gen", "11th Gen"),
    "LGA1851": ("Core Ultra 200S",),
    "AM4": ("Ryzen 1000 Series", "Ryzen 2000 Series", "Ryzen 3000 Series", "Ryzen 4000 Series", "Ryzen 5000 Series"),
    "AM5": ("Ryzen 7000 Series", "Ryzen 8000 Series"),
})


def build_socket_registry(
    overrides: Optional[Mapping[str, Sequence[str]]] = None,
    base: SocketRegistry = SOCKET_COMPATIBILITY,
) -> SocketRegistry:
    """
    Build a read-only registry from the built-in table plus configured entries.

    Overrides replace the generation list of an existing socket or add a new one.
    """
    merged = dict(base)
    for socket, generations in (overrides or {}).items():
        merged[socket] = tuple(generations)
    return MappingProxyType(merged)


def supported_generations(socket: Optional[str], registry: SocketRegistry = SOCKET_COMPATIBILITY) -> Optional[Tuple[str, ...]]:
    """Generation labels for a socket, or None when the socket is not registered"""
    if socket is None:
        return None
    return registry.get(socket)
