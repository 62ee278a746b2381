"""
Unit tests for the socket compatibility registry
"""
import pytest

from pccompat.api.services.socket_registry import (
    SOCKET_COMPATIBILITY,
    build_socket_registry,
    supported_generations,
)


def test_am5_generations():
    assert SOCKET_COMPATIBILITY["AM5"] == ("Ryzen 7000 Series", "Ryzen 8000 Series")


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        SOCKET_COMPATIBILITY["AM6"] = ("Ryzen 10000 Series",)


def test_overrides_extend_and_replace():
    registry = build_socket_registry({"AM5": ["Ryzen 9000 Series"], "LGA1954": ["Nova Lake"]})

    assert registry["AM5"] == ("Ryzen 9000 Series",)
    assert registry["LGA1954"] == ("Nova Lake",)
    assert registry["AM4"] == SOCKET_COMPATIBILITY["AM4"]
    # The built-in table is left alone
    assert SOCKET_COMPATIBILITY["AM5"] == ("Ryzen 7000 Series", "Ryzen 8000 Series")


def test_supported_generations_lookup():
    assert supported_generations("LGA1700") == ("12th Gen", "13th Gen", "14th Gen")
    assert supported_generations("sTR5") is None
    assert supported_generations(None) is None
