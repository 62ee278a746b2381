"""
Unit tests for configuration parsing and validation
"""
import pytest

from pccompat.core.config import Settings


def test_defaults_validate():
    settings = Settings(_env_file=None)
    settings.validate_on_startup()
    assert settings.api_prefix == "/api/v1"
    assert settings.enable_result_cache is True


def test_socket_overrides_parsed_from_json():
    settings = Settings(_env_file=None, socket_generation_overrides='{"AM5": ["Ryzen 9000 Series"]}')
    assert settings.socket_generation_overrides == {"AM5": ["Ryzen 9000 Series"]}


def test_socket_overrides_must_be_object():
    with pytest.raises(ValueError):
        Settings(_env_file=None, socket_generation_overrides='["AM5"]')


def test_allowed_origins_parsed_from_json():
    settings = Settings(_env_file=None, allowed_origins='["https://shop.example.vn"]')
    assert settings.allowed_origins == ["https://shop.example.vn"]


@pytest.mark.parametrize("overrides", [
    {"api_prefix": "api"},
    {"result_cache_ttl": -1},
    {"allowed_origins": ["shop.example.vn"]},
    {"socket_generation_overrides": {"AM5": []}},
])
def test_invalid_values_fail_startup_validation(overrides):
    settings = Settings(_env_file=None, **overrides)
    with pytest.raises(ValueError):
        settings.validate_on_startup()
