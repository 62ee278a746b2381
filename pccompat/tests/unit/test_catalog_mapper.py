"""
Unit tests for catalog record mapping
"""
import pytest

from pccompat.api.models.component import ComponentCategory, CpuSpec, PsuSpec
from pccompat.api.models.compatibility import CartItem
from pccompat.api.services.catalog_mapper import (
    cart_to_components,
    has_pc_components,
    normalize_socket,
    normalize_specifications,
    parse_number,
    to_component_specification,
)


@pytest.mark.parametrize("raw, expected", [
    ("650W", 650),
    ("32 GB", 32),
    ("1,5 TB", 1.5),
    ("2.0", 2.0),
    ("1,000W", 1000),
    ("12.990.000", 12990000),
    ("1,299,000.50", 1299000.5),
    ("3200 MHz", 3200),
    ("-12 V", -12),
    (750, 750),
    (12.5, 12.5),
    ("N/A", None),
])
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


@pytest.mark.parametrize("raw, expected", [
    ("LGA 1700", "LGA1700"),
    ("socket am5", "AM5"),
    ("AM4", "AM4"),
    ("  ", None),
    (None, None),
])
def test_normalize_socket(raw, expected):
    assert normalize_socket(raw) == expected


class TestNormalizeSpecifications:

    def test_unknown_keys_untouched(self):
        specs = normalize_specifications({"color": "black", "rgb": True})
        assert specs == {"color": "black", "rgb": True}

    def test_memory_types_upper_cased(self):
        assert normalize_specifications({"type": " ddr5 "}, "RAM")["type"] == "DDR5"
        assert normalize_specifications({"memory_type": ["ddr4", "ddr5"]})["memory_type"] == ["DDR4", "DDR5"]
        assert normalize_specifications({"memory_type": "ddr4/ddr5"})["memory_type"] == "DDR4/DDR5"

    def test_type_left_alone_outside_ram(self):
        assert normalize_specifications({"type": "NVMe"}, "STORAGE")["type"] == "NVMe"
        assert normalize_specifications({"type": "NVMe"})["type"] == "NVMe"

    def test_source_mapping_not_modified(self):
        raw = {"wattage": "650W"}
        normalize_specifications(raw)
        assert raw == {"wattage": "650W"}

    def test_none_gives_empty_dict(self):
        assert normalize_specifications(None) == {}


class TestToComponentSpecification:

    def test_product_record_mapping(self):
        record = {
            "id": 17,
            "name": "Intel Core i5-13400F",
            "name_vi": "CPU Intel Core i5-13400F (Chính hãng)",
            "category_name": "cpu",
            "specifications": {"socket": "LGA 1700", "generation": "13th Gen", "power_consumption": "65W"},
            "compatibility_info": {"bios_update": False},
        }

        component = to_component_specification(record)

        assert component.id == "17"
        assert component.name == "CPU Intel Core i5-13400F (Chính hãng)"
        assert component.component_category == ComponentCategory.CPU
        assert isinstance(component.specifications, CpuSpec)
        assert component.specifications.socket == "LGA1700"
        assert component.specifications.power_consumption == 65
        assert component.compatibility_info == {"bios_update": False}

    def test_missing_category_falls_back_to_accessories(self):
        component = to_component_specification({"id": "p1", "name": "HDMI cable"})
        assert component.category == "ACCESSORIES"
        assert component.component_category is None

    def test_unparseable_number_takes_default(self):
        component = to_component_specification({
            "id": "p2", "name": "Generic PSU", "category_name": "PSU",
            "specifications": {"wattage": "unknown"},
        })
        assert isinstance(component.specifications, PsuSpec)
        assert component.specifications.wattage == 0


class TestCart:

    def test_one_component_per_line(self):
        items = [
            CartItem(product={"id": 1, "name": "Kingston 16GB", "category_name": "RAM",
                              "specifications": {"capacity": "16GB", "type": "ddr4"}}, quantity=2),
            {"product": {"id": 2, "name": "B660M", "category_name": "Motherboard"}},
        ]

        components = cart_to_components(items)

        assert [c.id for c in components] == ["1", "2"]
        assert components[0].specifications.capacity == 16
        assert components[0].specifications.type == "DDR4"
        assert components[1].category == "MOTHERBOARD"

    def test_grouped_thousands_in_catalog_values(self):
        psu = to_component_specification({
            "id": 6, "name": "Corsair RM1000x", "category_name": "PSU",
            "specifications": {"wattage": "1,000W", "price": "4.590.000"},
        })
        ssd = to_component_specification({
            "id": 7, "name": "Samsung 990 Pro", "category_name": "STORAGE",
            "specifications": {"type": "NVMe"},
        })

        assert psu.specifications.wattage == 1000
        assert psu.specifications.price == 4590000
        assert ssd.specifications.type == "NVMe"

    def test_has_pc_components(self):
        cpu = to_component_specification({"id": 1, "name": "CPU", "category_name": "CPU"})
        ssd = to_component_specification({"id": 2, "name": "SSD", "category_name": "STORAGE"})
        mouse = to_component_specification({"id": 3, "name": "Mouse", "category_name": "ACCESSORIES"})

        assert has_pc_components([ssd, cpu]) is True
        assert has_pc_components([ssd, mouse]) is False
        assert has_pc_components([]) is False
