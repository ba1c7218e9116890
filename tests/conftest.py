"""Shared fixtures for the comparison test suite."""

import pytest

from spec_compare.models import SpecCatalog, SpecCategory, SpecDefinition


@pytest.fixture
def phone_a():
    """A fully specified phone."""
    return {
        "name": "Galaxy S24",
        "specs": {
            "screen": {"size": "6.2 inch", "resolution": "2340 x 1080", "technology": "Dynamic AMOLED 2X"},
            "processor": {"chipset": "Exynos 2400", "cpu": "10-core", "gpu": "Xclipse 940"},
            "memory": {"ram": "8 GB", "storage": "256 GB", "expandable": False},
            "camera": {
                "rear": {"primary": "50 MP", "secondary": "12 MP", "tertiary": "10 MP"},
                "front": "12 MP",
            },
            "battery": {"capacity": "4000 mAh", "charging": {"wired": "25W", "wireless": "15W"}},
            "connectivity": {"network": ["5G", "4G"], "ports": ["USB-C"]},
            "os": "Android 14",
            "dimensions": "147 x 70.6 x 7.6 mm",
            "weight": "167 g",
        },
    }


@pytest.fixture
def phone_b():
    """A phone with a few gaps in its specs."""
    return {
        "name": "Pixel 8",
        "specs": {
            "screen": {"size": "6.2 inch", "resolution": "2400 x 1080", "technology": "OLED"},
            "processor": {"chipset": "Tensor G3", "cpu": "9-core", "gpu": ""},
            "memory": {"ram": "8 GB", "storage": "128 GB", "expandable": True},
            "camera": {"rear": {"primary": "50 MP", "secondary": "12 MP"}, "front": "10.5 MP"},
            "battery": {"capacity": "4575 mAh", "charging": {"wired": "27W", "wireless": "18W"}},
            "connectivity": {"network": ["5G", "4G"], "ports": []},
            "os": "Android 14",
            "weight": "187 g",
        },
    }


@pytest.fixture
def bare_phone():
    """A phone with no specs subtree at all."""
    return {"name": "Mystery Phone", "price": 1000000}


@pytest.fixture
def small_catalog():
    """Three categories, mixing numeric, text and boolean specs."""
    return SpecCatalog(
        version="test-1",
        categories=(
            SpecCategory(name="Memory", specs=(
                SpecDefinition(key="memory.ram", label="RAM", is_numeric=True),
                SpecDefinition(key="memory.expandable", label="Expandable"),
            )),
            SpecCategory(name="Display", specs=(
                SpecDefinition(key="screen.technology", label="Technology"),
            )),
            SpecCategory(name="Other", specs=(
                SpecDefinition(key="weight", label="Weight", is_numeric=True, lower_is_better=True),
            )),
        ),
    )
