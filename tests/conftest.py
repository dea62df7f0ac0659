"""Pytest configuration and fixtures"""
import pytest

from shopcart.config import reset_settings
from shopcart.catalog import Products

SETTINGS_ENV_VARS = ("CART_BASE_ADD_URL", "CART_BASE_REMOVE_URL", "CART_TOTALS_MODE")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Every test starts from default settings unless it sets env vars itself."""
    for var in SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def products_without_hacksaw():
    """Sample catalog records"""
    return [
        {"name": "Sledgehammer", "price": 125.75},
        {"name": "Axe", "price": 190.50},
        {"name": "Bandsaw", "price": 562.131},
        {"name": "Chisel", "price": 12.9},
    ]


@pytest.fixture
def original_products(products_without_hacksaw):
    """Sample catalog records including Hacksaw"""
    return products_without_hacksaw + [{"name": "Hacksaw", "price": 18.45}]


@pytest.fixture
def catalog(products_without_hacksaw):
    """Products catalog built from the four-tool sample"""
    return Products(products_without_hacksaw)
