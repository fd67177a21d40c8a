"""
Shared test fixtures: test client, sample pricing configurations.
"""

import os
import pytest
from fastapi.testclient import TestClient

# Pin display settings before importing app modules
os.environ["CURRENCY_LOCALE"] = "en_US"
os.environ["DEFAULT_CURRENCY"] = "CAD"

from tradequote.main import app
from tradequote.schemas import PricingConfiguration


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def panel_config():
    """Pricing from the 200A panel upgrade preset."""
    return PricingConfiguration(
        material_markup_percent=30,
        labor_rate=110,
        tax=5,
        discount=0,
        deposit=40,
        currency="CAD",
    )


@pytest.fixture
def zero_config():
    """No markup, no labor rate, no percentages."""
    return PricingConfiguration(
        material_markup_percent=0,
        labor_rate=0,
        tax=0,
        discount=0,
        deposit=0,
        currency="USD",
    )
