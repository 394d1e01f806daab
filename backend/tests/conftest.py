"""
Test configuration and fixtures for HueTone tests.
"""
import pytest
from fastapi.testclient import TestClient

# Import the main app
from main import app


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def red_scheme():
    """Standard-contrast light TonalSpot scheme seeded with pure red."""
    from huetone.services.colors.dynamiccolor import DynamicScheme, Variant
    from huetone.services.colors.hct import Hct

    return DynamicScheme.from_variant(Hct.from_int(0xffff0000), Variant.TONAL_SPOT, False)
