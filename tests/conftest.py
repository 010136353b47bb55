"""
Shared test fixtures — test client and standard form fields.
"""

import pytest
from fastapi.testclient import TestClient

from concrete_estimator.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def slab_fields():
    """10' x 12' x 4" slab, 3" cover, default spacing and stock."""
    return {
        "length": "12",
        "width": "10",
        "thickness": "4",
        "cover": "3",
    }


@pytest.fixture
def column_fields():
    """12" x 12" column, 10' tall, 1.5" cover."""
    return {
        "width": "1",
        "length": "1",
        "height": "10",
        "cover": "1.5",
    }
