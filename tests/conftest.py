"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from fynp_gateway.api.main import create_app
from fynp_gateway.domain.models import LenderOffer


@pytest.fixture
def app():
    """Fresh FastAPI application"""
    app = create_app()
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """Create FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def sample_offers() -> list[LenderOffer]:
    """Three lenders quoting a 24-month personal loan"""
    return [
        LenderOffer(lender_name="HDFC Bank", annual_rate_percent=10.75, processing_fee=1499),
        LenderOffer(lender_name="ICICI Bank", annual_rate_percent=10.99, processing_fee=999),
        LenderOffer(lender_name="IDFC FIRST", annual_rate_percent=11.00, processing_fee=1200),
    ]
