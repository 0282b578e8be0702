"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient
from fynp_gateway.api.dependencies import get_settings
from fynp_gateway.config import Settings
from fynp_gateway.domain.amortization import periodic_payment


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/emi", json={"principal": 500000, "annual_rate_percent": 10.5, "term_months": 36})

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "fynp_calculation_total" in response.text


def test_request_id_header(client: TestClient):
    """Test request ID is generated, or echoed when the caller sends one"""
    response = client.get("/health")
    assert response.headers["X-Request-ID"]

    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_emi_endpoint(client: TestClient):
    """Test POST /v1/emi for 5 lakh at 10.5% over 36 months"""
    response = client.post(
        "/v1/emi",
        json={"principal": 500000, "annual_rate_percent": 10.5, "term_months": 36},
    )

    assert response.status_code == 200
    data = response.json()
    assert abs(data["periodic_payment"] - 16255) <= 5
    assert abs(data["total_payment"] - 585045) <= 50
    assert abs(data["total_interest"] - 85045) <= 50
    assert data["display"]["periodic_payment"] == f"₹{data['periodic_payment']:,}"


def test_emi_endpoint_degenerate_input(client: TestClient):
    """Test zero principal returns an all-zero result instead of an error"""
    response = client.post(
        "/v1/emi",
        json={"principal": 0, "annual_rate_percent": 10.5, "term_months": 36},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["periodic_payment"] == 0
    assert data["total_payment"] == 0
    assert data["total_interest"] == 0


def test_emi_endpoint_rejects_negative_principal(client: TestClient):
    """Test schema validation on negative amounts"""
    response = client.post(
        "/v1/emi",
        json={"principal": -1, "annual_rate_percent": 10.5, "term_months": 36},
    )
    assert response.status_code == 422


@pytest.mark.parametrize(
    "term_months,status_code",
    [(1200, 200), (1201, 422), (int("9" * 400), 422)],
)
def test_emi_endpoint_term_upper_bound(client: TestClient, term_months, status_code):
    """Test tenures beyond 100 years are rejected by validation, not by a server error"""
    response = client.post(
        "/v1/emi",
        json={"principal": 500000, "annual_rate_percent": 10.5, "term_months": term_months},
    )
    assert response.status_code == status_code


def test_eligibility_endpoint_rejects_oversized_income(client: TestClient):
    """Test amounts above the accepted ceiling are a validation error"""
    response = client.post(
        "/v1/eligibility",
        json={"monthly_income": 10**13, "annual_rate_percent": 10.5, "term_months": 60},
    )
    assert response.status_code == 422


def test_emi_compare_endpoint(client: TestClient):
    """Test POST /v1/emi/compare: the higher rate costs strictly more"""
    response = client.post(
        "/v1/emi/compare",
        json={
            "principal": 500000,
            "term_months": 36,
            "first_rate_percent": 10.5,
            "second_rate_percent": 12.5,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["second"]["periodic_payment"] > data["first"]["periodic_payment"]
    assert data["second"]["total_interest"] > data["first"]["total_interest"]
    assert data["total_payment_delta"] > 0


def test_eligibility_endpoint(client: TestClient):
    """Test POST /v1/eligibility with the default 55% FOIR"""
    response = client.post(
        "/v1/eligibility",
        json={
            "monthly_income": 65000,
            "existing_monthly_obligations": 12000,
            "annual_rate_percent": 10.5,
            "term_months": 60,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["max_affordable_payment"] == 29150
    assert data["ceiling_ratio"] == 0.55
    assert abs(periodic_payment(data["max_principal"], 10.5, 60) - 29150) <= 10


def test_eligibility_endpoint_ceiling_override(client: TestClient):
    """Test request-level FOIR override"""
    response = client.post(
        "/v1/eligibility",
        json={
            "monthly_income": 65000,
            "existing_monthly_obligations": 12000,
            "annual_rate_percent": 10.5,
            "term_months": 60,
            "ceiling_ratio": 0.5,
        },
    )

    assert response.status_code == 200
    assert response.json()["max_affordable_payment"] == 26500


def test_eligibility_endpoint_obligations_exceed_income(client: TestClient):
    """Test negative free income clamps to zero eligibility"""
    response = client.post(
        "/v1/eligibility",
        json={
            "monthly_income": 20000,
            "existing_monthly_obligations": 30000,
            "annual_rate_percent": 10.5,
            "term_months": 60,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["max_principal"] == 0
    assert data["max_affordable_payment"] == 0


def test_tax_savings_endpoint(client: TestClient):
    """Test POST /v1/tax-savings for 35 lakh at 8.5%"""
    response = client.post(
        "/v1/tax-savings",
        json={"loan_amount": 3500000, "annual_rate_percent": 8.5},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["interest_saving"] == 60000
    assert data["principal_saving"] == 45000
    assert data["total_saving"] == 105000
    assert data["assumed_tenure_years"] == 20
    assert data["display"]["total_saving"] == "₹1,05,000"


def test_offers_compare_endpoint(client: TestClient):
    """Test POST /v1/offers/compare ranks lenders by total cost"""
    response = client.post(
        "/v1/offers/compare",
        json={
            "principal": 500000,
            "term_months": 24,
            "offers": [
                {"lender_name": "IDFC FIRST", "annual_rate_percent": 11.0, "processing_fee": 1200},
                {"lender_name": "HDFC Bank", "annual_rate_percent": 10.75, "processing_fee": 1499},
                {"lender_name": "ICICI Bank", "annual_rate_percent": 10.99, "processing_fee": 999},
            ],
        },
    )

    assert response.status_code == 200
    quotes = response.json()["quotes"]
    assert [q["lender_name"] for q in quotes] == ["HDFC Bank", "ICICI Bank", "IDFC FIRST"]
    assert quotes[0]["best_rate"] is True
    assert quotes[0]["total_cost"] - quotes[0]["total_payment"] in (1498, 1499, 1500)


def test_offers_compare_endpoint_without_offers(client: TestClient):
    """Test empty offer list is rejected"""
    response = client.post(
        "/v1/offers/compare",
        json={"principal": 500000, "term_months": 24, "offers": []},
    )

    assert response.status_code == 422
    assert "offer" in response.json()["detail"]


def test_loan_configuration_endpoint(client: TestClient):
    """Test raw slider values are snapped before quoting"""
    response = client.post(
        "/v1/loan-configuration",
        json={
            "lender_name": "HDFC Bank",
            "annual_rate_percent": 10.75,
            "loan_amount": 123456,
            "tenure_months": 23.6,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["loan_amount"] == 123000
    assert data["tenure_months"] == 24
    assert data["processing_fee"] == 1499
    assert data["total_cost"] - data["total_payment"] in (1498, 1499, 1500)


def test_loan_configuration_endpoint_clamps_bounds(client: TestClient):
    """Test slider values outside bounds are clamped"""
    response = client.post(
        "/v1/loan-configuration",
        json={
            "lender_name": "HDFC Bank",
            "annual_rate_percent": 10.75,
            "loan_amount": 5_000_000,
            "tenure_months": 120,
            "processing_fee": 0,
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["loan_amount"] == 1_000_000
    assert data["tenure_months"] == 60
    assert data["processing_fee"] == 0


def test_loan_configuration_endpoint_misconfigured_bounds(app, client: TestClient):
    """Test inverted slider bounds surface as a server error"""
    app.dependency_overrides[get_settings] = lambda: Settings(loan_amount_min=1_000_000, loan_amount_max=50_000)

    response = client.post(
        "/v1/loan-configuration",
        json={
            "lender_name": "HDFC Bank",
            "annual_rate_percent": 10.75,
            "loan_amount": 500000,
            "tenure_months": 24,
        },
    )

    assert response.status_code == 500
