"""
E2E tests for applicant personas through the full application.

Personas (as of 2024-01-01):
- debt: in the no-credit segment, always declined
- segment_1: low modifier, period extended to reach the minimum amount
- segment_3: high modifier, capped at the maximum amount
- minor: 14 years old, declined
- senior: 74 years old, declined for long periods
"""

from fastapi.testclient import TestClient


DECISION_URL = "/v1/loan/decision"


def test_debt_applicant_declined(client: TestClient, identity_codes):
    """
    debt: last four digits below 2500
    Expected: 404 regardless of amount and period
    """
    for amount, period in [(2000, 12), (10000, 60)]:
        response = client.post(
            DECISION_URL,
            json={"identityCode": identity_codes["debt"], "loanAmount": amount, "loanPeriod": period},
        )

        assert response.status_code == 404
        assert response.json()["errorMessage"] == "No valid loan found!"


def test_segment_1_applicant_gets_longer_period(client: TestClient, identity_codes):
    """
    segment_1: modifier 100
    Expected: 12 months offers only 1200, so the period is extended to 20
    """
    response = client.post(
        DECISION_URL,
        json={"identityCode": identity_codes["segment_1"], "loanAmount": 2000, "loanPeriod": 12},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["approvedPeriod"] == 20, "Period should grow until 100 * period >= 2000"
    assert data["approvedAmount"] == 2000
    assert data["monthlyPayment"] > 0


def test_segment_3_applicant_capped(client: TestClient, identity_codes):
    """
    segment_3: modifier 1000
    Expected: maximum amount at any valid period
    """
    for period in (12, 36, 60):
        response = client.post(
            DECISION_URL,
            json={"identityCode": identity_codes["segment_3"], "loanAmount": 10000, "loanPeriod": period},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["approvedAmount"] == 10000
        assert data["approvedPeriod"] == period


def test_minor_declined(client: TestClient, identity_codes):
    response = client.post(
        DECISION_URL,
        json={"identityCode": identity_codes["minor"], "loanAmount": 4000, "loanPeriod": 24},
    )

    assert response.status_code == 404
    assert response.json()["errorMessage"] == "The minimum age for applying for a loan is 18."


def test_senior_declined_for_long_period(client: TestClient, identity_codes):
    """
    senior: 888 months old
    Expected: approved up to 47 months, declined from 48
    """
    short = client.post(
        DECISION_URL,
        json={"identityCode": identity_codes["senior"], "loanAmount": 4000, "loanPeriod": 24},
    )
    assert short.status_code == 200

    long = client.post(
        DECISION_URL,
        json={"identityCode": identity_codes["senior"], "loanAmount": 4000, "loanPeriod": 48},
    )
    assert long.status_code == 404
    assert long.json()["errorMessage"] == "Unfortunately, your age exceeds the maximum set limit for this loan."
