"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from decision_engine.api.main import create_app
from decision_engine.api.dependencies import get_decision_engine
from decision_engine.config import Settings
from decision_engine.domain.engine import DecisionEngine


# Fixed "today" so age-dependent rules are reproducible
TODAY = date(2024, 1, 1)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def config() -> Settings:
    """Default loan rules, independent of the process environment"""
    return Settings(
        min_loan_amount=2000,
        max_loan_amount=10000,
        min_loan_period=12,
        max_loan_period=60,
        max_age_months=935,
        interest_rate_segment_1=0.05,
        interest_rate_segment_2=0.04,
        interest_rate_segment_3=0.03,
    )


@pytest.fixture
def engine(config: Settings, today: date) -> DecisionEngine:
    """Decision engine pinned to a fixed date"""
    return DecisionEngine(config=config, today=lambda: today)


@pytest.fixture
def client(engine: DecisionEngine) -> TestClient:
    """Create FastAPI test client with the fixed-date engine"""
    app = create_app()
    app.dependency_overrides[get_decision_engine] = lambda: engine
    return TestClient(app)


@pytest.fixture
def identity_codes() -> dict[str, str]:
    """
    Valid Estonian identity codes (checksums included) for each scenario.

    Birth dates are relative to TODAY = 2024-01-01.
    """
    return {
        "debt": "49002010965",  # 1990-02-01, last four 0965
        "segment_1": "49002013008",  # 1990-02-01, last four 3008
        "segment_1_edge": "49002064999",  # 1990-02-06, last four 4999
        "segment_2": "49002015503",  # 1990-02-01, last four 5503
        "segment_3": "49002018004",  # 1990-02-01, last four 8004
        "minor": "51001014007",  # 2010-01-01, segment 1
        "just_adult": "60601018001",  # 2006-01-01, turns 18 on TODAY
        "almost_adult": "60601028008",  # 2006-01-02, turns 18 tomorrow
        "senior": "35001018001",  # 1950-01-01, 888 months old, segment 3
        "nineteenth_century": "18001018005",  # 1880-01-01, valid code, unsupported century
    }
