"""Shared fixtures: an in-memory database loaded with a small dataset."""

import duckdb
import pytest
from fastapi.testclient import TestClient

from app.container import container
from app.repositories import init_tables
from app.repositories.core import MpRepository, PostcodeRepository
from app.services.lookup import LookupService
from app.services.rate_limit import RateLimitGuard, SlidingWindowRateLimiter
from etl import Dataset, load_dataset

DATASET = {
    "districts": [
        {
            "districtId": 1,
            "name": "Melbourne",
            "mp": {"name": "A. Smith", "party": "ALP", "phoneNumber": "0312345678"},
            "postcodes": [3000, 3002, 3003, 3051],
        },
        {
            "districtId": 2,
            "name": "Richmond",
            "mp": {"name": "B. Jones", "party": "Greens", "phoneNumber": "0398765432"},
            "postcodes": [3121, 3002],
        },
        {
            "districtId": 3,
            "name": "Brunswick",
            "mp": None,
            "postcodes": [3056],
        },
    ],
    "unassignedMps": [{"name": "C. Brown", "party": "Independent"}],
    "unassignedPostcodes": [3999],
}


class FakeClock:
    """Settable epoch-ms clock."""

    def __init__(self, now: int = 0):
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def dataset() -> Dataset:
    return Dataset.model_validate(DATASET)


@pytest.fixture
def conn(dataset):
    connection = duckdb.connect(":memory:")
    init_tables(connection)
    load_dataset(connection, dataset)
    yield connection
    connection.close()


@pytest.fixture
def lookup_service(conn) -> LookupService:
    return LookupService(
        postcode_repo=PostcodeRepository(conn=conn),
        mp_repo=MpRepository(conn=conn),
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def guard(clock) -> RateLimitGuard:
    return RateLimitGuard(SlidingWindowRateLimiter(), max_requests=3, window_ms=60_000, clock=clock)


@pytest.fixture
def client(lookup_service, guard):
    from web.server import app

    container.override(lookup=lookup_service, rate_limit=guard)
    yield TestClient(app)
    container.reset()
