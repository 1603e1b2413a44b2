"""Performance benchmarks for the dashboard reports."""

from datetime import datetime

from pytest_codspeed import BenchmarkFixture
from sqlmodel import Session

from app.services import stats as stats_service
from app.services.aggregation import DateRange

NOW = datetime(2023, 6, 15)


def test_total_adoptions_performance(
    benchmark: BenchmarkFixture, populated_session: Session
):
    """Benchmark the adoption report over the full history."""

    @benchmark
    def total_adoptions():
        populated_session.expire_all()
        return stats_service.get_total_adoptions(populated_session)


def test_total_adoptions_range_performance(
    benchmark: BenchmarkFixture, populated_session: Session
):
    date_range = DateRange.from_params("2022-06-01", "2022-12-31")

    @benchmark
    def total_adoptions_in_range():
        return stats_service.get_total_adoptions(populated_session, date_range)


def test_cats_status_performance(
    benchmark: BenchmarkFixture, populated_session: Session
):
    @benchmark
    def cats_status():
        populated_session.expire_all()
        return stats_service.get_cats_status(populated_session)


def test_incoming_cats_performance(
    benchmark: BenchmarkFixture, populated_session: Session
):
    @benchmark
    def incoming_cats():
        return stats_service.get_incoming_cats(populated_session, now=NOW)
