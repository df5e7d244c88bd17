"""
Pytest configuration and shared fixtures for the Job Hunter tests.
"""
import os
import sys
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

# In-memory database for the whole run; must be set before the app is imported
os.environ["TESTING"] = "true"

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from job_hunter.main import app
from job_hunter.models.db.database import Base, SessionLocal, engine, get_db
from job_hunter.models.db.application import ApplicationStatus, JobApplication
from job_hunter.models.db.repository import JobApplicationRepository
from job_hunter.services.application_tracker import JobApplicationService


# Test Database Setup
@pytest.fixture(scope="function")
def test_db_session():
    """Create the tables and a fresh session per test."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_client(test_db_session):
    """Create a test client with overridden database dependency."""
    def override_get_db():
        try:
            yield test_db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def repository(test_db_session):
    return JobApplicationRepository(test_db_session)


@pytest.fixture
def job_service(repository):
    return JobApplicationService(repository)


# Job Application Fixtures
@pytest.fixture
def make_job(test_db_session):
    """Persist a job application with sensible defaults."""
    def _make_job(**overrides):
        fields = {
            "job_title": "Python Developer",
            "company_name": "Acme",
            "application_date": date.today() - timedelta(days=3),
            "status": ApplicationStatus.APLICAT,
        }
        fields.update(overrides)
        job = JobApplication(**fields)
        test_db_session.add(job)
        test_db_session.commit()
        test_db_session.refresh(job)
        return job

    return _make_job


@pytest.fixture
def sample_jobs(make_job):
    """Four applications with mixed statuses, salaries and dates."""
    today = date.today()
    return [
        make_job(job_title="Backend Engineer", company_name="Acme",
                 application_date=today - timedelta(days=30),
                 status=ApplicationStatus.APLICAT, salary_offer=None),
        make_job(job_title="Data Engineer", company_name="Globex",
                 application_date=today - timedelta(days=10),
                 status=ApplicationStatus.INTERVIU, salary_offer=50000.0),
        make_job(job_title="ML Engineer", company_name="Acme Labs",
                 application_date=today - timedelta(days=2),
                 status=ApplicationStatus.RESPINS, salary_offer=80000.0),
        make_job(job_title="DevOps Engineer", company_name="Initech",
                 application_date=today - timedelta(days=20),
                 status=ApplicationStatus.APLICAT, salary_offer=65000.0),
    ]


@pytest.fixture
def valid_job_payload():
    return {
        "job_title": "Senior Python Developer",
        "company_name": "Tech Innovations",
        "application_date": (date.today() - timedelta(days=1)).isoformat(),
        "status": "APLICAT",
        "salary_offer": 7500.0,
        "notes": "Applied through company website",
        "job_link": "https://example.com/job/123",
    }


# Environment Variable Mocks
@pytest.fixture(autouse=True)
def mock_environment_variables():
    """Mock environment variables for testing."""
    test_env = {
        "TESTING": "true",
        "LOG_LEVEL": "DEBUG",
    }

    with patch.dict(os.environ, test_env):
        yield test_env
