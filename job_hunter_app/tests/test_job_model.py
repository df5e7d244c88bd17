"""
Test the job application model and its status enumeration.
"""
from datetime import date, timedelta

import pytest
from sqlalchemy import text

from job_hunter.models.db.application import (
    GHOSTED_AFTER_DAYS,
    ApplicationStatus,
    JobApplication,
)


TODAY = date(2026, 1, 20)


class TestGhostedApplications:
    """An application is ghosted after two weeks without a status change."""

    def test_applied_more_than_fourteen_days_ago_is_ghosted(self):
        job = JobApplication(status=ApplicationStatus.APLICAT,
                             application_date=TODAY - timedelta(days=15))
        assert job.is_ghosted(today=TODAY)

    def test_exactly_fourteen_days_is_not_ghosted(self):
        job = JobApplication(status=ApplicationStatus.APLICAT,
                             application_date=TODAY - timedelta(days=GHOSTED_AFTER_DAYS))
        assert not job.is_ghosted(today=TODAY)

    def test_recent_application_is_not_ghosted(self):
        job = JobApplication(status=ApplicationStatus.APLICAT, application_date=TODAY)
        assert not job.is_ghosted(today=TODAY)

    @pytest.mark.parametrize("status", [
        ApplicationStatus.INTERVIU,
        ApplicationStatus.OFERTA,
        ApplicationStatus.RESPINS,
        ApplicationStatus.RETRAS,
    ])
    def test_other_statuses_are_never_ghosted(self, status):
        job = JobApplication(status=status, application_date=TODAY - timedelta(days=365))
        assert not job.is_ghosted(today=TODAY)

    def test_missing_date_is_not_ghosted(self):
        job = JobApplication(status=ApplicationStatus.APLICAT, application_date=None)
        assert not job.is_ghosted(today=TODAY)

    def test_ghosted_property_uses_current_date(self):
        job = JobApplication(status=ApplicationStatus.APLICAT,
                             application_date=date.today() - timedelta(days=40))
        assert job.ghosted is True


class TestApplicationStatus:

    def test_applied_status_is_present(self):
        assert ApplicationStatus["APLICAT"] is ApplicationStatus.APLICAT

    def test_every_status_has_a_label(self):
        for status in ApplicationStatus:
            assert status.label

    def test_status_value_matches_name(self):
        # Storage keeps the enumeration name
        for status in ApplicationStatus:
            assert status.value == status.name

    def test_status_is_stored_by_name(self, make_job, test_db_session):
        job = make_job(status=ApplicationStatus.RESPINS)

        stored = test_db_session.execute(
            text("SELECT status FROM jobs_table WHERE id = :id"), {"id": job.id}
        ).scalar_one()
        assert stored == "RESPINS"
