"""
Storage access for job applications.
"""
import logging
from typing import List, Optional

from sqlalchemy import nulls_first, nulls_last
from sqlalchemy.orm import Session

from .application import ApplicationStatus, JobApplication

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = {
    "id": JobApplication.id,
    "job_title": JobApplication.job_title,
    "company_name": JobApplication.company_name,
    "application_date": JobApplication.application_date,
    "salary_offer": JobApplication.salary_offer,
    "position": JobApplication.position,
}


class JobApplicationRepository:
    """CRUD and simple queries over the ``jobs_table`` table."""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self, sort_field: Optional[str] = None, direction: str = "asc") -> List[JobApplication]:
        """
        Return every record, in id order unless a sort field is given.

        Descending sorts place NULLs last and ascending sorts place them
        first, so a missing value always ranks lowest. Ties keep id order.
        """
        query = self.db.query(JobApplication)
        if sort_field is None:
            return query.order_by(JobApplication.id).all()

        column = SORTABLE_FIELDS.get(sort_field)
        if column is None:
            raise ValueError(f"Cannot sort job applications by '{sort_field}'")

        direction = direction.lower()
        if direction == "desc":
            ordering = nulls_last(column.desc())
        elif direction == "asc":
            ordering = nulls_first(column.asc())
        else:
            raise ValueError(f"Unknown sort direction '{direction}'")

        return query.order_by(ordering, JobApplication.id).all()

    def find_by_id(self, job_id: int) -> Optional[JobApplication]:
        return self.db.get(JobApplication, job_id)

    def save(self, job: JobApplication) -> JobApplication:
        """Insert when the record has no id yet, update it otherwise."""
        if job.id is None:
            self.db.add(job)
        else:
            job = self.db.merge(job)
        self.db.commit()
        self.db.refresh(job)
        return job

    def delete_by_id(self, job_id: int) -> None:
        job = self.find_by_id(job_id)
        if job is None:
            logger.debug("Delete requested for missing job application %s", job_id)
            return
        self.db.delete(job)
        self.db.commit()

    def find_by_status(self, status: ApplicationStatus) -> List[JobApplication]:
        return (
            self.db.query(JobApplication)
            .filter(JobApplication.status == status)
            .order_by(JobApplication.id)
            .all()
        )

    def find_by_company_name(self, text: str) -> List[JobApplication]:
        # LIKE ignores case on SQLite; keep only case-sensitive matches
        candidates = (
            self.db.query(JobApplication)
            .filter(JobApplication.company_name.contains(text, autoescape=True))
            .order_by(JobApplication.id)
            .all()
        )
        return [job for job in candidates if text in job.company_name]
