"""
Business logic for the job application tracker: listing, filtering,
sorting, searching, statistics and manual reordering.
"""
import logging
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional

from ..models.db.application import ApplicationStatus, JobApplication
from ..models.db.repository import JobApplicationRepository

logger = logging.getLogger(__name__)

SORT_BY_SALARY = "salary"
SORT_BY_DATE = "date"
NO_DATE = "N/A"


class JobApplicationService:
    def __init__(self, repository: JobApplicationRepository):
        self.repository = repository

    def get_all_jobs(self) -> List[JobApplication]:
        return self.repository.find_all()

    def save_job(self, job: JobApplication) -> JobApplication:
        saved = self.repository.save(job)
        logger.info("Saved job application %s (%s)", saved.id, saved.company_name)
        return saved

    def get_job_by_id(self, job_id: int) -> Optional[JobApplication]:
        return self.repository.find_by_id(job_id)

    def delete_job(self, job_id: int) -> None:
        self.repository.delete_by_id(job_id)
        logger.info("Deleted job application %s", job_id)

    def update_job_positions(self, ordered_ids: Iterable[int]) -> None:
        """
        Persist a manual ordering: the record at index i gets position i.

        Ids with no stored record are skipped.
        """
        for position, job_id in enumerate(ordered_ids):
            job = self.repository.find_by_id(job_id)
            if job is None:
                logger.debug("Skipping reorder of unknown job application %s", job_id)
                continue
            job.position = position
            self.repository.save(job)

    def filter_by_status(self, status: Optional[ApplicationStatus]) -> List[JobApplication]:
        if status is None:
            return self.repository.find_all()
        return self.repository.find_by_status(status)

    def sort_by_salary_desc(self) -> List[JobApplication]:
        return self.repository.find_all("salary_offer", "desc")

    def sort_by_date_desc(self) -> List[JobApplication]:
        return self.repository.find_all("application_date", "desc")

    def search_by_company(self, text: str) -> List[JobApplication]:
        return self.repository.find_by_company_name(text)

    def list_jobs(
        self,
        status_filter: Optional[ApplicationStatus] = None,
        sort_by: Optional[str] = None,
        keyword: Optional[str] = None,
    ) -> List[JobApplication]:
        """
        Select the records to display.

        Only one criterion applies, in this order: keyword search on the
        company name, status filter, sort by salary, sort by date. Without
        any of them the records come back in storage order.
        """
        if keyword:
            return self.search_by_company(keyword)
        if status_filter is not None:
            return self.filter_by_status(status_filter)
        if sort_by == SORT_BY_SALARY:
            return self.sort_by_salary_desc()
        if sort_by == SORT_BY_DATE:
            return self.sort_by_date_desc()
        return self.get_all_jobs()

    @staticmethod
    def get_max_salary(jobs: Optional[List[JobApplication]]) -> float:
        offers = [job.salary_offer for job in jobs or [] if job.salary_offer is not None]
        return max(offers, default=0.0)

    @staticmethod
    def get_last_application_date(jobs: Optional[List[JobApplication]]) -> str:
        dates = [job.application_date for job in jobs or [] if job.application_date is not None]
        if not dates:
            return NO_DATE
        return max(dates).isoformat()

    def get_status_statistics(self, jobs: Optional[List[JobApplication]] = None) -> Dict[str, int]:
        """Count records per status name across the whole table."""
        if jobs is None:
            jobs = self.get_all_jobs()
        return dict(Counter(ApplicationStatus(job.status).name for job in jobs))

    def build_dashboard(
        self,
        status_filter: Optional[ApplicationStatus] = None,
        sort_by: Optional[str] = None,
        keyword: Optional[str] = None,
    ) -> Dict[str, Any]:
        jobs = self.list_jobs(status_filter=status_filter, sort_by=sort_by, keyword=keyword)
        return {
            "jobs": jobs,
            "keyword": keyword,
            "selected_status": status_filter,
            "total_jobs": len(jobs),
            "max_salary": self.get_max_salary(jobs),
            "last_application": self.get_last_application_date(jobs),
            "status_stats": self.get_status_statistics(),
        }
