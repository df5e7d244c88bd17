"""
CSV export of job applications.

Quoting is triggered by commas, double quotes and also single quotes, so
the output is not plain RFC 4180 and is built by hand rather than with
the ``csv`` module.
"""
import re
from typing import Iterable, Optional

from ..models.db.application import ApplicationStatus, JobApplication

CSV_MEDIA_TYPE = "text/csv"
CSV_HEADER = "ID,Titlu Job,Companie,Data Aplicarii,Status,Salariu,Link"

LINE_BREAK_PATTERN = re.compile(r"\r\n|[\n\x0b\x0c\r\x85\u2028\u2029]")
QUOTE_TRIGGERS = (",", '"', "'")


def escape_special_characters(value: Optional[str]) -> str:
    if value is None:
        return ""
    escaped = LINE_BREAK_PATTERN.sub(" ", value)
    if any(char in escaped for char in QUOTE_TRIGGERS):
        escaped = '"' + escaped.replace('"', '""') + '"'
    return escaped


def render_csv_row(job: JobApplication) -> str:
    status = ApplicationStatus(job.status).name if job.status is not None else ""
    fields = [
        str(job.id),
        escape_special_characters(job.job_title),
        escape_special_characters(job.company_name),
        job.application_date.isoformat() if job.application_date else "",
        status,
        str(job.salary_offer) if job.salary_offer is not None else "0",
        job.job_link if job.job_link is not None else "",
    ]
    return ",".join(fields)


def render_csv(jobs: Iterable[JobApplication]) -> str:
    lines = [CSV_HEADER]
    lines.extend(render_csv_row(job) for job in jobs)
    return "\n".join(lines) + "\n"


def content_disposition(filename: str) -> str:
    return f"attachment; filename={filename}"
