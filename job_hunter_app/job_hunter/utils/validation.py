"""
Field validation for job applications, run before a record reaches the
service layer.
"""
from datetime import date
from typing import Any, List, NamedTuple, Optional

from ..models.db.application import NOTES_MAX_LENGTH

TITLE_REQUIRED = "Titlul jobului este obligatoriu"
COMPANY_REQUIRED = "Numele companiei este obligatoriu"
DATE_REQUIRED = "Data aplicarii este obligatorie"
DATE_IN_FUTURE = "Data nu poate fi in viitor"
STATUS_REQUIRED = "Trebuie sa selectezi un status"
SALARY_NEGATIVE = "Salariul nu poate fi negativ"
NOTES_TOO_LONG = "Descrierea este prea lunga"


class FieldError(NamedTuple):
    field: str
    message: str


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_job_application(data: Any, today: Optional[date] = None) -> List[FieldError]:
    """
    Check a job application payload and collect every field error.

    Args:
        data: Any object exposing the job application attributes
              (a request schema or an ORM instance)
        today: Reference date for the "not in the future" rule

    Returns:
        List of field errors, empty when the payload is valid
    """
    today = today or date.today()
    errors: List[FieldError] = []

    if _is_blank(getattr(data, "job_title", None)):
        errors.append(FieldError("job_title", TITLE_REQUIRED))

    if _is_blank(getattr(data, "company_name", None)):
        errors.append(FieldError("company_name", COMPANY_REQUIRED))

    application_date = getattr(data, "application_date", None)
    if application_date is None:
        errors.append(FieldError("application_date", DATE_REQUIRED))
    elif application_date > today:
        errors.append(FieldError("application_date", DATE_IN_FUTURE))

    if getattr(data, "status", None) is None:
        errors.append(FieldError("status", STATUS_REQUIRED))

    salary_offer = getattr(data, "salary_offer", None)
    if salary_offer is not None and salary_offer < 0:
        errors.append(FieldError("salary_offer", SALARY_NEGATIVE))

    notes = getattr(data, "notes", None)
    if notes is not None and len(notes) > NOTES_MAX_LENGTH:
        errors.append(FieldError("notes", NOTES_TOO_LONG))

    return errors
