from datetime import date
from pydantic import BaseModel, Field
from typing import Optional, Dict, List

from .models.db.application import ApplicationStatus


# Job Application Schemas
class JobApplicationBase(BaseModel):
    job_title: Optional[str] = Field(None, example="Senior Python Developer")
    company_name: Optional[str] = Field(None, example="Acme")
    application_date: Optional[date] = Field(None, example="2025-12-10")
    status: Optional[ApplicationStatus] = Field(None, example="APLICAT")
    salary_offer: Optional[float] = Field(None, example=8000.0)
    notes: Optional[str] = None
    job_link: Optional[str] = None


class JobApplicationSave(JobApplicationBase):
    # Absent id inserts a new record, a present id updates it
    id: Optional[int] = None
    position: Optional[int] = None


class JobApplication(JobApplicationBase):
    id: int
    position: Optional[int] = None
    ghosted: bool = False

    class Config:
        from_attributes = True


class FieldErrorDetail(BaseModel):
    field: str
    message: str


class FieldErrorResponse(BaseModel):
    detail: List[FieldErrorDetail]


# Dashboard Schemas
class JobDashboard(BaseModel):
    jobs: List[JobApplication]
    keyword: Optional[str] = None
    selected_status: Optional[ApplicationStatus] = None
    total_jobs: int
    max_salary: float
    last_application: str
    status_stats: Dict[str, int]


class StatusOption(BaseModel):
    name: str
    label: str
