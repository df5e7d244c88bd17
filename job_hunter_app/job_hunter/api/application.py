import logging
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.exc import SQLAlchemyError

from .. import schemas
from ..config.settings import get_settings
from ..models.db.application import ApplicationStatus, JobApplication
from ..services.application_tracker import JobApplicationService
from ..services.csv_export import CSV_MEDIA_TYPE, content_disposition, render_csv
from ..utils.api_helpers import (
    check_resource_exists,
    get_job_service,
    handle_service_error,
    raise_for_field_errors,
)
from ..utils.validation import validate_job_application

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_model=schemas.JobDashboard)
def list_jobs(
    status_filter: Optional[ApplicationStatus] = None,
    sort_by: Optional[str] = None,
    keyword: Optional[str] = None,
    job_service: JobApplicationService = Depends(get_job_service),
):
    """
    List job applications with the derived statistics.

    A keyword search wins over the status filter, which wins over sorting.
    """
    return job_service.build_dashboard(status_filter=status_filter, sort_by=sort_by, keyword=keyword)


@router.get("/export")
def export_jobs(job_service: JobApplicationService = Depends(get_job_service)):
    """
    Download every job application as CSV.
    """
    jobs = job_service.get_all_jobs()
    logger.info("Exporting %d job applications to CSV", len(jobs))
    return Response(
        content=render_csv(jobs),
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": content_disposition(get_settings().csv_export_filename)},
    )


@router.post("/reorder", status_code=status.HTTP_204_NO_CONTENT)
def reorder_jobs(
    sorted_ids: List[int] = Body(...),
    job_service: JobApplicationService = Depends(get_job_service),
):
    """
    Persist a drag-and-drop ordering given as a JSON array of ids.
    """
    job_service.update_job_positions(sorted_ids)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/save",
    response_model=schemas.JobApplication,
    responses={
        status.HTTP_201_CREATED: {"model": schemas.JobApplication, "description": "Job application created"},
        status.HTTP_422_UNPROCESSABLE_ENTITY: {"model": schemas.FieldErrorResponse, "description": "Field validation errors"},
    },
)
def save_job(
    job: schemas.JobApplicationSave,
    response: Response,
    job_service: JobApplicationService = Depends(get_job_service),
):
    """
    Create a job application, or update it when the payload carries an id.

    An id with no stored record creates the record under that id.
    """
    raise_for_field_errors(validate_job_application(job))

    if job.id is None or job_service.get_job_by_id(job.id) is None:
        response.status_code = status.HTTP_201_CREATED
    try:
        return job_service.save_job(JobApplication(**job.model_dump(exclude_unset=True)))
    except (ValueError, SQLAlchemyError) as error:
        raise handle_service_error(error, "Job application")


@router.get("/{job_id}", response_model=schemas.JobApplication)
def read_job(job_id: int, job_service: JobApplicationService = Depends(get_job_service)):
    """
    Retrieve a specific job application by its ID.
    """
    job = job_service.get_job_by_id(job_id)
    check_resource_exists(job, "Job application")
    return job


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(job_id: int, job_service: JobApplicationService = Depends(get_job_service)):
    """
    Delete a job application. Unknown ids are ignored.
    """
    job_service.delete_job(job_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


status_router = APIRouter()


@status_router.get("/statuses", response_model=List[schemas.StatusOption])
def list_statuses():
    """
    Application statuses with their display labels.
    """
    return [{"name": member.name, "label": member.label} for member in ApplicationStatus]
