"""
Common API utilities shared by the routers.
"""
import logging
from typing import List, Optional
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from .. import schemas
from ..models.db.database import get_db
from ..models.db.repository import JobApplicationRepository
from ..services.application_tracker import JobApplicationService
from .validation import FieldError

logger = logging.getLogger(__name__)


def get_job_service(db: Session = Depends(get_db)) -> JobApplicationService:
    """
    Build the job application service for the current request.

    Args:
        db: Database session

    Returns:
        Service wired with a repository over the session
    """
    return JobApplicationService(JobApplicationRepository(db))


def raise_for_field_errors(errors: List[FieldError]) -> None:
    """
    Reject a payload that failed field validation.

    Raises:
        HTTPException: 422 with one {"field", "message"} entry per error
    """
    if errors:
        logger.warning("Rejected job application: %s", [error.field for error in errors])
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=[
                schemas.FieldErrorDetail(field=error.field, message=error.message).model_dump()
                for error in errors
            ]
        )


def handle_service_error(error: Exception, service_name: str) -> HTTPException:
    """
    Standardized error handling for service layer exceptions.

    Args:
        error: The exception that occurred
        service_name: Name of the service for logging/error messages

    Returns:
        HTTPException with appropriate status code and message
    """
    error_msg = str(error)
    logger.error("%s service error: %s", service_name, error_msg)

    if isinstance(error, ValueError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error_msg
        )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"An unexpected error occurred in {service_name}: {error_msg}"
    )


def check_resource_exists(resource: Optional[object], resource_type: str) -> None:
    """
    Generic function to check if a resource exists and raise appropriate error if not.

    Args:
        resource: The resource to check
        resource_type: Type of resource for error message

    Raises:
        HTTPException: If resource is None
    """
    if resource is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource_type} not found"
        )
