"""
Health check and system status API endpoints.
"""
import logging
from datetime import date
from typing import Dict, Any
from fastapi import APIRouter

from ..config.settings import get_settings

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health", summary="Health Check")
def health_check() -> Dict[str, Any]:
    """
    Basic health check endpoint.
    Returns system status and configuration info.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "message": f"Welcome to {settings.app_name} v{settings.app_version}",
        "environment": settings.environment,
        "date": date.today().isoformat()
    }


@router.get("/config/validate", summary="Validate Configuration")
def validate_configuration() -> Dict[str, Any]:
    """
    Validate the current configuration and return any issues.
    """
    settings = get_settings()
    config_issues = settings.validate_required_settings()

    validation_result = {
        "valid": len(config_issues) == 0,
        "environment": settings.environment,
        "issues_count": len(config_issues),
        "issues": config_issues
    }

    if not validation_result["valid"]:
        logger.error("Configuration validation failed: %s", config_issues)

    return validation_result
