"""Centralized error handling and responses - DRY principle"""
import logging
from typing import Tuple
from students_service.exceptions.exceptions import StudentsServiceError, StoreUnavailableError

logger = logging.getLogger(__name__)


# ============= ERROR HANDLERS =============

def handle_service_error(e: Exception) -> Tuple[dict, int]:
    """Centralized error handling for services"""

    if isinstance(e, StoreUnavailableError):
        logger.warning(f"Store unavailable: {e.message}")
        return {"success": False, "message": e.message}, e.code

    elif isinstance(e, StudentsServiceError):
        return {"success": False, "message": e.message}, e.code

    elif isinstance(e, ValueError):
        return {"success": False, "message": str(e)}, 400

    else:
        sanitized_error = str(e).replace('\n', ' ').replace('\r', ' ')[:500]
        logger.error(f"Unexpected error: {sanitized_error}")
        return {"success": False, "message": "Server error"}, 500

def create_success_response(data, status: int = 200) -> Tuple[dict, int]:
    """Create standardized success response"""
    return {"success": True, "data": data}, status
