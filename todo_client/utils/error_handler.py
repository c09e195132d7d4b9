"""
Error handling utilities
"""

import httpx
from todo_client.config.constants import LOG_BODY_PREVIEW_CHARS
from todo_client.models.response import FailureKind, FailureReport
from todo_client.utils.logger import logger


# Errors a controller operation absorbs; pydantic's ValidationError is a ValueError
HANDLED_ERRORS = (httpx.HTTPError, ValueError)


def classify_error(error: Exception) -> FailureKind:
    """
    Classify a failed remote call
    
    Args:
        error: Exception raised by the API client
        
    Returns:
        FailureKind of the error
    """
    if isinstance(error, httpx.HTTPStatusError):
        return FailureKind.SERVER
    if isinstance(error, httpx.HTTPError):
        return FailureKind.TRANSPORT
    return FailureKind.INVALID_RESPONSE


def handle_error(operation: str, error: Exception) -> FailureReport:
    """
    Log a failed operation and build its diagnostic report.
    
    Nothing is re-raised and nothing is retried: the caller keeps its local
    state as it was before the operation.
    
    Args:
        operation: Human readable name of the failed operation
        error: Exception to handle
        
    Returns:
        FailureReport describing the failure
    """
    kind = classify_error(error)
    report = FailureReport(operation=operation, kind=kind, message=str(error))
    
    logger.error(f"Error {operation}: {error}")
    
    if kind is FailureKind.SERVER:
        response = error.response
        report.status_code = response.status_code
        try:
            report.response_body = response.text[:LOG_BODY_PREVIEW_CHARS]
        except httpx.ResponseNotRead:
            report.response_body = None
        logger.error(f"Response data: {report.response_body}")
        logger.error(f"Status: {report.status_code}")
    elif kind is FailureKind.TRANSPORT:
        try:
            request = error.request
        except RuntimeError:
            request = None
        if request is not None:
            logger.error(f"No response received: {request.method} {request.url}")
        else:
            logger.error("No response received")
    else:
        logger.error("Response could not be decoded", exc_info=error)
    
    return report
