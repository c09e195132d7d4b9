"""
Failure report model for diagnostics
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel


class FailureKind(str, Enum):
    """Kinds of failed remote calls"""
    TRANSPORT = "transport"  # no response received
    SERVER = "server"  # non-2xx status
    INVALID_RESPONSE = "invalid_response"  # body could not be decoded into a Task


class FailureReport(BaseModel):
    """Diagnostic record of a failed controller operation"""
    operation: str
    kind: FailureKind
    message: str
    status_code: Optional[int] = None
    response_body: Optional[str] = None
