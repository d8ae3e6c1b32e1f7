from typing import Any, Dict, Optional
from fastapi import status

class BaseAPIException(Exception):
    """
    Parent class for every custom error raised by the service.
    Keeps the error body returned to clients in one format.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class NotFoundException(BaseAPIException):
    """404: resource not found"""
    def __init__(self, message: str = "Resource not found", details: dict = None):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
            details=details
        )
