"""
Domain exceptions raised by the services.

The HTTP layer maps them to responses in main.py; services never build
responses themselves.
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when a request body breaks a field or business rule (-> 400)"""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, details)
