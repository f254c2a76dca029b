"""forkspan error hierarchy and exceptions."""

from __future__ import annotations


class ForkspanError(Exception):
    """Base exception for all forkspan errors."""
    
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
    
    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ValidationError(ForkspanError):
    """Raised when a required argument is missing or invalid."""
    pass
