"""
Custom Exception Hierarchy

Specific exception types for the failure categories of the decision-support
core, each carrying a machine-readable code and structured details.
"""
from typing import Optional, Dict, Any


class TriageCoreError(Exception):
    """Base exception for all decision-support core errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for host responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class AssessmentError(TriageCoreError):
    """The department pipeline was called without a usable assessment or patient."""

    def __init__(
        self,
        message: str,
        missing: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="ASSESSMENT_ERROR",
            details={"missing": missing, **(details or {})}
        )
        self.missing = missing


class DatasetParseError(TriageCoreError):
    """The training dataset could not be read at all (e.g. no header line)."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="DATASET_PARSE_ERROR",
            details=details
        )


class StorageError(TriageCoreError):
    """Errors raised by a prediction store implementation."""

    def __init__(
        self,
        message: str,
        operation: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="STORAGE_ERROR",
            details={"operation": operation, **(details or {})}
        )
        self.operation = operation


class ClassifierError(TriageCoreError):
    """Errors raised when adapting an external risk classifier's output."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="CLASSIFIER_ERROR",
            details=details
        )
