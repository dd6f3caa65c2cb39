"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    TriageCoreError,
    AssessmentError,
    DatasetParseError,
    StorageError,
    ClassifierError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "TriageCoreError",
    "AssessmentError",
    "DatasetParseError",
    "StorageError",
    "ClassifierError",
]
