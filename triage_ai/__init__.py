"""
Clinical Decision-Support Core

Two independent pipelines:
- Department recommendation (triage_ai.core.department)
- Fairness audit of risk-classifier training data (triage_ai.core.audit)

Logging is silent until the host calls ``triage_ai.utils.setup_logging()``.
"""
import logging

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
