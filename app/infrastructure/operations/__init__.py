"""Operation result types and status enums.

This module contains the result type returned by legacy user pool calls,
its status enum, and the classifier that maps Cognito/botocore exceptions
onto it.
"""

from infrastructure.operations.classifiers import classify_cognito_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_cognito_error",
]
