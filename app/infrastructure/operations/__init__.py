"""Operation result types and status enums.

Client layers (AWS, Slack, DynamoDB, HTTP) return ``OperationResult`` instead
of raising; callers decide how a failed result maps to their own errors.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
