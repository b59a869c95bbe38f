"""Operation result dataclass.

What the client layers (AWS, DynamoDB, Slack, JSON HTTP) return instead of
raising. The translation providers and the Slack adapters turn failed
results into their own errors at the boundary.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Outcome of one client call.

    Attributes:
        status: high-level outcome
        message: human-readable summary for logs
        data: response payload; on HTTP errors, ``{"status_code", "body"}``
        error_code: machine code of the failure (``TIMEOUT``, ``HTTP_503``,
            ``AccessDeniedException``, ``SLACK_NOT_IN_CHANNEL``, ...)
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Failed result with an explicit status."""
        return cls(status=status, message=message, error_code=error_code, data=data)

    @classmethod
    def transient_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Network failure, timeout or throttling.

        Only the AWS helper retries these; everything else just logs them.
        """
        return cls.error(OperationStatus.TRANSIENT_ERROR, message, error_code)

    @classmethod
    def permanent_error(
        cls, message: str, error_code: Optional[str] = None
    ) -> "OperationResult":
        """Rejected request or any failure that will not go away on retry."""
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code)
