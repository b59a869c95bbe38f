"""Base AWS client utilities for infrastructure clients.

Provides `get_boto3_client` and `execute_aws_api_call` with the
OperationResult pattern. This module never reads settings; configuration
arrives through parameters.
"""

import time
from typing import Any, Dict, Optional

import boto3  # type: ignore
from botocore.client import BaseClient  # type: ignore
from botocore.exceptions import (  # type: ignore
    BotoCoreError,
    ClientError,
    NoCredentialsError,
    PartialCredentialsError,
)
import structlog

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

logger = structlog.get_logger()

THROTTLING_ERROR_CODES = ("ThrottlingException", "RequestLimitExceeded", "Throttling")

UNAUTHORIZED_ERROR_CODES = (
    "AccessDeniedException",
    "UnauthorizedOperation",
    "UnrecognizedClientException",
    "InvalidSignatureException",
    "ExpiredTokenException",
)

NOT_FOUND_ERROR_CODES = ("ResourceNotFoundException", "NoSuchEntity")


def get_boto3_client(
    service_name: str,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
) -> BaseClient:
    """Create a boto3 client for the given service.

    A fresh session is built on every call, so credentials passed in
    ``session_config`` are scoped to the request that uses the client.

    Args:
        service_name: AWS service name (e.g., 'translate')
        session_config: Optional boto3 session kwargs (region_name,
            aws_access_key_id, aws_secret_access_key)
        client_config: Optional client kwargs (e.g., endpoint_url)

    Returns:
        botocore client instance
    """
    session = boto3.Session(**(session_config or {}))
    return session.client(service_name, **(client_config or {}))


def _calculate_retry_delay(attempt: int, backoff_factor: float = 0.5) -> float:
    return backoff_factor * (2**attempt)


def _map_client_error(e: ClientError, service_name: str, method: str) -> OperationResult:
    error_code = e.response.get("Error", {}).get("Code")
    error_message = e.response.get("Error", {}).get("Message", str(e))

    if error_code in THROTTLING_ERROR_CODES:
        return OperationResult.transient_error(
            message=error_message, error_code=error_code
        )

    if error_code in UNAUTHORIZED_ERROR_CODES:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED, message=error_message, error_code=error_code
        )

    if error_code in NOT_FOUND_ERROR_CODES:
        return OperationResult.error(
            OperationStatus.NOT_FOUND, message=error_message, error_code=error_code
        )

    logger.debug(
        "aws_client_error_unmapped",
        service=service_name,
        method=method,
        code=error_code,
    )
    return OperationResult.permanent_error(message=error_message, error_code=error_code)


def _map_botocore_error(e: BotoCoreError) -> OperationResult:
    if isinstance(e, (NoCredentialsError, PartialCredentialsError)):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            message=str(e),
            error_code="NO_CREDENTIALS",
        )
    return OperationResult.transient_error(
        message=f"AWS connection error: {type(e).__name__}: {str(e)}",
        error_code="CONNECTION_ERROR",
    )


def execute_aws_api_call(
    service_name: str,
    method: str,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
    max_retries: int = 3,
    backoff_factor: float = 0.5,
    **kwargs,
) -> OperationResult:
    """Execute an AWS API call and return a standardized result.

    Transient failures are retried up to ``max_retries`` times with
    exponential backoff. Pass ``max_retries=0`` for a single attempt.

    Args mirror `boto3` call parameters; the function returns an
    `OperationResult` object for consistent downstream handling.
    """
    for attempt in range(max_retries + 1):
        try:
            client = get_boto3_client(
                service_name,
                session_config=session_config,
                client_config=client_config,
            )
            result = getattr(client, method)(**kwargs)
            return OperationResult.success(
                data=result, message=f"{service_name}.{method} succeeded"
            )

        except ClientError as e:
            mapped = _map_client_error(e, service_name, method)
        except BotoCoreError as e:
            mapped = _map_botocore_error(e)

        if mapped.status == OperationStatus.TRANSIENT_ERROR and attempt < max_retries:
            delay = _calculate_retry_delay(attempt, backoff_factor)
            logger.warning(
                "aws_api_retry",
                service=service_name,
                method=method,
                attempt=attempt + 1,
                error=mapped.message,
                delay=delay,
            )
            time.sleep(delay)
            continue

        logger.error(
            "aws_api_error_final",
            service=service_name,
            method=method,
            error=mapped.message,
            error_code=mapped.error_code,
        )
        return mapped

    return OperationResult.permanent_error(message="unknown_error")
