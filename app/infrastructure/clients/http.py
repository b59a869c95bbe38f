"""JSON-over-HTTP client for external model endpoints.

Used by the LLM-backed translation providers (vLLM completions, LiteLLM chat
completions). Every call is a single POST with a JSON body; the outcome is
reported as an OperationResult so callers can map it to their own errors.

Error codes on failed results:
    TIMEOUT, CONNECTION_ERROR, REQUEST_ERROR: the endpoint was not reached
    HTTP_<status>: the endpoint answered with a non-2xx status
    INVALID_JSON: a 2xx answer whose body is not JSON

Usage:
    from infrastructure.clients.http import JsonHttpClient

    client = JsonHttpClient(timeout=30)
    result = client.post_json(
        "http://vllm:8000/v1/completions",
        {"model": "m", "prompt": "..."},
        bearer_token="sk-...",
    )
    if result.is_success:
        choices = result.data["choices"]
"""

from typing import Any, Dict, Optional

import requests
import structlog

from infrastructure.operations import OperationResult, OperationStatus

logger = structlog.get_logger(__name__)

ERROR_EXCERPT_LENGTH = 500


class JsonHttpClient:
    """HTTP client posting JSON to absolute URLs.

    Attributes:
        timeout: Default timeout in seconds
        session: Requests session with connection pooling
    """

    def __init__(self, timeout: int = 30) -> None:
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(
            {
                "User-Agent": "AutoTranslate-Bot/1.0",
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        )
        self._logger = logger.bind(component="json_http_client")

    def post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        bearer_token: Optional[str] = None,
        timeout: Optional[int] = None,
    ) -> OperationResult:
        """POST a JSON payload and decode the JSON answer.

        Args:
            url: Absolute endpoint URL
            payload: JSON request body
            bearer_token: Sent as ``Authorization: Bearer <token>`` when non-empty
            timeout: Request timeout (overrides default)

        Returns:
            OperationResult whose data is the decoded JSON body on success,
            or ``{"status_code": ..., "body": ...}`` on an HTTP error.
        """
        timeout = timeout or self.timeout
        headers = {}
        if bearer_token:
            headers["Authorization"] = f"Bearer {bearer_token}"

        log = self._logger.bind(url=url)
        log.debug("http_request")

        try:
            response = self._session.post(
                url, json=payload, headers=headers, timeout=timeout
            )
        except requests.Timeout:
            log.error("http_timeout", timeout=timeout)
            return OperationResult.transient_error(
                message=f"Request timeout after {timeout}s",
                error_code="TIMEOUT",
            )
        except requests.ConnectionError as e:
            log.error("http_connection_error", error=str(e))
            return OperationResult.transient_error(
                message=f"Connection error: {str(e)}",
                error_code="CONNECTION_ERROR",
            )
        except requests.RequestException as e:
            log.error("http_request_error", error=str(e))
            return OperationResult.permanent_error(
                message=f"Request error: {str(e)}",
                error_code="REQUEST_ERROR",
            )

        log = log.bind(status_code=response.status_code)

        if not 200 <= response.status_code < 300:
            body = response.text[:ERROR_EXCERPT_LENGTH]
            log.warning("http_error_status", body=body)
            if response.status_code in (401, 403):
                status = OperationStatus.UNAUTHORIZED
            elif response.status_code == 429 or response.status_code >= 500:
                status = OperationStatus.TRANSIENT_ERROR
            else:
                status = OperationStatus.PERMANENT_ERROR
            return OperationResult.error(
                status=status,
                message=f"HTTP {response.status_code}: {body}",
                error_code=f"HTTP_{response.status_code}",
                data={"status_code": response.status_code, "body": body},
            )

        try:
            data = response.json()
        except ValueError:
            log.warning("non_json_response", content=response.text[:200])
            return OperationResult.permanent_error(
                message="Response body is not valid JSON",
                error_code="INVALID_JSON",
            )

        log.debug("http_success")
        return OperationResult.success(data=data, message=f"POST {url} succeeded")
