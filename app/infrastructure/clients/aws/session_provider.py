"""Session provider for AWS client operations.

Centralizes region, endpoint and credential handling so per-service clients
don't need to duplicate it.
"""

from typing import Any, Dict, Optional

import structlog

logger = structlog.get_logger()


class SessionProvider:
    """Builds the session and client kwargs passed to `execute_aws_api_call`.

    Args:
        region: AWS region for all clients (e.g., 'ca-central-1')
        endpoint_url: Custom endpoint URL (for testing/LocalStack)
        aws_access_key_id: Optional static access key. When both keys are
            empty the default boto3 credential chain applies.
        aws_secret_access_key: Optional static secret key
    """

    def __init__(
        self,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        aws_access_key_id: Optional[str] = None,
        aws_secret_access_key: Optional[str] = None,
    ) -> None:
        self.region = region
        self.endpoint_url = endpoint_url
        self._aws_access_key_id = aws_access_key_id
        self._aws_secret_access_key = aws_secret_access_key

    @property
    def has_static_credentials(self) -> bool:
        return bool(self._aws_access_key_id and self._aws_secret_access_key)

    def build_client_kwargs(self) -> Dict[str, Any]:
        """Build session and client configuration kwargs for boto3.

        Returns:
            Dict with session_config and client_config for passing to
            execute_aws_api_call
        """
        session_config: Dict[str, Any] = {}
        client_config: Dict[str, Any] = {}

        if self.region:
            session_config["region_name"] = self.region

        if self.has_static_credentials:
            session_config["aws_access_key_id"] = self._aws_access_key_id
            session_config["aws_secret_access_key"] = self._aws_secret_access_key

        if self.endpoint_url:
            client_config["endpoint_url"] = self.endpoint_url

        logger.debug(
            "built_client_kwargs",
            region=self.region,
            endpoint_url=self.endpoint_url,
            static_credentials=self.has_static_credentials,
        )
        return {
            "session_config": session_config or None,
            "client_config": client_config or None,
        }
