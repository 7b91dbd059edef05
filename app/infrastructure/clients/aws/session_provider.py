"""Session provider for AWS client operations.

Centralizes boto3 session creation, credential management, and client
configuration. Low-level clients are created once per service and reused
across invocations; boto3 clients are safe to share between threads.
"""

import threading
from typing import Any, Dict, Optional

import structlog

from infrastructure.clients.aws import client as aws_client

logger = structlog.get_logger()


class SessionProvider:
    """Provider of long-lived boto3 clients.

    Args:
        region: AWS region for all clients (e.g., 'eu-west-1')
        role_arn: Role to assume for all clients (admin credentials)
        endpoint_url: Custom endpoint URL (for testing/LocalStack)
        connect_timeout: Connect timeout in seconds
        read_timeout: Read timeout in seconds
    """

    def __init__(
        self,
        region: Optional[str] = None,
        role_arn: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        connect_timeout: Optional[int] = None,
        read_timeout: Optional[int] = None,
    ) -> None:
        self.region = region
        self.role_arn = role_arn
        self.endpoint_url = endpoint_url
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        self._clients: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def build_client_kwargs(self) -> Dict[str, Any]:
        """Build session and client configuration kwargs for boto3.

        Returns:
            Dict with session_config, client_config and role_arn for
            passing to get_boto3_client
        """
        session_config = {}
        client_config = {}

        if self.region:
            session_config["region_name"] = self.region
            client_config["region_name"] = self.region

        if self.endpoint_url:
            client_config["endpoint_url"] = self.endpoint_url

        return {
            "session_config": session_config or None,
            "client_config": client_config or None,
            "role_arn": self.role_arn,
        }

    def get_client(self, service_name: str) -> Any:
        """Get the shared boto3 client for the given service.

        The client is created on first use and cached for the lifetime of
        the provider.

        Args:
            service_name: AWS service name (e.g., 'cognito-idp')

        Returns:
            Configured boto3 client instance
        """
        with self._lock:
            client = self._clients.get(service_name)
            if client is None:
                kw = self.build_client_kwargs()
                logger.debug(
                    "creating_boto3_client",
                    service_name=service_name,
                    region=self.region,
                    role_arn=kw["role_arn"],
                )
                client = aws_client.get_boto3_client(
                    service_name,
                    session_config=kw["session_config"],
                    client_config=kw["client_config"],
                    role_arn=kw["role_arn"],
                    connect_timeout=self.connect_timeout,
                    read_timeout=self.read_timeout,
                )
                self._clients[service_name] = client
            return client
