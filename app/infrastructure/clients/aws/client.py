"""Base AWS client utilities for infrastructure clients.

Provides `get_boto3_client` and `execute_aws_api_call` with the
OperationResult pattern. This module avoids reading settings at import
time and accepts configuration via parameters.

Each call is attempted exactly once: botocore retries are disabled and
no retry loop is layered on top.
"""

from typing import Any, Callable, Dict, Optional

import boto3  # type: ignore
from botocore.client import BaseClient  # type: ignore
from botocore.config import Config  # type: ignore
from botocore.credentials import RefreshableCredentials  # type: ignore
from botocore.session import get_session  # type: ignore
import structlog

from infrastructure.operations.classifiers import classify_cognito_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

logger = structlog.get_logger()


def _assume_role_credentials(
    sts: BaseClient, role_arn: str, session_name: str
) -> RefreshableCredentials:
    def refresh() -> Dict[str, str]:
        creds = sts.assume_role(RoleArn=role_arn, RoleSessionName=session_name)[
            "Credentials"
        ]
        return {
            "access_key": creds["AccessKeyId"],
            "secret_key": creds["SecretAccessKey"],
            "token": creds["SessionToken"],
            "expiry_time": creds["Expiration"].isoformat(),
        }

    return RefreshableCredentials.create_from_metadata(
        metadata=refresh(),
        refresh_using=refresh,
        method="sts-assume-role",
    )


def get_boto3_client(
    service_name: str,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
    role_arn: Optional[str] = None,
    session_name: str = "UserMigrationSession",
    connect_timeout: Optional[int] = None,
    read_timeout: Optional[int] = None,
) -> BaseClient:
    """Create a boto3 client for the given service.

    Args:
        service_name: AWS service name (e.g., 'cognito-idp')
        session_config: Optional boto3 session kwargs (e.g., region_name)
        client_config: Optional client kwargs (e.g., endpoint_url)
        role_arn: Optional role to assume for cross-account access
        session_name: Name for assumed role session
        connect_timeout: Optional connect timeout in seconds
        read_timeout: Optional read timeout in seconds

    Returns:
        botocore client instance
    """
    session_config = session_config or {}
    client_config = dict(client_config or {})

    if role_arn:
        botocore_session = get_session()
        # Assumed-role credentials renew themselves before expiry
        botocore_session._credentials = _assume_role_credentials(  # pylint: disable=protected-access
            boto3.client("sts", **session_config), role_arn, session_name
        )
        session = boto3.Session(botocore_session=botocore_session, **session_config)
    else:
        session = boto3.Session(**session_config)

    config_kwargs: Dict[str, Any] = {"retries": {"total_max_attempts": 1}}
    if connect_timeout is not None:
        config_kwargs["connect_timeout"] = connect_timeout
    if read_timeout is not None:
        config_kwargs["read_timeout"] = read_timeout
    client_config["config"] = Config(**config_kwargs)

    return session.client(service_name, **client_config)


def execute_aws_api_call(
    client: Any,
    method: str,
    classifier: Callable[[Exception], OperationResult] = classify_cognito_error,
    **kwargs,
) -> OperationResult:
    """Execute a single AWS API call and return a classified result.

    Args:
        client: boto3 low-level client
        method: Client method name (e.g., 'admin_get_user')
        classifier: Maps raised exceptions to an OperationResult
        **kwargs: Parameters forwarded to the API method

    Returns:
        OperationResult whose `data` is the raw API response on success
    """
    service_name = getattr(getattr(client, "meta", None), "service_model", None)
    service_name = getattr(service_name, "service_name", "unknown")

    try:
        response = getattr(client, method)(**kwargs)
    except Exception as e:  # pylint: disable=broad-except
        result = classifier(e)
        log = logger.warning
        if result.status == OperationStatus.TRANSIENT_ERROR:
            log = logger.error
        log(
            "aws_api_error",
            service=service_name,
            method=method,
            status=result.status.value,
            code=result.error_code,
            error=result.message,
        )
        return result

    return OperationResult.success(
        data=response, message=f"{service_name}.{method} succeeded"
    )
