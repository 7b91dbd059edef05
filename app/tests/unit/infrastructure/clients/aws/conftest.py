"""Fixtures for AWS client tests.

Provides factory-as-fixture pattern for creating configurable fake boto3
clients and botocore ClientErrors used across AWS client unit tests.
"""

from typing import Any, Dict, List, Optional

import pytest
from botocore.exceptions import ClientError

from infrastructure.clients.aws import client as aws_client
from infrastructure.clients.aws.session_provider import SessionProvider


class FakeClient:
    """Configurable fake boto3 client for unit tests.

    Supports:
    - API method responses via `__getattr__` lookup
    - Static responses, callables, and exceptions (raised on call)
    - Recording of every call as (method, kwargs)
    """

    def __init__(self, api_responses: Optional[Dict[str, Any]] = None):
        self._api_responses = api_responses or {}
        self.calls: List[tuple] = []

    def __getattr__(self, name: str):
        if name.startswith("_") or name not in self._api_responses:
            raise AttributeError(name)
        resp = self._api_responses[name]

        def _call(*_args, **kwargs):
            self.calls.append((name, kwargs))
            if isinstance(resp, Exception):
                raise resp
            if callable(resp):
                return resp(**kwargs)
            return resp

        return _call


@pytest.fixture
def make_fake_client():
    """Factory fixture for creating configurable fake boto3 clients.

    Usage:
        def test_something(make_fake_client):
            client = make_fake_client(api_responses={"admin_get_user": {...}})
    """

    def _factory(api_responses: Optional[Dict[str, Any]] = None) -> FakeClient:
        return FakeClient(api_responses=api_responses)

    return _factory


@pytest.fixture
def make_client_error():
    """Factory fixture for botocore ClientError instances."""

    def _factory(
        code: str, message: str = "error", operation: str = "AdminInitiateAuth"
    ) -> ClientError:
        return ClientError({"Error": {"Code": code, "Message": message}}, operation)

    return _factory


@pytest.fixture
def patch_boto3_client(monkeypatch):
    """Route `get_boto3_client` to a given fake client and record its arguments."""

    def _patch(fake_client: Any) -> List[Dict[str, Any]]:
        recorded: List[Dict[str, Any]] = []

        def _get_boto3_client(service_name, **kwargs):
            recorded.append({"service_name": service_name, **kwargs})
            return fake_client

        monkeypatch.setattr(aws_client, "get_boto3_client", _get_boto3_client)
        return recorded

    return _patch


@pytest.fixture
def session_provider():
    """SessionProvider configured for the legacy pool region."""
    return SessionProvider(region="eu-west-1", connect_timeout=3, read_timeout=4)
