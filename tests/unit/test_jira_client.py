"""Unit tests for the Jira REST client."""

import base64
import json
from typing import Any, Callable

import httpx
import pytest

from release_ops_manager.exceptions import MalformedResponseError, NetworkError
from release_ops_manager.jira.client import JiraClient, JiraCredentials

TRACKER_URL = "https://example.atlassian.net"
CREDENTIALS = JiraCredentials(user="release-bot@example.com", api_key="secret-key")


def make_client(handler: Callable[[httpx.Request], httpx.Response]) -> JiraClient:
    """Create a Jira client backed by a fake tracker."""
    return JiraClient.create(TRACKER_URL, CREDENTIALS, transport=httpx.MockTransport(handler))


def test_authorization_header() -> None:
    """Test that the basic authorization header encodes user and API key."""
    expected = base64.b64encode(b"release-bot@example.com:secret-key").decode("ascii")
    assert CREDENTIALS.authorization_header() == f"Basic {expected}"


def test_credentials_repr_hides_api_key() -> None:
    """Test that the API key never appears in the credentials repr."""
    assert "secret-key" not in repr(CREDENTIALS)


@pytest.mark.asyncio
async def test_list_versions_request_shape() -> None:
    """Test that versions are requested from the project endpoint with auth headers."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=[{"id": "10000", "name": "1.0.0"}, {"id": "10001", "name": "1.1.0"}])

    async with make_client(handler) as client:
        versions = await client.list_versions("PROJ")

    assert [version.id for version in versions] == [10000, 10001]
    assert len(requests) == 1
    request = requests[0]
    assert request.method == "GET"
    assert request.url.path == "/rest/api/3/project/PROJ/version"
    assert request.headers["Authorization"] == CREDENTIALS.authorization_header()
    assert request.headers["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_search_issues_request_shape() -> None:
    """Test that issues are searched by project and fix version."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200,
            json={
                "issues": [
                    {
                        "key": "PROJ-1",
                        "fields": {"summary": "Fix login", "issuetype": {"name": "Bug"}, "customfield_10000": None},
                    }
                ]
            },
        )

    async with make_client(handler) as client:
        search_response = await client.search_issues("PROJ", 10001)

    assert requests[0].url.path == "/rest/api/3/search"
    assert requests[0].url.params["jql"] == "project=PROJ and fixVersion = 10001"
    assert search_response.issues[0].key == "PROJ-1"
    assert search_response.issues[0].fields.issue_type.name == "Bug"


@pytest.mark.asyncio
async def test_issue_type_alias_is_accepted() -> None:
    """Test that the camel-case issueType spelling is accepted."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"issues": [{"key": "PROJ-2", "fields": {"summary": "Add export", "issueType": {"name": "Story"}}}]})

    async with make_client(handler) as client:
        search_response = await client.search_issues("PROJ", 1)

    assert search_response.issues[0].fields.issue_type.name == "Story"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [401, 404, 500])
async def test_error_status_raises_network_error(status_code: int) -> None:
    """Test that non-success statuses raise NetworkError carrying the status code."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"errorMessages": ["nope"]})

    async with make_client(handler) as client:
        with pytest.raises(NetworkError) as exc_info:
            await client.list_versions("PROJ")

    assert exc_info.value.status_code == status_code


@pytest.mark.asyncio
async def test_transport_error_raises_network_error() -> None:
    """Test that an unreachable tracker raises NetworkError."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with make_client(handler) as client:
        with pytest.raises(NetworkError) as exc_info:
            await client.list_versions("PROJ")

    assert exc_info.value.status_code is None


def test_create_rejects_invalid_url() -> None:
    """Test that an unparseable tracker URL raises NetworkError."""
    with pytest.raises(NetworkError, match="Invalid Jira URL") as exc_info:
        JiraClient.create("https://example.com:abc", CREDENTIALS)

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "content",
    [
        pytest.param(b"<html>not json</html>", id="not json"),
        pytest.param(json.dumps({"values": []}).encode(), id="object instead of list"),
        pytest.param(json.dumps([{"name": "1.0.0"}]).encode(), id="missing id"),
    ],
)
async def test_malformed_versions_response(content: bytes) -> None:
    """Test that unexpected version payloads raise MalformedResponseError."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=content)

    async with make_client(handler) as client:
        with pytest.raises(MalformedResponseError):
            await client.list_versions("PROJ")


@pytest.mark.asyncio
async def test_malformed_search_response() -> None:
    """Test that a search response without issues raises MalformedResponseError."""
    payload: dict[str, Any] = {"total": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    async with make_client(handler) as client:
        with pytest.raises(MalformedResponseError):
            await client.search_issues("PROJ", 1)
