from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from pydantic import SecretStr

from harbor_api.client import HarborClient
from harbor_api.config import ClientConfig
from harbor_api.transport import HarborTransport

BASE_ADDRESS = "https://harbor.onmypc.com/api/v2.0"
USERNAME = "robot$sampleproject+test_robot"
PASSWORD = "securepassword"


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(
        base_address=BASE_ADDRESS,
        principal=USERNAME,
        credential=SecretStr(PASSWORD),
    )


@pytest_asyncio.fixture
async def transport(client_config: ClientConfig) -> AsyncGenerator[HarborTransport, None]:
    transport = HarborTransport(client_config)
    yield transport
    await transport.aclose()


@pytest_asyncio.fixture
async def harbor_client(client_config: ClientConfig) -> AsyncGenerator[HarborClient, None]:
    client = HarborClient(client_config)
    yield client
    await client.aclose()


@pytest.fixture
def mock_transport() -> AsyncMock:
    """Transport double for resource tests, records what each method sends"""
    transport = AsyncMock(spec=HarborTransport)
    transport.request.return_value = {}
    return transport


@pytest.fixture
def project_response() -> dict:
    return {
        "project_id": 1,
        "name": "library",
        "owner_id": 1,
        "owner_name": "admin",
        "repo_count": 0,
        "creation_time": "2025-10-08T08:20:09.566Z",
        "update_time": "2025-10-08T08:20:09.566Z",
        "deleted": False,
        "metadata": {"public": "true"},
    }


@pytest.fixture
def artifact_response() -> dict:
    return {
        "id": 1,
        "type": "IMAGE",
        "media_type": "application/vnd.docker.container.image.v1+json",
        "manifest_media_type": "application/vnd.docker.distribution.manifest.v2+json",
        "project_id": 2,
        "repository_id": 1,
        "digest": "sha256:4bcff63911fcb4448bd4fdacec207030997caf25e9bea4045fa6c8c44de311d1",
        "size": 3622172,
        "tags": [{"id": 1, "name": "latest", "immutable": False}],
    }
