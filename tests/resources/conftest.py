from typing import Any, Callable
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
def sent_request(mock_transport: AsyncMock) -> Callable[[], dict[str, Any]]:
    """Returns what the last resource call handed to the transport"""

    def _sent() -> dict[str, Any]:
        call = mock_transport.request.call_args
        return {"path": call.args[0], **call.kwargs}

    return _sent
