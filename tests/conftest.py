import json
import os
import sys
from pathlib import Path

import httpx
import pytest

project_path = Path(__file__).parent.parent
sys.path.insert(0, str(project_path))

os.environ.setdefault("UNKEY_ROOT_KEY", "unkey_test_root_key")

TEST_URL = "http://127.0.0.1:3000"


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(body)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.text)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def recording_handler():
    def factory(status_code=200, body=None, text=None):
        return RecordingHandler(status_code=status_code, body=body, text=text)
    return factory


@pytest.fixture
def api_key_payload():
    return {
        "id": "key_123",
        "apiId": "api_123",
        "workspaceId": "ws_123",
        "start": "test_abc",
        "name": "primary",
        "ownerId": "user_1",
        "meta": {"plan": "pro"},
        "createdAt": 1700000000000,
        "expires": None,
        "remaining": 42,
        "ratelimit": {
            "type": "fast",
            "refillRate": 10,
            "refillInterval": 1000,
            "limit": 100,
        },
        "refill": {
            "amount": 100,
            "interval": "daily",
            "lastRefilledAt": 1700000000000,
        },
        "enabled": True,
    }


@pytest.fixture
def error_payload():
    return {"error": {"code": "NOT_FOUND", "message": "key not found"}}
