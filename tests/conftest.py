# conftest.py
import json
from typing import Any, List, Optional

import pytest

from videoembed.utils import http_client


# ---- Fakes ------------------------------------------------------------------

class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self) -> Any:
        return json.loads(self.text)


class FakeHttp:
    """Stands in for http_client.get; records requested URLs."""

    def __init__(self) -> None:
        self.requested: List[str] = []
        self.response: Any = FakeResponse(404, {})

    def respond(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None) -> None:
        self.response = FakeResponse(status_code, payload, text)

    def fail_with(self, exc: Exception) -> None:
        self.response = exc

    def get(self, url: str) -> FakeResponse:
        self.requested.append(url)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


@pytest.fixture
def fake_http(monkeypatch) -> FakeHttp:
    fake = FakeHttp()
    monkeypatch.setattr(http_client, "get", fake.get)
    return fake
