from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import parse_qsl, urlsplit

import pytest
import requests

from opay_sdk import ConnectionClient, OPaySettings
from opay_sdk.client import connection


@dataclass
class FakeResponse:
    status_code: int = 200
    text: str = ""

    def json(self) -> Any:
        return json.loads(self.text)


@dataclass
class RecordedCall:
    method: str
    url: str
    headers: Dict[str, str]
    params: Any
    data: Optional[bytes]
    timeout: Any

    @property
    def body(self) -> str:
        return self.data.decode("utf-8") if self.data is not None else ""

    def wire_url(self) -> str:
        """URL as requests would put it on the wire, query string included."""
        return requests.Request(self.method, self.url, params=self.params).prepare().url

    def wire_query(self) -> Dict[str, str]:
        return dict(parse_qsl(urlsplit(self.wire_url()).query, keep_blank_values=True))


@dataclass
class FakeTransport:
    """Stands in for ``requests.request`` and records every call."""

    responses: List[Any] = field(default_factory=list)
    calls: List[RecordedCall] = field(default_factory=list)

    def reply(self, payload: Any = None, *, status_code: int = 200, text: Optional[str] = None) -> None:
        body = text if text is not None else json.dumps(payload if payload is not None else {"code": "00000"})
        self.responses.append(FakeResponse(status_code=status_code, text=body))

    def fail(self, exc: Exception) -> None:
        self.responses.append(exc)

    def __call__(self, method, url, headers=None, params=None, data=None, timeout=None, **kwargs):
        self.calls.append(RecordedCall(method, url, dict(headers or {}), params, data, timeout))
        nxt = self.responses.pop(0) if self.responses else FakeResponse(text='{"code": "00000"}')
        if isinstance(nxt, Exception):
            raise nxt
        return nxt


@pytest.fixture
def settings() -> OPaySettings:
    return OPaySettings(
        merchant_id="256612345678901",
        public_key="OPAYPUB16000000000000000000000",
        secret_key="OPAYPRV16000000000000000000000",
        base_url="https://sandbox.example.test/api/v3/",
        timeout_sec=5,
    )


@pytest.fixture
def transport(monkeypatch) -> FakeTransport:
    fake = FakeTransport()
    monkeypatch.setattr(connection.requests, "request", fake)
    return fake


@pytest.fixture
def client(settings, transport) -> ConnectionClient:
    return ConnectionClient(settings)


@pytest.fixture
def network_down() -> Exception:
    return requests.ConnectionError("Name or service not known")
