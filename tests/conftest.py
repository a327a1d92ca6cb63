"""Pytest configuration - loads .env and provides offline HTTP and SDK fakes."""

import email.message
import io
import json
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
from dotenv import load_dotenv

from resend_cli.sdk import ResendClient

# Load .env from project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

TEST_API_KEY = "re_test"
TEST_BASE_URL = "https://api.resend.test"


# =============================================================================
# HTTP transport fake
# =============================================================================


class FakeResponse:
    """Minimal stand-in for the object urlopen returns on 2xx."""

    def __init__(self, status: int, body: bytes):
        self.status = status
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc: Any) -> None:
        return None


@dataclass
class FakeTransport:
    """Queue of canned (status, body) replies; records every request sent."""

    replies: list[tuple[int, bytes] | Exception] = field(default_factory=list)
    requests: list[urllib.request.Request] = field(default_factory=list)
    timeouts: list[float | None] = field(default_factory=list)

    def reply(self, status: int = 200, body: Any = "") -> None:
        if isinstance(body, str):
            body = body.encode("utf-8")
        elif not isinstance(body, bytes):
            body = json.dumps(body).encode("utf-8")
        self.replies.append((status, body))

    def fail(self, error: Exception) -> None:
        self.replies.append(error)

    @property
    def last(self) -> urllib.request.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.data.decode("utf-8"))

    def urlopen(self, req: urllib.request.Request, timeout: float | None = None) -> FakeResponse:
        self.requests.append(req)
        self.timeouts.append(timeout)
        reply = self.replies.pop(0) if self.replies else (200, b"")
        if isinstance(reply, Exception):
            raise reply
        status, body = reply
        if not 200 <= status < 300:
            raise urllib.error.HTTPError(
                req.full_url, status, "error", email.message.Message(), io.BytesIO(body)
            )
        return FakeResponse(status, body)


@pytest.fixture
def transport(monkeypatch: pytest.MonkeyPatch) -> FakeTransport:
    """Replace urllib's urlopen so no request leaves the process."""
    fake = FakeTransport()
    monkeypatch.setattr(urllib.request, "urlopen", fake.urlopen)
    return fake


@pytest.fixture
def api(transport: FakeTransport) -> ResendClient:
    """SDK client wired to the fake transport."""
    return ResendClient(TEST_API_KEY, base_url=TEST_BASE_URL)


# =============================================================================
# SDK fake
# =============================================================================


class FakeResendApi:
    """
    Stand-in for ``ResendApi`` used by command handler tests.

    Every attribute access returns a recorder for that operation name; the
    recorder returns the canned response set with ``respond`` (None when unset)
    or raises it when it is an exception.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.responses: dict[str, Any] = {}

    def respond(self, operation: str, value: Any) -> None:
        self.responses[operation] = value

    def __getattr__(self, operation: str) -> Any:
        if operation.startswith("_"):
            raise AttributeError(operation)

        def call(*args: Any) -> Any:
            self.calls.append((operation, args))
            value = self.responses.get(operation)
            if isinstance(value, Exception):
                raise value
            return value

        return call


@pytest.fixture
def fake_api() -> FakeResendApi:
    return FakeResendApi()


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and the working directory at a temp dir with no key set."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.delenv("RESEND_API_KEY", raising=False)
    monkeypatch.chdir(work)
    return home
