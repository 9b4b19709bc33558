from __future__ import annotations

import json
import pathlib
import sys
from collections.abc import Callable
from typing import Any

import pytest
import requests

ROOT = pathlib.Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _load_dependencies():
    from flowhook import Config, create_app

    return Config, create_app


ConfigBase, create_app = _load_dependencies()

ORIGIN = "https://github.com/org/repo"

SAMPLE_FLOWS: list[dict[str, Any]] = [
    {
        "origin": ORIGIN,
        "branch": "main",
        "host": ["github.com"],
        "webhook": "https://ci.example/hook",
        "notify": "team-a",
    },
    {
        "origin": ORIGIN,
        "branch": "main",
        "host": [],
        "webhook": "https://ci.example/shadowed",
        "notify": "team-b",
    },
    {
        "origin": "https://github.com/org/other",
        "branch": "release",
        "host": [],
        "webhook": "https://ci.example/other",
        "notify": "team-c",
    },
]


class TestConfig(ConfigBase):
    TESTING = True
    FLOWS_URL = None
    RATELIMIT_ENABLED = False
    PROXY_UPSTREAM_URL = None
    CORS_ALLOWED_ORIGINS = "http://localhost"


class FakeResponse:
    """Stand-in for ``requests.Response`` returned by patched calls."""

    def __init__(
        self,
        body: Any = None,
        status_code: int = 200,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._body = body
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(body)
        self.content = self.text.encode("utf-8")
        self.headers = headers or {"Content-Type": "application/json"}

    def json(self) -> Any:
        return json.loads(self.text)

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


@pytest.fixture(scope="module")
def flows_file(tmp_path_factory: pytest.TempPathFactory) -> pathlib.Path:
    path = tmp_path_factory.mktemp("flows") / "flows.json"
    path.write_text(json.dumps(SAMPLE_FLOWS), encoding="utf-8")
    return path


@pytest.fixture(scope="module")
def app(flows_file: pathlib.Path):
    class FileConfig(TestConfig):
        FLOWS_FILE = str(flows_file)

    app = create_app(FileConfig)
    ctx = app.app_context()
    ctx.push()
    yield app
    ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def downstream(monkeypatch: pytest.MonkeyPatch) -> Callable[..., list[dict[str, Any]]]:
    """Patch the outbound webhook call and record every request it receives."""

    from backend.flowhook.flows import dispatcher

    def install(body: Any = None, *, error: Exception | None = None, text: str | None = None):
        calls: list[dict[str, Any]] = []

        def _fake_post(url: str, **kwargs: Any) -> FakeResponse:
            calls.append({"url": url, **kwargs})
            if error is not None:
                raise error
            return FakeResponse(body, text=text)

        monkeypatch.setattr(dispatcher.requests, "post", _fake_post)
        return calls

    return install
