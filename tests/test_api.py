"""HTTP surface tests using FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

import config
import main
from generator import UpstreamResponseError, UpstreamStatusError


class FakeCompleter:
    def __init__(self, reply: str = "void main(){ gl_FragColor = vec4(1.0); }", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake():
    return FakeCompleter()


@pytest.fixture
def client(fake):
    main.app.dependency_overrides[main.get_completer] = lambda: fake
    yield TestClient(main.app)
    main.app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.parametrize("payload", [{}, {"description": ""}, {"description": "   "}, {"description": 42}, ["x"]])
def test_description_required(client, fake, payload):
    resp = client.post("/api/generate_shader", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Description parameter is required"}
    assert fake.prompts == []


def test_non_json_body(client, fake):
    resp = client.post(
        "/api/generate_shader", content=b"not json", headers={"content-type": "application/json"}
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "Description parameter is required"}
    assert fake.prompts == []


def test_generate_returns_repaired_shader(client, fake):
    resp = client.post("/api/generate_shader", json={"description": "a glowing orb"})
    assert resp.status_code == 200
    code = resp.json()["shader_code"]
    assert code.startswith("precision mediump float;")
    assert "varying vec2 fragCoord;" in code
    assert fake.prompts and '"a glowing orb"' in fake.prompts[0]


def test_upstream_status_error(client, fake):
    fake.error = UpstreamStatusError(503)
    resp = client.post("/api/generate_shader", json={"description": "rain"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "HTTP 503"}


def test_upstream_malformed_response(client, fake):
    fake.error = UpstreamResponseError("no text")
    resp = client.post("/api/generate_shader", json={"description": "rain"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "API failure"}


def test_cors_headers(client):
    resp = client.get("/health", headers={"Origin": "http://localhost:5173"})
    assert resp.headers["access-control-allow-origin"] == "*"


def test_missing_api_key_is_server_error(monkeypatch, tmp_path):
    monkeypatch.delenv(config.API_KEY_VAR, raising=False)
    monkeypatch.setattr(config, "ENV_EXAMPLE_PATH", tmp_path / "env.example")
    monkeypatch.setattr(main, "_completer", None)

    resp = TestClient(main.app).post("/api/generate_shader", json={"description": "stars"})
    assert resp.status_code == 500
    assert config.API_KEY_VAR in resp.json()["error"]
