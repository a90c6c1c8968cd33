# ===============================================
# tests/test_gateway.py
# HTTP gateway to /api/ai with a fake requests session
# ===============================================
from types import SimpleNamespace

import pytest
import requests

from src.generate.errors import GatewayError, GatewayErrorKind
from src.generate.gateway import GatewayConfig, ModelGateway, classify_status


class FakeResponse:
    def __init__(self, status_code=200, body=None, bad_json=False):
        self.status_code = status_code
        self._body = body
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("not json")
        return self._body


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def _gateway(session, token=None, base_url="http://relay.local/"):
    cfg = GatewayConfig(base_url=base_url, timeout=5, token_provider=lambda: token)
    return ModelGateway(cfg, session=session)


def test_success_posts_prompt_with_bearer_token():
    session = FakeSession(FakeResponse(200, {"text": "hello"}))
    out = _gateway(session, token="abc").send("my prompt")
    assert out.text == "hello"
    call = session.calls[0]
    assert call["url"] == "http://relay.local/api/ai"
    assert call["json"] == {"prompt": "my prompt"}
    assert call["headers"]["Authorization"] == "Bearer abc"
    assert call["timeout"] == 5


def test_no_token_means_no_authorization_header():
    session = FakeSession(FakeResponse(200, {"text": ""}))
    assert _gateway(session).send("p").text == ""
    assert "Authorization" not in session.calls[0]["headers"]


def test_token_is_read_fresh_on_every_call():
    tokens = iter(["t1", "t2"])
    session = FakeSession(FakeResponse(200, {"text": "ok"}))
    gw = ModelGateway(GatewayConfig(base_url="http://r", token_provider=lambda: next(tokens)), session=session)
    gw.send("a")
    gw.send("b")
    assert [c["headers"]["Authorization"] for c in session.calls] == ["Bearer t1", "Bearer t2"]


@pytest.mark.parametrize(
    "status, kind, retryable",
    [
        (401, GatewayErrorKind.UNAUTHORIZED, False),
        (403, GatewayErrorKind.UNAUTHORIZED, False),
        (500, GatewayErrorKind.SERVICE_UNAVAILABLE, True),
        (503, GatewayErrorKind.SERVICE_UNAVAILABLE, True),
        (404, GatewayErrorKind.UNKNOWN, True),
        (429, GatewayErrorKind.UNKNOWN, True),
    ],
)
def test_status_codes_map_to_error_kinds(status, kind, retryable):
    session = FakeSession(FakeResponse(status, {"error": "nope"}))
    with pytest.raises(GatewayError) as exc:
        _gateway(session).send("p")
    assert exc.value.kind is kind
    assert exc.value.status_code == status
    assert exc.value.retryable is retryable
    assert len(session.calls) == 1


def test_timeout_is_its_own_kind():
    with pytest.raises(GatewayError) as exc:
        _gateway(FakeSession(error=requests.Timeout("slow"))).send("p")
    assert exc.value.kind is GatewayErrorKind.TIMEOUT


def test_connection_failure_is_service_unavailable():
    with pytest.raises(GatewayError) as exc:
        _gateway(FakeSession(error=requests.ConnectionError("refused"))).send("p")
    assert exc.value.kind is GatewayErrorKind.SERVICE_UNAVAILABLE


@pytest.mark.parametrize("response", [FakeResponse(200, bad_json=True), FakeResponse(200, {"msg": "x"}), FakeResponse(200, ["x"])])
def test_malformed_success_body_is_unknown(response):
    with pytest.raises(GatewayError) as exc:
        _gateway(FakeSession(response)).send("p")
    assert exc.value.kind is GatewayErrorKind.UNKNOWN


def test_classify_status():
    assert classify_status(403) is GatewayErrorKind.UNAUTHORIZED
    assert classify_status(502) is GatewayErrorKind.SERVICE_UNAVAILABLE
    assert classify_status(418) is GatewayErrorKind.UNKNOWN


def test_config_from_settings_uses_static_token():
    cfg = GatewayConfig.from_settings(SimpleNamespace(AI_API_BASE_URL="http://x:3001", AI_API_TIMEOUT=9.0, AI_API_TOKEN="tok"))
    assert cfg.url == "http://x:3001/api/ai"
    assert cfg.timeout == 9.0
    assert cfg.token_provider() == "tok"


def test_config_from_settings_prefers_explicit_provider():
    cfg = GatewayConfig.from_settings(
        SimpleNamespace(AI_API_BASE_URL="http://x", AI_API_TIMEOUT=1.0, AI_API_TOKEN="static"),
        token_provider=lambda: "fresh",
    )
    assert cfg.token_provider() == "fresh"


def test_token_provider_failure_is_gateway_error():
    def broken():
        raise RuntimeError("token store locked")

    session = FakeSession(FakeResponse(200, {"text": "ok"}))
    gw = ModelGateway(GatewayConfig(base_url="http://r", token_provider=broken), session=session)
    with pytest.raises(GatewayError) as exc:
        gw.send("p")
    assert exc.value.kind is GatewayErrorKind.UNAUTHORIZED
    assert session.calls == []


def test_without_session_uses_requests_post(monkeypatch):
    fake = FakeSession(FakeResponse(200, {"text": "plain post"}))
    monkeypatch.setattr("src.generate.gateway.requests.post", fake.post)
    gw = ModelGateway(GatewayConfig(base_url="http://relay.local"))
    assert gw.session is None
    assert gw.send("p").text == "plain post"
    assert fake.calls[0]["url"] == "http://relay.local/api/ai"
