# HTTP gateway to the AI relay (POST /api/ai).
# One request per call, no retries; failures become GatewayError with a kind
# the caller can branch on.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Optional

import requests

from src.log import get_logger
from .errors import GatewayError, GatewayErrorKind
from .types import RawModelResponse

logger = get_logger(__name__)

TokenProvider = Callable[[], Optional[str]]


def _no_token() -> Optional[str]:
    return None


@dataclass(frozen=True)
class GatewayConfig:
    """Where the relay lives and how to authenticate against it."""
    base_url: str
    timeout: float = 60.0
    token_provider: TokenProvider = field(default=_no_token)
    path: str = "/api/ai"

    @property
    def url(self) -> str:
        return f"{self.base_url.rstrip('/')}{self.path}"

    @classmethod
    def from_settings(cls, settings, token_provider: Optional[TokenProvider] = None) -> "GatewayConfig":
        if token_provider is None:
            static_token = settings.AI_API_TOKEN
            token_provider = lambda: static_token  # noqa: E731
        return cls(
            base_url=settings.AI_API_BASE_URL,
            timeout=settings.AI_API_TIMEOUT,
            token_provider=token_provider,
        )


def classify_status(status_code: int) -> GatewayErrorKind:
    if status_code in (401, 403):
        return GatewayErrorKind.UNAUTHORIZED
    if 500 <= status_code < 600:
        return GatewayErrorKind.SERVICE_UNAVAILABLE
    return GatewayErrorKind.UNKNOWN


class ModelGateway:
    def __init__(self, config: GatewayConfig, session: Optional[requests.Session] = None):
        self.config = config
        # without a session every call goes through requests.post
        self.session = session

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        try:
            token = self.config.token_provider()
        except Exception as e:  # caller-supplied callable
            raise GatewayError(GatewayErrorKind.UNAUTHORIZED, f"could not obtain relay token: {e}") from e
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def send(self, prompt: str) -> RawModelResponse:
        url = self.config.url
        post = self.session.post if self.session is not None else requests.post
        headers = self._headers()
        try:
            resp = post(
                url,
                json={"prompt": prompt},
                headers=headers,
                timeout=self.config.timeout,
            )
        except requests.Timeout as e:
            raise GatewayError(GatewayErrorKind.TIMEOUT, f"relay timed out after {self.config.timeout}s") from e
        except requests.RequestException as e:
            raise GatewayError(GatewayErrorKind.SERVICE_UNAVAILABLE, f"relay unreachable: {e}") from e

        if not 200 <= resp.status_code < 300:
            kind = classify_status(resp.status_code)
            logger.warning("relay answered %s (%s)", resp.status_code, kind.value)
            raise GatewayError(kind, f"relay answered HTTP {resp.status_code}", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise GatewayError(GatewayErrorKind.UNKNOWN, "relay answered with a non-JSON body", resp.status_code) from e

        if not isinstance(data, dict) or not isinstance(data.get("text"), str):
            raise GatewayError(GatewayErrorKind.UNKNOWN, "relay body has no 'text' string", resp.status_code)

        text = data["text"]
        logger.debug("relay returned %d chars", len(text))
        return RawModelResponse(text=text)
