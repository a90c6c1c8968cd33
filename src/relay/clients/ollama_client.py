# Ollama local inference over its HTTP API (/api/generate, non-streaming).

import requests
from typing import List, Tuple, Dict, Any
from ..types import Message, ModelParams, UpstreamModelError


class OllamaClient:
    def __init__(self, host: str = "http://localhost:11434", model: str = "mistral:7b-instruct", timeout: float = 180):
        self.host = host.rstrip("/")
        self.model = model
        self.timeout = timeout

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        payload = {
            "model": self.model,
            "prompt": self._compose_prompt(messages),
            "stream": False,
            "options": {
                "temperature": float(params.temperature or 0.3),
                "num_predict": int(params.max_tokens or 2048),
            },
        }
        try:
            resp = requests.post(f"{self.host}/api/generate", json=payload, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            raise UpstreamModelError(f"ollama request failed: {e}") from e
        return data.get("response", "").strip(), {"engine": "ollama", "model": self.model}

    def _compose_prompt(self, messages: List[Message]) -> str:
        parts = []
        for m in messages:
            parts.append(f"{m.role.upper()}:\n{m.content.strip()}\n")
        return "\n".join(parts)
