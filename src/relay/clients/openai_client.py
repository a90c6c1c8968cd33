# OpenAI Chat Completions client; same interface as OllamaClient.

from typing import List, Optional, Tuple, Dict, Any

import openai
from openai import OpenAI

from ..types import Message, ModelParams, UpstreamModelError


class OpenAIClient:
    def __init__(self, api_key: Optional[str] = None, model: str = "gpt-4o-mini"):
        self.model = model
        self.client = OpenAI(api_key=api_key)

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        formatted = [{"role": m.role, "content": m.content} for m in messages]
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=formatted,
                temperature=params.temperature or 0.3,
                max_tokens=params.max_tokens or 2048,
            )
        except openai.OpenAIError as e:
            raise UpstreamModelError(f"openai request failed: {e}") from e
        text = (resp.choices[0].message.content or "").strip()
        meta = {"engine": "openai", "model": self.model}
        return text, meta
