# Google Gemini client via the google-genai SDK.
# The system message becomes the system instruction; user turns are the contents.

from typing import List, Tuple, Dict, Any

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ..types import Message, ModelParams, UpstreamModelError


class GeminiClient:
    def __init__(self, api_key: str, model: str = "gemini-1.5-flash"):
        if not api_key:
            raise ValueError("GEMINI_API_KEY is required for the gemini provider")
        self.model = model
        self._client = genai.Client(api_key=api_key)

    def generate(self, messages: List[Message], params: ModelParams) -> Tuple[str, Dict[str, Any]]:
        system = "\n\n".join(m.content for m in messages if m.role == "system") or None
        contents = "\n\n".join(m.content for m in messages if m.role != "system")
        config = types.GenerateContentConfig(
            system_instruction=system,
            temperature=params.temperature,
            max_output_tokens=params.max_tokens,
        )
        try:
            response = self._client.models.generate_content(model=self.model, contents=contents, config=config)
        except genai_errors.APIError as e:
            raise UpstreamModelError(f"gemini request failed: {e}") from e

        meta: Dict[str, Any] = {"engine": "gemini", "model": self.model}
        if response.usage_metadata:
            meta["usage"] = {
                "prompt_tokens": response.usage_metadata.prompt_token_count,
                "completion_tokens": response.usage_metadata.candidates_token_count,
                "total_tokens": response.usage_metadata.total_token_count,
            }
        return response.text or "", meta
