# Relay service: forwards one prompt to the configured upstream model.

from __future__ import annotations
import os
from typing import Any, Dict, List, Optional, Tuple

import yaml

from src.log import get_logger
from .types import Message, ModelParams

logger = get_logger(__name__)


class ModelRelay:
    def __init__(self, model_client, config_path: str = "src/relay/config.yaml"):
        self.model_client = model_client
        self.config_path = config_path
        self.cfg = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        if not os.path.exists(self.config_path):
            logger.warning("relay config %s not found, using model defaults", self.config_path)
            return {}
        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @property
    def engine(self) -> str:
        return type(self.model_client).__name__

    def _compose_messages(self, prompt: str) -> List[Message]:
        messages: List[Message] = []
        system_prompt = (self.cfg.get("system_prompt") or "").strip()
        if system_prompt:
            messages.append(Message(role="system", content=system_prompt))
        messages.append(Message(role="user", content=prompt))
        return messages

    def complete(
        self,
        prompt: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> Tuple[str, Dict[str, Any]]:
        """Send `prompt` upstream and return (text, meta)."""
        params = ModelParams(
            temperature=temperature if temperature is not None else self.cfg.get("temperature", 0.4),
            max_tokens=max_tokens or self.cfg.get("max_tokens", 4096),
        )
        text, meta = self.model_client.generate(self._compose_messages(prompt), params)
        logger.info("relay: %s answered %d chars", meta.get("engine", self.engine), len(text))
        return text, meta
