# Small typed records shared by the relay and its model clients.

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass
class Message:
    """Single chat turn: system or user."""
    role: str
    content: str


@dataclass
class ModelParams:
    """Upstream model parameters per request."""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None


class UpstreamModelError(Exception):
    """The upstream generative model failed to produce text."""
