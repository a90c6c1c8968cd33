# Relay package: the thin /api/ai backend in front of the upstream model.

from .service import ModelRelay
from .types import Message, ModelParams, UpstreamModelError
from .clients import EchoDevClient, build_model_client

__all__ = ["ModelRelay", "Message", "ModelParams", "UpstreamModelError", "EchoDevClient", "build_model_client"]
