# Error kinds surfaced by the generation pipeline.
# Callers only ever see GatewayError, PayloadUnparseable or ShapeMismatch.

from __future__ import annotations
from enum import Enum
from typing import Optional

from .types import GenerationStage


class GenerationError(Exception):
    """Base class for every failure of a single generation call."""

    def __init__(self, message: str, stage: Optional[GenerationStage] = None):
        super().__init__(message)
        self.stage = stage


class GatewayErrorKind(str, Enum):
    UNAUTHORIZED = "unauthorized"
    SERVICE_UNAVAILABLE = "service_unavailable"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


class GatewayError(GenerationError):
    """The relay could not be reached or refused the call."""

    def __init__(self, kind: GatewayErrorKind, message: str, status_code: Optional[int] = None):
        super().__init__(message, stage=GenerationStage.SENT)
        self.kind = kind
        self.status_code = status_code

    @property
    def retryable(self) -> bool:
        # credential failures are permanent
        return self.kind is not GatewayErrorKind.UNAUTHORIZED

    def __repr__(self) -> str:
        return f"GatewayError(kind={self.kind.value!r}, status_code={self.status_code!r})"


class PayloadUnparseable(GenerationError):
    """No JSON value could be recovered from the model text, even after repair."""

    def __init__(self, raw_text: str, reason: str = ""):
        msg = "model response is not parseable JSON"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg, stage=GenerationStage.PARSING)
        self.raw_text = raw_text


class ShapeMismatch(GenerationError):
    """The parsed value lacks a required field or has it with the wrong type."""

    def __init__(self, field: str, reason: str = ""):
        msg = f"invalid or missing field '{field}'"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg, stage=GenerationStage.MAPPED)
        self.field = field
        self.reason = reason
