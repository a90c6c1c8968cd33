# Shared fixtures: a fake relay gateway. The project root is on sys.path via pytest's pythonpath setting.
import pytest

from src.generate.types import RawModelResponse


class FakeGateway:
    """Stands in for ModelGateway: returns canned text or raises a canned error."""

    def __init__(self, text: str = "", error: Exception = None):
        self.text = text
        self.error = error
        self.prompts = []

    def send(self, prompt: str) -> RawModelResponse:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return RawModelResponse(text=self.text)


@pytest.fixture
def fake_gateway():
    return FakeGateway()
