# Upstream model client selection (AI_PROVIDER); heavy SDKs are imported lazily.

from src.log import get_logger
from .echo_dev_client import EchoDevClient

logger = get_logger(__name__)


def build_model_client(settings):
    provider = (settings.AI_PROVIDER or "echo").lower().strip()

    if provider == "gemini" and settings.GEMINI_API_KEY:
        from .gemini_client import GeminiClient
        logger.info("Using Gemini provider (%s)", settings.GEMINI_MODEL)
        return GeminiClient(api_key=settings.GEMINI_API_KEY, model=settings.GEMINI_MODEL)
    if provider == "openai" and settings.OPENAI_API_KEY:
        from .openai_client import OpenAIClient
        logger.info("Using OpenAI provider (%s)", settings.OPENAI_MODEL)
        return OpenAIClient(api_key=settings.OPENAI_API_KEY, model=settings.OPENAI_MODEL)
    if provider == "ollama":
        from .ollama_client import OllamaClient
        logger.info("Using Ollama provider (%s at %s)", settings.OLLAMA_MODEL, settings.OLLAMA_HOST)
        return OllamaClient(host=settings.OLLAMA_HOST, model=settings.OLLAMA_MODEL)

    if provider != "echo":
        logger.warning("Provider '%s' has no credentials configured, falling back to echo", provider)
    return EchoDevClient()


__all__ = ["EchoDevClient", "build_model_client"]
