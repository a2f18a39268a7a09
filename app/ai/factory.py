import logging

from app.ai.config import AIConfig, load_ai_config
from app.ai.types import ModelClient
from app.core.errors import ConfigurationError

from app.ai.providers.gemini_provider import GeminiProvider
from app.ai.providers.openai_provider import OpenAIProvider

logger = logging.getLogger(__name__)


def get_ai_client(cfg: AIConfig | None = None) -> ModelClient | None:
    """Build the process-wide model client, or None when no key is configured."""
    cfg = cfg or load_ai_config()

    if cfg.provider not in {"gemini", "openai"}:
        raise ConfigurationError(f"Unsupported AI_PROVIDER='{cfg.provider}'")

    if not cfg.api_key:
        logger.warning("model_client_unconfigured provider=%s", cfg.provider)
        return None

    if cfg.provider == "openai":
        return OpenAIProvider(model=cfg.model, api_key=cfg.api_key)

    return GeminiProvider(model=cfg.model, api_key=cfg.api_key)
