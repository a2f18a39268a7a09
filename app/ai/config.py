import os
from dataclasses import dataclass

_DEFAULT_MODELS = {
    "gemini": "gemini-2.5-flash",
    "openai": "gpt-4o-mini",
}


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    api_key: str | None


def _api_key(provider: str) -> str | None:
    if provider == "openai":
        raw = os.getenv("OPENAI_API_KEY")
    else:
        # API_KEY is the name the original deployment used for the Gemini key.
        raw = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
    key = (raw or "").strip()
    return key or None


def load_ai_config() -> AIConfig:
    provider = os.getenv("AI_PROVIDER", "gemini").strip().lower()
    model = (os.getenv("AI_MODEL") or _DEFAULT_MODELS.get(provider, "")).strip()
    return AIConfig(provider=provider, model=model, api_key=_api_key(provider))
