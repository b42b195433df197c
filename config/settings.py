from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


load_dotenv()

ROOT_DIR = Path(__file__).resolve().parent.parent


def _secret(name: str) -> Optional[str]:
    value = (os.getenv(name) or "").strip()
    return value or None


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """Application settings loaded from environment variables.

    Keep all credentials and config centralized here. Values are read once,
    when the module is imported.
    """

    app_env: str = os.getenv("APP_ENV", "development")
    port: int = int(os.getenv("PORT", "3000"))
    public_dir: Path = Path(os.getenv("PUBLIC_DIR", str(ROOT_DIR / "public")))

    gemini_api_key: Optional[str] = _secret("GEMINI_KEY")
    gemini_flash_model: str = os.getenv("GEMINI_FLASH_MODEL", "gemini-2.0-flash-exp")
    gemini_pro_model: str = os.getenv("GEMINI_PRO_MODEL", "gemini-2.0-pro-exp-02-05")
    gemini_enable_search: bool = _flag("GEMINI_ENABLE_SEARCH", "true")
    gemini_max_output_tokens: int = int(os.getenv("GEMINI_MAX_OUTPUT_TOKENS", "8192"))

    groq_api_key: Optional[str] = _secret("GROQ_KEY")
    groq_model: str = os.getenv("GROQ_MODEL", "llama-3.1-8b-instant")
    groq_api_url: str = os.getenv(
        "GROQ_API_URL", "https://api.groq.com/openai/v1/chat/completions"
    )
    groq_max_tokens: int = int(os.getenv("GROQ_MAX_TOKENS", "4096"))

    temperature: float = float(os.getenv("MODEL_TEMPERATURE", "0.7"))
    request_timeout: float = float(os.getenv("REQUEST_TIMEOUT", "20"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
