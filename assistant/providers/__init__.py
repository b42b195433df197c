from assistant.providers.gemini import GeminiProvider, ModelFactory, build_chat_model
from assistant.providers.groq import GroqProvider

__all__ = ["GeminiProvider", "GroqProvider", "ModelFactory", "build_chat_model"]
