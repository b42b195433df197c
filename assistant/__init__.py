from assistant.dispatcher import ProviderDispatcher, parse_model_hint
from assistant.history import normalize_history

__all__ = ["ProviderDispatcher", "normalize_history", "parse_model_hint"]
