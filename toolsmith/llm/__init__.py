from .base_llm import BaseLLM
from .litellm import LiteLLM

__all__ = ["BaseLLM", "LiteLLM"]
