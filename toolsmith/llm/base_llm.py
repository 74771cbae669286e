"""Lightweight LLM wrapper interface used by the generation chains."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Dict


class BaseLLM(ABC):
    """Minimal synchronous chat‑LLM interface.

    • Accepts a list[dict] *messages* like the OpenAI Chat format.
    • Returns *content* (str) of the assistant reply.
    • Implementations SHOULD be stateless; auth + model name given at init.
    """

    def __init__(self, model: str, temperature: float | None = None) -> None:
        self.model = model
        self.temperature = temperature

    @abstractmethod
    def completion(self, messages: List[Dict[str, str]], **kwargs) -> str: ...

    def prompt(self, content: str, **kwargs) -> str:
        """Convenience method for single user prompts."""
        return self.completion([{"role": "user", "content": content}], **kwargs)
