from toolsmith.llm.base_llm import BaseLLM
from typing import List, Dict, Any
import litellm

from utils.logger import get_logger
logger = get_logger(__name__)

class LiteLLM(BaseLLM):
    """Wrapper around litellm.completion."""

    def __init__(
        self,
        model: str = "gpt-4",
        temperature: float | None = 0.0,
        max_tokens: int | None = None,
        api_key: str | None = None,
    ) -> None:
        super().__init__(model=model, temperature=temperature)
        self.max_tokens = max_tokens
        self.api_key = api_key

    def completion(self, messages: List[Dict[str, str]], **kwargs) -> str:
        # Merge default parameters with provided kwargs
        effective_temperature = kwargs.get("temperature", self.temperature)
        effective_max_tokens = kwargs.get("max_tokens", self.max_tokens)

        completion_kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
        }
        if effective_temperature is not None:
            completion_kwargs["temperature"] = effective_temperature
        if effective_max_tokens is not None:
            completion_kwargs["max_tokens"] = effective_max_tokens
        if self.api_key:
            completion_kwargs["api_key"] = self.api_key

        # Add any additional kwargs (like stop)
        for key, value in kwargs.items():
            if key not in ["temperature", "max_tokens"]:
                completion_kwargs[key] = value

        logger.debug("llm_completion", model=self.model, message_count=len(messages))
        resp = litellm.completion(**completion_kwargs)

        try:
            return (resp.choices[0].message.content or "").strip()
        except (IndexError, AttributeError):
            logger.warning("llm_empty_response", model=self.model)
            return ""
