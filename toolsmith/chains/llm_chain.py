"""Single prompt → model call."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from toolsmith.chains.callbacks import BaseCallbackHandler, CallbackManager
from toolsmith.chains.prompt import PromptTemplate
from toolsmith.llm.base_llm import BaseLLM


class LLMChain:
    output_key = "text"

    def __init__(self, *, llm: BaseLLM, prompt: PromptTemplate, callback_manager: Optional[CallbackManager] = None):
        self.llm = llm
        self.prompt = prompt
        self.callback_manager = callback_manager or CallbackManager()

    def predict(self, *, callbacks: Optional[CallbackManager] = None, stop: Optional[List[str]] = None, **values: Any) -> str:
        manager = callbacks or self.callback_manager
        prompt = self.prompt.format(**values)
        manager.on_llm_start(prompt)
        llm_kwargs: Dict[str, Any] = {"stop": stop} if stop else {}
        text = self.llm.prompt(prompt, **llm_kwargs)
        manager.on_llm_end(text)
        return text

    def call(self, inputs: Dict[str, Any], callbacks: Optional[Iterable[BaseCallbackHandler]] = None) -> Dict[str, Any]:
        manager = self.callback_manager.with_handlers(callbacks)
        manager.on_chain_start(self.__class__.__name__, inputs)
        outputs = {self.output_key: self.predict(callbacks=manager, **inputs)}
        manager.on_chain_end(self.__class__.__name__, outputs)
        return outputs
