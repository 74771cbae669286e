"""Callback handlers that observe chain, model and tool events."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from utils.logger import get_logger

logger = get_logger(__name__)

_PREVIEW_CHARS = 200


def _preview(text: Any) -> str:
    text = str(text)
    return text if len(text) <= _PREVIEW_CHARS else text[:_PREVIEW_CHARS] + "..."


class BaseCallbackHandler:
    """No-op handler; subclasses override the events they care about."""

    def on_chain_start(self, chain_name: str, inputs: Dict[str, Any]) -> None: ...

    def on_chain_end(self, chain_name: str, outputs: Dict[str, Any]) -> None: ...

    def on_llm_start(self, prompt: str) -> None: ...

    def on_llm_end(self, text: str) -> None: ...

    def on_agent_action(self, action: Any) -> None: ...

    def on_agent_finish(self, finish: Any) -> None: ...

    def on_tool_start(self, tool_name: str, tool_input: str) -> None: ...

    def on_tool_end(self, tool_name: str, output: str) -> None: ...


class ConsoleCallbackHandler(BaseCallbackHandler):
    """Traces every event to the console logger."""

    def on_chain_start(self, chain_name: str, inputs: Dict[str, Any]) -> None:
        logger.info("chain_start", chain=chain_name, inputs=list(inputs))

    def on_chain_end(self, chain_name: str, outputs: Dict[str, Any]) -> None:
        logger.info("chain_end", chain=chain_name, outputs={k: _preview(v) for k, v in outputs.items()})

    def on_llm_start(self, prompt: str) -> None:
        logger.info("llm_start", prompt=prompt)

    def on_llm_end(self, text: str) -> None:
        logger.info("llm_end", text=text)

    def on_agent_action(self, action: Any) -> None:
        logger.info("agent_action", tool=action.tool, tool_input=action.tool_input)

    def on_agent_finish(self, finish: Any) -> None:
        logger.info("agent_finish", output=_preview(finish.output))

    def on_tool_start(self, tool_name: str, tool_input: str) -> None:
        logger.info("tool_start", tool=tool_name, tool_input=tool_input)

    def on_tool_end(self, tool_name: str, output: str) -> None:
        logger.info("tool_end", tool=tool_name, observation_preview=_preview(output))


class CallbackManager(BaseCallbackHandler):
    """Fans each event out to its handlers."""

    def __init__(self, handlers: Optional[Iterable[BaseCallbackHandler]] = None):
        self.handlers: List[BaseCallbackHandler] = list(handlers or [])

    def add_handler(self, handler: BaseCallbackHandler) -> None:
        self.handlers.append(handler)

    def remove_handler(self, handler: BaseCallbackHandler) -> None:
        self.handlers.remove(handler)

    def with_handlers(self, extra: Optional[Iterable[BaseCallbackHandler]]) -> "CallbackManager":
        """Copy of this manager with ``extra`` handlers added for a single call."""
        return CallbackManager([*self.handlers, *(extra or [])])

    def _emit(self, event: str, *args: Any) -> None:
        for handler in self.handlers:
            getattr(handler, event)(*args)

    def on_chain_start(self, chain_name: str, inputs: Dict[str, Any]) -> None:
        self._emit("on_chain_start", chain_name, inputs)

    def on_chain_end(self, chain_name: str, outputs: Dict[str, Any]) -> None:
        self._emit("on_chain_end", chain_name, outputs)

    def on_llm_start(self, prompt: str) -> None:
        self._emit("on_llm_start", prompt)

    def on_llm_end(self, text: str) -> None:
        self._emit("on_llm_end", text)

    def on_agent_action(self, action: Any) -> None:
        self._emit("on_agent_action", action)

    def on_agent_finish(self, finish: Any) -> None:
        self._emit("on_agent_finish", finish)

    def on_tool_start(self, tool_name: str, tool_input: str) -> None:
        self._emit("on_tool_start", tool_name, tool_input)

    def on_tool_end(self, tool_name: str, output: str) -> None:
        self._emit("on_tool_end", tool_name, output)
