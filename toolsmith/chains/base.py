"""Shared prompt → model → named output contract of the generation chains."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Sequence

from toolsmith.chains.agent import AgentExecutor, ZeroShotAgent, tool_names, tools_listing
from toolsmith.chains.callbacks import ConsoleCallbackHandler
from toolsmith.chains.llm_chain import LLMChain
from toolsmith.chains.prompt import PromptTemplate
from toolsmith.exceptions import OutputShapeError
from toolsmith.llm.base_llm import BaseLLM
from toolsmith.lookup.base import LookupTool
from toolsmith.prompts import escape_braces, load_prompts

from utils.logger import get_logger

logger = get_logger(__name__)

PROMPT_PROFILE = "toolkit"
PROMPT_KEYS = ["tool_spec", "generate_tool", "iterate_tool", "executor", "langchain_tool"]


class BaseChain(ABC):
    """Renders a prompt from static templates and caller input, calls the model
    and returns one named field of the response.

    Subclasses build ``self.chain`` (anything with ``call(inputs, callbacks)``)
    and describe their template, input values and output key.
    """

    def __init__(self, *, llm: BaseLLM, log_to_console: bool = False):
        self.llm = llm
        self.log_to_console = log_to_console
        self.prompts = load_prompts(PROMPT_PROFILE, required_prompts=PROMPT_KEYS)
        self.chain: Any = None

    @abstractmethod
    def get_prompt_template(self) -> PromptTemplate: ...

    @abstractmethod
    def get_chain_values(self, input: Any) -> Dict[str, Any]: ...

    @abstractmethod
    def get_output_key(self) -> str: ...

    def generate(self, input: Any) -> str:
        output_key = self.get_output_key()
        chain_values = self.get_chain_values(input)

        # Console tracing is scoped to this one call
        callbacks = [ConsoleCallbackHandler()] if self.log_to_console else None
        logger.info("chain_call", chain=self.__class__.__name__, output_key=output_key)
        response_values = self.chain.call(chain_values, callbacks=callbacks)

        response_string = response_values.get(output_key)
        if not response_string:
            raise OutputShapeError(output_key, response_values)
        return response_string

    def render_prompt(self, input: Any) -> str:
        """The first prompt the model sees for ``input``."""
        return self.get_prompt_template().format(agent_scratchpad="", **self.get_chain_values(input))

    def new_llm_chain(self) -> LLMChain:
        return LLMChain(llm=self.llm, prompt=self.get_prompt_template())

    def _render_static(self, template_key: str) -> str:
        """Fill the tool spec into an instruction template, leaving per-call placeholders."""
        return self.prompts[template_key].format(tool_spec=escape_braces(self.prompts["tool_spec"]))


class AgentChain(BaseChain):
    """Base for chains that let the model consult lookup tools before answering."""

    def __init__(
        self,
        *,
        llm: BaseLLM,
        lookup_tools: Sequence[LookupTool],
        max_iterations: int = 15,
        log_to_console: bool = False,
    ):
        super().__init__(llm=llm, log_to_console=log_to_console)
        self.tools = list(lookup_tools)
        agent = ZeroShotAgent(llm_chain=self.new_llm_chain())
        self.chain = AgentExecutor(agent=agent, tools=self.tools, max_iterations=max_iterations)

    def tool_values(self) -> Dict[str, str]:
        return {"tools": tools_listing(self.tools), "tool_names": tool_names(self.tools)}

    def _wrap_in_executor(self, instruction: str) -> str:
        return self.prompts["executor"].format(prompt=instruction)

    def get_output_key(self) -> str:
        return AgentExecutor.output_key
