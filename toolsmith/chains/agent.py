"""Zero-shot ReAct agent loop over lookup tools."""
from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from toolsmith.chains.callbacks import BaseCallbackHandler, CallbackManager
from toolsmith.chains.llm_chain import LLMChain
from toolsmith.exceptions import AgentOutputParseError
from toolsmith.lookup.base import LookupTool

from utils.logger import get_logger

logger = get_logger(__name__)

FINAL_ANSWER_ACTION = "Final Answer:"
OBSERVATION_PREFIX = "Observation: "
LLM_PREFIX = "Thought:"
STOP_SEQUENCES = ["\nObservation:", "\n\tObservation:"]
ITERATION_LIMIT_OUTPUT = "Agent stopped due to iteration limit or time limit."
INVALID_FORMAT_OBSERVATION = "Invalid Format: Missing 'Action:' or 'Final Answer:' after 'Thought:'"

_ACTION_RE = re.compile(r"Action\s*\d*\s*:[\s]*(.*?)[\s]*Action\s*\d*\s*Input\s*\d*\s*:[\s]*(.*)", re.DOTALL)


@dataclass(frozen=True)
class AgentAction:
    tool: str
    tool_input: str
    log: str


@dataclass(frozen=True)
class AgentFinish:
    output: str
    log: str


AgentStep = Tuple[AgentAction, str]


def _is_json_object(text: str) -> bool:
    if not text.startswith("{"):
        return False
    try:
        return isinstance(json.loads(text), dict)
    except json.JSONDecodeError:
        return False


def parse_agent_output(text: str) -> Union[AgentAction, AgentFinish]:
    """Read a final answer or a single tool action from model text.

    A reply that is nothing but a JSON object is a final answer without
    its marker.
    """
    if FINAL_ANSWER_ACTION in text:
        # The answer is a JSON document and may contain anything after the marker
        return AgentFinish(output=text.split(FINAL_ANSWER_ACTION, 1)[1].strip(), log=text)

    stripped = text.strip()
    if _is_json_object(stripped):
        return AgentFinish(output=stripped, log=text)

    match = _ACTION_RE.search(text)
    if not match:
        raise AgentOutputParseError(text)
    tool = match.group(1).strip()
    tool_input = match.group(2).strip(" ").strip('"').strip()
    return AgentAction(tool=tool, tool_input=tool_input, log=text)


def tools_listing(tools: Sequence[LookupTool]) -> str:
    return "\n".join(f"{tool.name}: {tool.description}" for tool in tools)


def tool_names(tools: Sequence[LookupTool]) -> str:
    return ", ".join(tool.name for tool in tools)


class ZeroShotAgent:
    """Decides the next step from the prompt, the tool listing and the scratchpad."""

    def __init__(self, *, llm_chain: LLMChain):
        self.llm_chain = llm_chain

    @staticmethod
    def construct_scratchpad(intermediate_steps: Sequence[AgentStep]) -> str:
        thoughts = ""
        for action, observation in intermediate_steps:
            thoughts += action.log
            thoughts += f"\n{OBSERVATION_PREFIX}{observation}\n{LLM_PREFIX}"
        return thoughts

    def plan(
        self,
        intermediate_steps: Sequence[AgentStep],
        *,
        callbacks: Optional[CallbackManager] = None,
        **inputs: Any,
    ) -> Union[AgentAction, AgentFinish]:
        output = self.llm_chain.predict(
            callbacks=callbacks,
            stop=STOP_SEQUENCES,
            agent_scratchpad=self.construct_scratchpad(intermediate_steps),
            **inputs,
        )
        return parse_agent_output(output)


class AgentExecutor:
    """Runs the agent, calling lookup tools until it gives a final answer."""

    output_key = "output"

    def __init__(
        self,
        *,
        agent: ZeroShotAgent,
        tools: Sequence[LookupTool],
        max_iterations: int = 15,
        handle_parsing_errors: bool = False,
        callback_manager: Optional[CallbackManager] = None,
    ) -> None:
        self.agent = agent
        self.tools = list(tools)
        self.max_iterations = max_iterations
        self.handle_parsing_errors = handle_parsing_errors
        self.callback_manager = callback_manager or CallbackManager()

    def call(self, inputs: Dict[str, Any], callbacks: Optional[Iterable[BaseCallbackHandler]] = None) -> Dict[str, Any]:
        manager = self.callback_manager.with_handlers(callbacks)
        chain_name = self.__class__.__name__
        manager.on_chain_start(chain_name, inputs)

        name_to_tool = {tool.name: tool for tool in self.tools}
        intermediate_steps: List[AgentStep] = []

        for iteration in range(self.max_iterations):
            try:
                decision = self.agent.plan(intermediate_steps, callbacks=manager, **inputs)
            except AgentOutputParseError as exc:
                if not self.handle_parsing_errors:
                    raise
                action = AgentAction(tool="_Exception", tool_input="Invalid or incomplete response", log=exc.llm_output)
                intermediate_steps.append((action, INVALID_FORMAT_OBSERVATION))
                continue

            if isinstance(decision, AgentFinish):
                manager.on_agent_finish(decision)
                logger.info("agent_finished", iterations=iteration + 1)
                outputs = {self.output_key: decision.output}
                manager.on_chain_end(chain_name, outputs)
                return outputs

            manager.on_agent_action(decision)
            tool = name_to_tool.get(decision.tool)
            if tool is None:
                observation = f"{decision.tool} is not a valid tool, try one of [{', '.join(name_to_tool)}]."
                logger.warning("agent_unknown_tool", tool=decision.tool)
            else:
                manager.on_tool_start(tool.name, decision.tool_input)
                observation = tool.call(decision.tool_input)
                manager.on_tool_end(tool.name, observation)
            intermediate_steps.append((decision, observation))

        logger.warning("agent_iteration_limit", max_iterations=self.max_iterations)
        outputs = {self.output_key: ITERATION_LIMIT_OUTPUT}
        manager.on_chain_end(chain_name, outputs)
        return outputs
