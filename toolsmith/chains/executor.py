import json
from typing import Any, Dict

from toolsmith.chains.base import AgentChain
from toolsmith.chains.prompt import PromptTemplate


class ExecutorChain(AgentChain):
    """Generates a tool with an agent that may search npm and the web first."""

    def get_prompt_template(self) -> PromptTemplate:
        return PromptTemplate(
            template=self._wrap_in_executor(self._render_static("generate_tool")),
            input_variables=["generate_tool_input", "tools", "tool_names", "agent_scratchpad"],
        )

    def get_chain_values(self, input: Any) -> Dict[str, Any]:
        return {"generate_tool_input": json.dumps(input), **self.tool_values()}
