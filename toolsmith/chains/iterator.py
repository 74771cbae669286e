import json
from typing import Any, Dict, Mapping

from toolsmith.chains.base import AgentChain
from toolsmith.chains.prompt import PromptTemplate
from toolsmith.models import tool_to_dict


class IteratorChain(AgentChain):
    """Revises a previously generated tool using the logs from running it."""

    def get_prompt_template(self) -> PromptTemplate:
        return PromptTemplate(
            template=self._wrap_in_executor(self._render_static("iterate_tool")),
            input_variables=["tool", "run_logs", "tools", "tool_names", "agent_scratchpad"],
        )

    def get_chain_values(self, input: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            "tool": json.dumps(tool_to_dict(input["tool"])),
            "run_logs": input["logs"],
            **self.tool_values(),
        }
