import json
from typing import Any, Dict

from toolsmith.chains.base import BaseChain
from toolsmith.chains.llm_chain import LLMChain
from toolsmith.chains.prompt import PromptTemplate
from toolsmith.llm.base_llm import BaseLLM


class SimpleChain(BaseChain):
    """Generates a tool with a single model call and no lookup tools."""

    def __init__(self, *, llm: BaseLLM, log_to_console: bool = False):
        super().__init__(llm=llm, log_to_console=log_to_console)
        self.chain = self.new_llm_chain()

    def get_prompt_template(self) -> PromptTemplate:
        return PromptTemplate(
            template=self._render_static("generate_tool"),
            input_variables=["generate_tool_input"],
        )

    def get_chain_values(self, input: Any) -> Dict[str, Any]:
        return {"generate_tool_input": json.dumps(input)}

    def get_output_key(self) -> str:
        return LLMChain.output_key
