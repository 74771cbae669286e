import json
import pytest
from typing import Any, Dict, List

from toolsmith.llm.base_llm import BaseLLM


class DummyLLM(BaseLLM):
    def __init__(self, *, text_queue: List[str] | None = None):
        super().__init__(model="dummy-model", temperature=0.0)
        self.text_queue = list(text_queue or [])
        self.prompts: List[str] = []
        self.kwargs: List[Dict[str, Any]] = []

    def completion(self, messages: List[Dict[str, str]], **kwargs) -> str:
        self.prompts.append(messages[-1]["content"])
        self.kwargs.append(kwargs)
        if not self.text_queue:
            return ""
        return self.text_queue.pop(0)


class DummyLookupTool:
    def __init__(self, name: str, description: str = "", result: str = "ok"):
        self.name = name
        self.description = description or f"{name} description"
        self.result = result
        self.queries: List[str] = []

    def call(self, query: str) -> str:
        self.queries.append(query)
        return self.result


CSV_PARSER_RESPONSE = json.dumps(
    {
        "name": "CSV Parser",
        "description": "Parses CSV.",
        "inputSchema": {},
        "outputSchema": {},
        "code": "function f(x){return x}",
    }
)


@pytest.fixture
def dummy_llm() -> DummyLLM:
    return DummyLLM()


@pytest.fixture
def lookup_tools() -> List[DummyLookupTool]:
    return [DummyLookupTool("npm-search"), DummyLookupTool("npm-info"), DummyLookupTool("search")]
