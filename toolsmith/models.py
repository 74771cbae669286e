"""Data models for generated tools."""
from __future__ import annotations

from typing import Any, Mapping, TypedDict

from pydantic import BaseModel, ConfigDict, Field, JsonValue

__all__ = [
    "JsonObject",
    "GenerationInput",
    "GeneratedTool",
    "BaseTool",
    "FormattedTool",
    "IterationInput",
    "tool_to_dict",
]

JsonObject = dict[str, JsonValue]
# Free-form request; every field becomes a requirement in the prompt
GenerationInput = Mapping[str, Any]


class GeneratedTool(BaseModel):
    """Tool exactly as the model is asked to return it."""

    model_config = ConfigDict(strict=True, populate_by_name=True, frozen=True)

    name: str
    description: str
    input_schema: JsonObject = Field(alias="inputSchema")
    output_schema: JsonObject = Field(alias="outputSchema")
    code: str


class BaseTool(GeneratedTool):
    """Generated tool with an identifier-safe slug derived from its name."""

    slug: str


class FormattedTool(BaseTool):
    """Tool with its LangChain.js module rendering."""

    langchain_code: str = Field(alias="langChainCode")


class IterationInput(TypedDict):
    """A previously generated tool plus the logs from running it."""

    tool: BaseTool | Mapping[str, Any]
    logs: str


def tool_to_dict(tool: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    """Return a tool in the camelCase JSON shape the model works with."""
    if isinstance(tool, BaseModel):
        return tool.model_dump(mode="json", by_alias=True)
    return dict(tool)
