"""Renders a validated tool as a LangChain.js module."""
from __future__ import annotations

import json
from typing import Any, Optional

import jsbeautifier
import tree_sitter_javascript
from tree_sitter import Language, Node, Parser

from toolsmith.exceptions import FormattingError
from toolsmith.models import BaseTool, FormattedTool
from toolsmith.prompts import escape_braces, load_prompts


JS_LANGUAGE = Language(tree_sitter_javascript.language())


def _first_error(node: Node) -> Optional[Node]:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _beautifier_options():
    opts = jsbeautifier.default_options()
    opts.indent_size = 2
    opts.end_with_newline = False
    return opts


def format_code(code: str) -> str:
    """Syntax-check ``code`` as current ECMAScript and return it beautified."""
    tree = Parser(JS_LANGUAGE).parse(code.encode("utf-8"))
    if tree.root_node.has_error:
        node = _first_error(tree.root_node) or tree.root_node
        row, column = node.start_point
        kind = f"missing {node.type}" if node.is_missing else "unexpected syntax"
        raise FormattingError(f"tool code could not be parsed: {kind} at line {row + 1}, column {column + 1}")
    return jsbeautifier.beautify(code, _beautifier_options())


def pascal_case(slug: str) -> str:
    name = "".join(part[:1].upper() + part[1:] for part in slug.split("-") if part)
    if not name or not name[0].isalpha():
        name = f"Tool{name}"
    return name


class ToolFormatter:
    def __init__(self, tool: BaseTool):
        self.tool = tool
        self.langchain_template = load_prompts("toolkit", required_prompts=["langchain_tool"])["langchain_tool"]

    @staticmethod
    def stringify_json_schema(json_schema: Optional[Any]) -> str:
        # Continuation lines sit one level deeper inside the class body
        return json.dumps(json_schema, indent=2).replace("\n", "\n  ")

    @staticmethod
    def to_langchain_description(description: str, input_schema_string: str) -> str:
        result = description
        if not description.endswith("."):
            result += "."
        result += " The action input should adhere to this JSON schema:\n"
        # LangChain feeds tool descriptions through its own {placeholder} templates
        result += escape_braces(input_schema_string)
        return result

    def to_langchain(self) -> str:
        return self.langchain_template.format(
            class_name=pascal_case(self.tool.slug),
            tool_code=format_code(self.tool.code),
            tool_slug=self.tool.slug,
            langchain_description=json.dumps(
                self.to_langchain_description(
                    self.tool.description, json.dumps(self.tool.input_schema, separators=(",", ":"))
                )
            ),
            input_schema=self.stringify_json_schema(self.tool.input_schema),
            output_schema=self.stringify_json_schema(self.tool.output_schema),
        )

    def tool_with_formats(self) -> FormattedTool:
        return FormattedTool(**self.tool.model_dump(), langchain_code=self.to_langchain())
