"""Errors raised while generating, parsing and formatting tools."""
from __future__ import annotations

from typing import Any, Dict, List

from utils.logger import get_logger

logger = get_logger(__name__)


class ToolkitError(Exception):
    """Base exception for all toolkit errors."""

    def __init__(self, message: str):
        super().__init__(message)
        logger.warning(
            "toolkit_error",
            error_type=self.__class__.__name__,
            message=message,
        )


class ConfigurationError(ToolkitError):
    """A required credential is missing from both arguments and environment."""


class OutputShapeError(ToolkitError):
    """A chain response lacks the output key it is contracted to return."""

    def __init__(self, output_key: str, values: Dict[str, Any]):
        self.output_key = output_key
        self.values = values
        super().__init__(f'value "{output_key}" not returned from chain call, got values: {values!r}')


class ParseError(ToolkitError):
    """The model response is not valid JSON."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"response could not be parsed as JSON: {raw}")


class SchemaValidationError(ToolkitError):
    """Parsed JSON does not have the shape of a generated tool."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("response does not match the tool schema: " + "; ".join(errors))


class FormattingError(ToolkitError):
    """Tool code could not be parsed for beautification."""


class AgentOutputParseError(ToolkitError):
    """The agent model output is neither an action nor a final answer."""

    def __init__(self, llm_output: str):
        self.llm_output = llm_output
        super().__init__(f"Could not parse agent output: `{llm_output}`")
