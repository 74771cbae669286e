"""Generate small, self-contained tools with a language model."""
from .credentials import Credentials, resolve_credentials
from .exceptions import (
    AgentOutputParseError,
    ConfigurationError,
    FormattingError,
    OutputShapeError,
    ParseError,
    SchemaValidationError,
    ToolkitError,
)
from .formatter import ToolFormatter
from .models import BaseTool, FormattedTool, GeneratedTool, IterationInput
from .toolkit import Toolkit

__all__ = [
    "Toolkit",
    "ToolFormatter",
    "GeneratedTool",
    "BaseTool",
    "FormattedTool",
    "IterationInput",
    "Credentials",
    "resolve_credentials",
    "ToolkitError",
    "ConfigurationError",
    "OutputShapeError",
    "ParseError",
    "SchemaValidationError",
    "FormattingError",
    "AgentOutputParseError",
]
