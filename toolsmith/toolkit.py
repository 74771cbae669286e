"""
Toolkit

Façade that owns the three generation chains and turns a model response into a
validated, formatted tool. Chains and lookup tools are built once here and only
read afterwards.
"""
from __future__ import annotations

import json
import re
from typing import Callable, List, Mapping, Optional, Sequence

from pydantic import ValidationError
from slugify import slugify

from toolsmith.chains import ExecutorChain, IteratorChain, SimpleChain
from toolsmith.credentials import Credentials, resolve_credentials as _resolve_credentials
from toolsmith.exceptions import ParseError, SchemaValidationError
from toolsmith.formatter import ToolFormatter
from toolsmith.llm.base_llm import BaseLLM
from toolsmith.llm.litellm import LiteLLM
from toolsmith.lookup import LookupTool, NpmInfo, NpmSearch, SerpAPISearch
from toolsmith.models import BaseTool, FormattedTool, GeneratedTool, GenerationInput, IterationInput

from utils.config import Config
from utils.load_config import load_config
from utils.logger import get_logger, trace_method

logger = get_logger(__name__)

# Applied before decamelizing and transliteration
SLUG_REPLACEMENTS = [
    ["&", " and "],
    ["\u2665", " love "],
    ["\U0001F984", " unicorn "],
    ["\u00c4", "Ae"],
    ["\u00d6", "Oe"],
    ["\u00dc", "Ue"],
    ["\u00e4", "ae"],
    ["\u00f6", "oe"],
    ["\u00fc", "ue"],
    ["\u00df", "ss"],
]

_DECAMELIZE = [
    re.compile(r"([A-Z]{2,})(\d+)"),
    re.compile(r"([a-z\d]+)([A-Z]{2,})"),
    re.compile(r"([a-z\d])([A-Z])"),
    re.compile(r"([A-Z]+)([A-Z][a-rt-z\d]+)"),
]


def tool_slug(name: str) -> str:
    """Slug for a tool name: ``"fooBar & Käse"`` becomes ``"foo-bar-and-kaese"``."""
    for old, new in SLUG_REPLACEMENTS:
        name = name.replace(old, new)
    for pattern in _DECAMELIZE:
        name = pattern.sub(r"\1 \2", name)
    return slugify(name)


def default_lookup_tools(serp_api_key: str, config: Config) -> List[LookupTool]:
    lookup = config.lookup
    return [
        NpmSearch(registry_url=lookup.registry_url, timeout=lookup.timeout),
        NpmInfo(registry_url=lookup.registry_url, timeout=lookup.timeout),
        SerpAPISearch(serp_api_key, url=lookup.serpapi_url, timeout=lookup.timeout),
    ]


def _validation_messages(exc: ValidationError) -> List[str]:
    return [
        f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
        for error in exc.errors()
    ]


class Toolkit:
    """Generates and iterates tools with a language model."""

    def __init__(
        self,
        openai_api_key: Optional[str] = None,
        serp_api_key: Optional[str] = None,
        log_to_console: bool = False,
        *,
        llm: Optional[BaseLLM] = None,
        lookup_tools: Optional[Sequence[LookupTool]] = None,
        config: Optional[Config] = None,
        environ: Optional[Mapping[str, str]] = None,
        resolve_credentials: Callable[..., Credentials] = _resolve_credentials,
    ):
        """Resolves credentials and builds the chains.

        Args:
            openai_api_key: Model provider key; falls back to OPENAI_API_KEY.
            serp_api_key: SerpAPI key; falls back to SERP_API_KEY.
            log_to_console: Trace every chain call to the console logger.

            llm: Model to use instead of LiteLLM built from config.
            lookup_tools: Tools for the agent instead of npm + SerpAPI.
            config: Settings instead of the ones in config.toml.
            environ: Mapping consulted for missing keys instead of os.environ.
            resolve_credentials: Function turning the inputs above into Credentials.

        Raises:
            ConfigurationError: If either key is missing from both sources.
        """
        credentials = resolve_credentials(openai_api_key, serp_api_key, environ)
        config = config or load_config()

        llm = llm or LiteLLM(
            model=config.llm.model,
            temperature=config.llm.temperature,
            api_key=credentials.openai_api_key,
        )
        tools = list(lookup_tools) if lookup_tools is not None else default_lookup_tools(credentials.serp_api_key, config)

        # Chain used to generate tool without use of other tools
        self.generator_chain = SimpleChain(llm=llm, log_to_console=log_to_console)
        # Chain used to generate tool using an agent that executes other tools
        self.executor_chain = ExecutorChain(
            llm=llm,
            lookup_tools=tools,
            max_iterations=config.agent.max_iterations,
            log_to_console=log_to_console,
        )
        self.iterator_chain = IteratorChain(
            llm=llm,
            lookup_tools=tools,
            max_iterations=config.agent.max_iterations,
            log_to_console=log_to_console,
        )
        logger.info("toolkit_ready", model=getattr(llm, "model", None), lookup_tools=[t.name for t in tools])

    def generate_tool(self, input: GenerationInput, use_executor: bool = False) -> FormattedTool:
        """Generate a tool from a JSON-serialisable request.

        Note: the flag is inverted relative to its name and kept that way for
        existing callers: ``use_executor=False`` (the default) runs the agent
        with lookup tools, ``use_executor=True`` runs the single-call chain.
        """
        chain = self.generator_chain if use_executor else self.executor_chain
        response_string = chain.generate(input)
        return self.parse_response(response_string)

    def iterate_tool(self, input: IterationInput) -> FormattedTool:
        """Revise ``input["tool"]`` using ``input["logs"]`` from running it."""
        response_string = self.iterator_chain.generate(input)
        return self.parse_response(response_string)

    @trace_method
    def parse_response(self, response_string: str) -> FormattedTool:
        # Parse response into JSON object
        try:
            response_object = json.loads(response_string)
        except json.JSONDecodeError as exc:
            raise ParseError(response_string) from exc

        # Ensure the resulting object fits expected schema
        try:
            generated_tool = GeneratedTool.model_validate(response_object)
        except ValidationError as exc:
            raise SchemaValidationError(_validation_messages(exc)) from exc

        # Add slug as an identifier
        base_tool = BaseTool(slug=tool_slug(generated_tool.name), **generated_tool.model_dump())

        # Add formats to tool
        tool = ToolFormatter(base_tool).tool_with_formats()
        logger.info("response_parsed", tool=tool.name, slug=tool.slug)
        return tool
