from __future__ import annotations
import dataclasses

@dataclasses.dataclass
class LLM:
    model: str = "gpt-4"
    temperature: float = 0.0

@dataclasses.dataclass
class Agent:
    max_iterations: int = 15

@dataclasses.dataclass
class Lookup:
    registry_url: str = "https://registry.npmjs.org"
    serpapi_url: str = "https://serpapi.com/search"
    timeout: float = 30.0

@dataclasses.dataclass
class Config:
    llm: LLM = dataclasses.field(default_factory=LLM)
    agent: Agent = dataclasses.field(default_factory=Agent)
    lookup: Lookup = dataclasses.field(default_factory=Lookup)
