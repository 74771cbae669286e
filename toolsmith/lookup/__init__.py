"""Lookup tools the agent loop can call while writing a tool."""
from .base import LookupTool
from .npm import NpmInfo, NpmSearch
from .serpapi import SerpAPISearch

__all__ = ["LookupTool", "NpmInfo", "NpmSearch", "SerpAPISearch"]
