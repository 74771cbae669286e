"""Prompt → model pipelines that produce raw tool JSON."""
from .base import BaseChain
from .executor import ExecutorChain
from .iterator import IteratorChain
from .simple import SimpleChain

__all__ = ["BaseChain", "ExecutorChain", "IteratorChain", "SimpleChain"]
