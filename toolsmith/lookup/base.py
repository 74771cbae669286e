"""Abstract contract for a lookup tool."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LookupTool(Protocol):
    """A string-in/string-out capability exposed to the agent loop.

    ``description`` is shown verbatim to the model in the list of available
    actions. ``call`` must not raise: failures come back as ``"Error: ..."``
    so the agent can read them as an observation.
    """

    name: str
    description: str

    def call(self, query: str) -> str: ...
