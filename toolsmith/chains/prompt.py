"""str.format based prompt template with declared input variables."""
from __future__ import annotations

from dataclasses import dataclass
from string import Formatter
from typing import Any, List


@dataclass(frozen=True)
class PromptTemplate:
    template: str
    input_variables: List[str]

    def __post_init__(self) -> None:
        found = {field for _, field, _, _ in Formatter().parse(self.template) if field}
        if found != set(self.input_variables):
            raise ValueError(
                f"Template placeholders {sorted(found)} do not match input variables {sorted(self.input_variables)}"
            )

    def format(self, **values: Any) -> str:
        missing = [name for name in self.input_variables if name not in values]
        if missing:
            raise KeyError(f"Missing prompt values: {missing}")
        return self.template.format(**{name: values[name] for name in self.input_variables})
