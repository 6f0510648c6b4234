"""Content filter expressions attached to a subscription."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional


def _checked_parameters(expression_parameters: Optional[Iterable[str]]) -> List[str]:
    parameters = list(expression_parameters or ())
    if any(parameter is None for parameter in parameters):
        raise ValueError("failed to copy expression parameter")
    return parameters


@dataclass
class ContentFilterOptions:
    """A filter expression and the parameters substituted into it."""

    filter_expression: Optional[str] = None
    expression_parameters: List[str] = field(default_factory=list)

    @classmethod
    def create(
        cls, filter_expression: str, expression_parameters: Optional[Iterable[str]] = None
    ) -> ContentFilterOptions:
        """Build options holding copies of the expression and its parameters."""
        options = cls()
        options._assign(filter_expression, expression_parameters)
        return options

    def _assign(
        self, filter_expression: str, expression_parameters: Optional[Iterable[str]]
    ) -> None:
        if filter_expression is None:
            raise ValueError("filter_expression argument is null")
        parameters = _checked_parameters(expression_parameters)
        if parameters:
            self.expression_parameters = parameters
        self.filter_expression = filter_expression

    def set(
        self, filter_expression: str, expression_parameters: Optional[Iterable[str]] = None
    ) -> None:
        """Clear these options, then fill them with the given expression and parameters."""
        parameters = None if expression_parameters is None else list(expression_parameters)
        self.fini()
        self._assign(filter_expression, parameters)

    def copy_from(self, src: ContentFilterOptions) -> None:
        """Replace these options with copies of the values held by ``src``."""
        if src is None:
            raise ValueError("src argument is null")
        self.set(src.filter_expression, list(src.expression_parameters))

    def fini(self) -> None:
        """Drop the expression and parameters."""
        self.filter_expression = None
        self.expression_parameters = []


def zero_initialized_content_filter_options() -> ContentFilterOptions:
    """Return options with no expression and no parameters."""
    return ContentFilterOptions()