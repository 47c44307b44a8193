"""Structured access to the arguments of a template call."""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from loguru import logger

from .errors import PositionalArgumentIndexError
from .nodes import Argument, TemplateCall, Text
from .render import TextRenderer, render_simple

_MISSING = object()


class TemplateNode:
    """Name, named arguments and positional arguments of a template call.

    All rendering happens in the constructor; the object never changes
    afterwards and keeps no reference to the parse tree.  Named arguments are
    looked up case-insensitively.

    >>> from listings.nodes import template_from_wikitext
    >>> node = TemplateNode(template_from_wikitext("{{See|Name=[[Louvre]]|x}}"))
    >>> node.get_name_lowercase(), node.get_argument("name"), node.get_positional_arg(0)
    ('see', 'Louvre', 'x')
    """

    def __init__(
        self,
        node: TemplateCall,
        renderer: Optional[TextRenderer] = None,
        *,
        _depth: int = 0,
    ):
        renderer = renderer if renderer is not None else TextRenderer()

        self._name = render_simple(node.name).strip()

        named: Dict[str, str] = {}
        positional = []
        for child in node.args:
            if not isinstance(child, Argument):
                if not (isinstance(child, Text) and not child.content.strip()):
                    logger.debug(
                        "Skipping {} in arguments of '{}'", type(child).__name__, self._name
                    )
                continue

            name = renderer.render(child.name, _depth).strip()
            value = renderer.render(child.value, _depth).strip()
            if name:
                named[name] = value
            else:
                positional.append(value)

        self._named_arguments = {key.lower(): value for key, value in named.items()}
        self._positional_arguments: Tuple[str, ...] = tuple(positional)

    def get_name(self) -> str:
        return self._name

    def get_name_lowercase(self) -> str:
        return self._name.lower()

    def get_argument(self, name: str) -> Optional[str]:
        """Value of named argument ``name``, or ``None`` when absent."""
        return self._named_arguments.get(name.lower())

    def has_argument(self, name: str) -> bool:
        return name.lower() in self._named_arguments

    def named_arguments(self) -> Dict[str, str]:
        """Copy of the named arguments, keyed by lowercase name."""
        return dict(self._named_arguments)

    def get_positional_arguments(self) -> Tuple[str, ...]:
        return self._positional_arguments

    def get_positional_arg(self, index: int, default: Any = _MISSING) -> Any:
        """
        Positional argument at ``index``.

        Args:
            index: Zero-based position among positional arguments
            default: Returned instead of raising when ``index`` is out of range

        Raises:
            PositionalArgumentIndexError: if ``index`` is out of range and no
                default was given
        """
        if 0 <= index < len(self._positional_arguments):
            return self._positional_arguments[index]
        if default is _MISSING:
            raise PositionalArgumentIndexError(index, len(self._positional_arguments))
        return default

    def is_absent_or_empty_positional_arg(self, index: int) -> bool:
        return self.get_positional_arg(index, "") == ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self._name,
            "arguments": dict(self._named_arguments),
            "positional": list(self._positional_arguments),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TemplateNode):
            return NotImplemented
        return (
            self._name == other._name
            and self._named_arguments == other._named_arguments
            and self._positional_arguments == other._positional_arguments
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"TemplateNode(name={self._name!r}, arguments={self._named_arguments!r}, "
            f"positional={list(self._positional_arguments)!r})"
        )
