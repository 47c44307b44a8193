"""Flatten parse-tree nodes into plain text."""

from __future__ import annotations

import re
from typing import Optional

from loguru import logger

from .converters import DEFAULT_REGISTRY, ConverterRegistry
from .errors import RecursionLimitExceeded
from .nodes import (
    DEFAULT_MAX_DEPTH,
    Argument,
    Comment,
    Compound,
    Node,
    TemplateCall,
    Text,
    children,
    to_wikitext,
)

# [[target|display]] and [[target]]; non-greedy so adjacent links stay apart
INTERNAL_LINK = re.compile(r"\[\[([^|\]]*?\||)([^|\]]*?)\]\]")


def strip_internal_links(text: str) -> str:
    """Replace internal links by their display text (or target).

    Works on a single text leaf, so a link split by a nested template or a
    comment (``[[Paris|{{prix|1|€}}]]``) is left as it is.
    """
    return INTERNAL_LINK.sub(r"\2", text)


def render_simple(node: Node) -> str:
    """Concatenate the text leaves of ``node``.

    Used for template names, which are not expected to hold links, comments
    or templates.
    """
    if isinstance(node, Text):
        return node.content
    return "".join(render_simple(child) for child in children(node))


class TextRenderer:
    """Render argument sub-trees, delegating nested templates to converters."""

    def __init__(
        self,
        registry: Optional[ConverterRegistry] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.max_depth = max_depth

    def render(self, node: Node, depth: int = 0) -> str:
        """
        Render ``node`` as plain text.

        Args:
            node: Sub-tree to flatten
            depth: Nesting level of ``node`` below the top-level template

        Returns:
            Flattened text; links rewritten, comments dropped and nested
            templates converted or printed back verbatim

        Raises:
            RecursionLimitExceeded: if nesting goes deeper than ``max_depth``
        """
        if depth > self.max_depth:
            raise RecursionLimitExceeded(self.max_depth)

        if isinstance(node, Text):
            return strip_internal_links(node.content)
        elif isinstance(node, Comment):
            return ""
        elif isinstance(node, TemplateCall):
            return self._render_template(node, depth)
        elif isinstance(node, (Compound, Argument)):
            return "".join(self.render(child, depth + 1) for child in children(node))
        raise TypeError(f"Unknown node type: {type(node).__name__}")

    def _render_template(self, node: TemplateCall, depth: int) -> str:
        from .template import TemplateNode

        template = TemplateNode(node, self, _depth=depth + 1)
        rule = self.registry.resolve(template.get_name_lowercase())
        if rule is not None:
            return rule.convert(template)

        logger.debug("Template '{}' was not parsed", template.get_name())
        return to_wikitext(node)
