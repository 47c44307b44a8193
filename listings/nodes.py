"""Parse-tree nodes for template extraction.

``wikitextparser`` exposes templates, comments and arguments as spans over
the page string.  The extractor needs a tree instead, so this module turns a
``wikitextparser`` template into a small set of node types:

* :class:`Text` - literal markup with no template or comment in it
* :class:`Comment` - an HTML comment
* :class:`Argument` - one ``name=value`` (or positional ``value``) pair
* :class:`TemplateCall` - a template invocation and its argument list
* :class:`Compound` - any other sequence of nodes, in document order
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

import wikitextparser as wtp

from .errors import RecursionLimitExceeded

DEFAULT_MAX_DEPTH = 64


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class Comment:
    content: str


@dataclass(frozen=True)
class Compound:
    children: Tuple["Node", ...] = ()


@dataclass(frozen=True)
class Argument:
    """A template argument; positional arguments have an empty name."""

    name: "Node"
    value: "Node"


@dataclass(frozen=True)
class TemplateCall:
    """A template invocation.

    ``source`` holds the original markup of the whole call and is what
    :func:`to_wikitext` prints back.  Calls built by hand may leave it empty,
    in which case the markup is rebuilt from the name and arguments.
    """

    name: "Node"
    args: Tuple["Node", ...] = ()
    source: str = ""


Node = Union[Text, Comment, Compound, Argument, TemplateCall]


def children(node: Node) -> Iterator[Node]:
    """Iterate over the direct children of ``node``."""
    if isinstance(node, Compound):
        yield from node.children
    elif isinstance(node, Argument):
        yield node.name
        yield node.value
    elif isinstance(node, TemplateCall):
        yield node.name
        yield from node.args


def to_wikitext(node: Node) -> str:
    """Reproduce the markup of ``node`` verbatim."""
    if isinstance(node, Text):
        return node.content
    if isinstance(node, Comment):
        return f"<!--{node.content}-->"
    if isinstance(node, Argument):
        name = to_wikitext(node.name)
        if name:
            return f"|{name}={to_wikitext(node.value)}"
        return f"|{to_wikitext(node.value)}"
    if isinstance(node, TemplateCall):
        if node.source:
            return node.source
        args = "".join(to_wikitext(arg) for arg in node.args)
        return f"{{{{{to_wikitext(node.name)}{args}}}}}"
    if isinstance(node, Compound):
        return "".join(to_wikitext(child) for child in node.children)
    raise TypeError(f"Unknown node type: {type(node).__name__}")


def parse_fragment(
    text: str, max_depth: int = DEFAULT_MAX_DEPTH, _depth: int = 0
) -> Compound:
    """Parse a wikitext fragment into a :class:`Compound`.

    Only top-level templates and comments become nodes of their own; parser
    functions and template parameters are kept as literal text, together
    with anything nested inside them.
    """
    if _depth > max_depth:
        raise RecursionLimitExceeded(max_depth)
    if not text:
        return Compound()

    parsed = wtp.parse(text)
    offset = parsed.span[0]

    objects = []
    for obj in parsed.templates:
        objects.append(obj)
    for obj in parsed.comments:
        objects.append(obj)
    for obj in parsed.parser_functions:
        objects.append(obj)
    for obj in parsed.parameters:
        objects.append(obj)
    # Outer objects first when two start at the same position
    objects.sort(key=lambda o: (o.span[0], -o.span[1]))

    nodes: List[Node] = []
    position = 0
    for obj in objects:
        start, end = obj.span[0] - offset, obj.span[1] - offset
        if start < position:
            continue
        if start > position:
            _append_text(nodes, text[position:start])
        if isinstance(obj, wtp.Template):
            nodes.append(build_template(obj, max_depth, _depth + 1))
        elif isinstance(obj, wtp.Comment):
            nodes.append(Comment(obj.contents))
        else:
            _append_text(nodes, obj.string)
        position = end
    if position < len(text):
        _append_text(nodes, text[position:])

    return Compound(tuple(nodes))


def build_template(
    template: wtp.Template, max_depth: int = DEFAULT_MAX_DEPTH, _depth: int = 0
) -> TemplateCall:
    """Convert a ``wikitextparser`` template into a :class:`TemplateCall`."""
    if _depth > max_depth:
        raise RecursionLimitExceeded(max_depth)

    args = []
    for arg in template.arguments:
        # wikitextparser numbers positional arguments; in the markup they
        # have no name at all
        if arg.positional:
            name = Compound()
        else:
            name = parse_fragment(arg.name, max_depth, _depth + 1)
        args.append(Argument(name, parse_fragment(arg.value, max_depth, _depth + 1)))

    return TemplateCall(
        name=parse_fragment(template.name, max_depth, _depth + 1),
        args=tuple(args),
        source=template.string,
    )


def template_from_wikitext(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> TemplateCall:
    """Build the first template call found in ``text``."""
    templates = wtp.parse(text).templates
    if not templates:
        raise ValueError(f"No template found in {text!r}")
    return build_template(templates[0], max_depth)


def _append_text(nodes: List[Node], content: str) -> None:
    if nodes and isinstance(nodes[-1], Text):
        nodes[-1] = Text(nodes[-1].content + content)
    else:
        nodes.append(Text(content))
