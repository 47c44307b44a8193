"""Find listing templates in a Wikivoyage page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import wikitextparser as wtp
from loguru import logger

from .core.config import Config
from .nodes import build_template
from .render import TextRenderer
from .template import TemplateNode


@dataclass
class ParsedPage:
    """Listings extracted from one page."""

    listings: List[TemplateNode] = field(default_factory=list)
    skipped: int = 0


def parse_page(
    wikitext: str,
    config: Optional[Config] = None,
    renderer: Optional[TextRenderer] = None,
) -> ParsedPage:
    """Extract every listing template of a page, in document order.

    A listing nested deeper than ``config.max_depth``, or deeper than the
    interpreter's recursion limit, is logged and skipped so that one pathological listing does not stop the rest of the page.
    Listings nested inside another listing are part of that listing's
    arguments and are not reported separately.
    """
    config = config or Config()
    renderer = renderer or TextRenderer(max_depth=config.max_depth)
    wanted = set(config.listing_templates)

    page = ParsedPage()
    listing_end = 0
    for template in wtp.parse(wikitext).templates:
        start, end = template.span
        if start < listing_end:
            continue
        if template.name.strip().lower() not in wanted:
            continue
        listing_end = end

        try:
            node = build_template(template, config.max_depth)
            page.listings.append(TemplateNode(node, renderer))
        # RecursionLimitExceeded, or the interpreter's own limit when
        # max_depth is set above it
        except RecursionError as e:
            logger.warning(
                "Skipping listing '{}' at offset {}: {}", template.name.strip(), start, e
            )
            page.skipped += 1

    return page


def extract_listings(
    wikitext: str,
    config: Optional[Config] = None,
    renderer: Optional[TextRenderer] = None,
) -> List[TemplateNode]:
    """Return the listing templates of a page."""
    return parse_page(wikitext, config, renderer).listings
