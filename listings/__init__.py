"""listings: Extract structured data from Wikivoyage listing templates."""

from loguru import logger

from .converters import DEFAULT_REGISTRY, ConverterRegistry, ConverterRule
from .core.config import Config
from .errors import (
    ConfigError,
    ListingsError,
    PositionalArgumentIndexError,
    RecursionLimitExceeded,
)
from .nodes import (
    Argument,
    Comment,
    Compound,
    TemplateCall,
    Text,
    build_template,
    parse_fragment,
    template_from_wikitext,
    to_wikitext,
)
from .parse import ParsedPage, extract_listings, parse_page
from .render import TextRenderer, render_simple
from .template import TemplateNode

# Library code stays quiet unless the application enables it
logger.disable("listings")

__all__ = [
    "Argument",
    "Comment",
    "Compound",
    "TemplateCall",
    "Text",
    "build_template",
    "parse_fragment",
    "template_from_wikitext",
    "to_wikitext",
    "TextRenderer",
    "render_simple",
    "TemplateNode",
    "ConverterRule",
    "ConverterRegistry",
    "DEFAULT_REGISTRY",
    "Config",
    "ParsedPage",
    "extract_listings",
    "parse_page",
    "ListingsError",
    "ConfigError",
    "PositionalArgumentIndexError",
    "RecursionLimitExceeded",
]

__version__ = "0.1.0"
