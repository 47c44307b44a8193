"""Converters for templates nested inside listing arguments.

A listing value sometimes embeds another template, e.g.
``{{see|price={{prix|12|€}}}}``.  Instead of keeping the raw markup, a
converter turns such a nested call into the text a reader would see.  The
renderer asks the registry for a converter by template name; the first
matching rule wins and unmatched templates are printed back verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, Optional, Tuple

if TYPE_CHECKING:
    from .template import TemplateNode


@dataclass(frozen=True)
class ConverterRule:
    """Render one nested template shape as a string."""

    template_name: str
    convert: Callable[["TemplateNode"], str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "template_name", self.template_name.strip().lower())

    def matches(self, name: str) -> bool:
        return self.template_name == name.lower()


class ConverterRegistry:
    """Ordered, immutable list of converter rules."""

    def __init__(self, rules: Iterable[ConverterRule] = ()):
        self._rules: Tuple[ConverterRule, ...] = tuple(rules)

    def resolve(self, name: str) -> Optional[ConverterRule]:
        """Return the first rule registered for ``name``, if any."""
        for rule in self._rules:
            if rule.matches(name):
                return rule
        return None

    def extend(self, *rules: ConverterRule) -> "ConverterRegistry":
        """Return a new registry with ``rules`` appended after the current ones."""
        return ConverterRegistry(self._rules + rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)


def _join(*parts: str) -> str:
    return " ".join(part for part in parts if part)


def convert_prix(template: "TemplateNode") -> str:
    """``{{prix|12|€}}`` -> ``12 €`` (French Wikivoyage)."""
    amount = template.get_argument("montant") or template.get_positional_arg(0, "")
    currency = template.get_argument("devise") or template.get_positional_arg(1, "")
    return _join(amount, currency)


def convert_price(template: "TemplateNode") -> str:
    """``{{price|amount=5|currency=EUR}}`` -> ``5 EUR``."""
    amount = template.get_argument("amount") or template.get_positional_arg(0, "")
    currency = template.get_argument("currency") or template.get_positional_arg(1, "")
    return _join(amount, currency)


def convert_horaire(template: "TemplateNode") -> str:
    """``{{horaire|lu-ve|9h-18h|sa|10h-12h}}`` -> ``lu-ve 9h-18h, sa 10h-12h``.

    Positional arguments come in (days, hours) pairs; an odd trailing
    argument is kept on its own and empty pairs are dropped.
    """
    args = template.get_positional_arguments()
    ranges = []
    for i in range(0, len(args), 2):
        text = _join(*args[i:i + 2])
        if text:
            ranges.append(text)
    return ", ".join(ranges)


DEFAULT_RULES = (
    ConverterRule("prix", convert_prix),
    ConverterRule("horaire", convert_horaire),
    ConverterRule("price", convert_price),
)

DEFAULT_REGISTRY = ConverterRegistry(DEFAULT_RULES)
