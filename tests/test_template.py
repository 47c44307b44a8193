"""Tests for template argument extraction."""

import pytest

from listings.errors import PositionalArgumentIndexError
from listings.nodes import Argument, Comment, Compound, TemplateCall, Text, template_from_wikitext
from listings.template import TemplateNode


def make(wikitext: str) -> TemplateNode:
    return TemplateNode(template_from_wikitext(wikitext))


class TestName:
    """Test template names."""

    def test_name(self):
        """Names are trimmed and available lowercased."""
        node = make("{{ Foo |a=b}}")
        assert node.get_name() == "Foo"
        assert node.get_name_lowercase() == "foo"

    def test_multiline_name(self):
        """Whitespace around a name on its own line is dropped."""
        node = make("{{see\n| name = Louvre\n}}")
        assert node.get_name() == "see"


class TestNamedArguments:
    """Test named argument lookup."""

    def test_lookup_is_case_insensitive(self):
        """Keys match regardless of case."""
        node = make("{{see|Name=Louvre|LAT=48.86}}")
        assert node.get_argument("name") == "Louvre"
        assert node.get_argument("NAME") == "Louvre"
        assert node.has_argument("lat")
        assert node.has_argument("Lat")

    def test_missing_argument(self):
        """Missing keys return None."""
        node = make("{{see|name=Louvre}}")
        assert node.get_argument("url") is None
        assert not node.has_argument("url")

    def test_values_are_trimmed(self):
        """Whitespace around names and values is dropped."""
        node = make("{{see\n| name = Louvre \n| content =  Big museum.\n}}")
        assert node.named_arguments() == {"name": "Louvre", "content": "Big museum."}

    def test_empty_value_is_kept(self):
        """A named argument with an empty value is present."""
        node = make("{{see|url=|name=Louvre}}")
        assert node.has_argument("url")
        assert node.get_argument("url") == ""

    def test_links_in_values(self):
        """Internal links are replaced by their text."""
        node = make("{{see|name=[[Louvre|The Louvre]]|directions=near [[Châtelet]]}}")
        assert node.get_argument("name") == "The Louvre"
        assert node.get_argument("directions") == "near Châtelet"

    def test_comment_only_value(self):
        """A value holding only a comment is empty."""
        node = make("{{see|name=<!-- fill in -->}}")
        assert node.get_argument("name") == ""


class TestPositionalArguments:
    """Test positional argument access."""

    def test_order_and_classification(self):
        """Positional values keep their order; every argument is classified once."""
        node = make("{{x|first|a=1|second|b=2| third }}")
        assert node.get_positional_arguments() == ("first", "second", "third")
        assert len(node.named_arguments()) + len(node.get_positional_arguments()) == 5

    def test_strict_accessor(self):
        """Out-of-range index raises."""
        node = make("{{x|first}}")
        assert node.get_positional_arg(0) == "first"
        with pytest.raises(PositionalArgumentIndexError):
            node.get_positional_arg(1)
        with pytest.raises(IndexError):
            node.get_positional_arg(5)

    def test_default_accessor(self):
        """Default is returned only when out of range."""
        node = make("{{x|first}}")
        assert node.get_positional_arg(0, "default") == node.get_positional_arg(0)
        assert node.get_positional_arg(1, "default") == "default"

    def test_absent_or_empty(self):
        """Empty and missing positions are both reported."""
        node = make("{{x||b}}")
        assert node.is_absent_or_empty_positional_arg(0)
        assert not node.is_absent_or_empty_positional_arg(1)
        assert node.is_absent_or_empty_positional_arg(2)

    def test_empty_name_is_positional(self):
        """An explicitly empty name counts as positional."""
        node = make("{{x|=value}}")
        assert node.get_positional_arguments() == ("value",)
        assert node.named_arguments() == {}


class TestHandBuiltNodes:
    """Test extraction from nodes built without the parser."""

    def test_non_argument_children_are_skipped(self, log_messages):
        """Structural whitespace is skipped silently, other nodes with a diagnostic."""
        node = TemplateCall(
            Text("Foo"),
            (
                Argument(Compound(), Text("a")),
                Text("  \n"),
                Comment("stray"),
                Argument(Text("K"), Compound((Text("v"), Comment("x")))),
            ),
        )
        template = TemplateNode(node)
        assert template.get_positional_arguments() == ("a",)
        assert template.named_arguments() == {"k": "v"}
        assert log_messages == ["Skipping Comment in arguments of 'Foo'"]


class TestPurity:
    """Test that extraction is repeatable."""

    def test_extract_twice(self):
        """Two extractions from one node are equal."""
        node = template_from_wikitext("{{see|name=[[a|b]]|x|price={{prix|3|€}}}}")
        first, second = TemplateNode(node), TemplateNode(node)
        assert first == second
        assert first.to_dict() == {
            "name": "see",
            "arguments": {"name": "b", "price": "3 €"},
            "positional": ["x"],
        }
