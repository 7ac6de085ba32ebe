"""Tests for the bs4 accessor helpers."""

import pytest
from bs4 import BeautifulSoup

from fluent_dom.errors import UnsupportedSubjectError
from fluent_dom.markup.dom import (
    attribute_value,
    class_list,
    first_child,
    local_name,
    parse_element,
    to_markup,
)


class TestParseElement:
    def test_returns_first_top_level_element(self):
        element = parse_element("text <em>one</em><strong>two</strong>")

        assert element.name == "em"

    def test_keeps_multi_valued_attributes_raw(self):
        element = parse_element('<p class="a  b" rel="x y">t</p>')

        assert element["class"] == "a  b"
        assert element["rel"] == "x y"

    def test_no_element(self):
        with pytest.raises(UnsupportedSubjectError, match="No element found"):
            parse_element("only text")


def test_attribute_value():
    element = parse_element('<input type="text" disabled>')

    assert attribute_value(element, "type") == "text"
    assert attribute_value(element, "disabled") == ""
    assert attribute_value(element, "name") is None


def test_attribute_value_joins_split_attributes():
    element = BeautifulSoup('<a class="x y" rel="noopener">a</a>', "html.parser").a

    assert attribute_value(element, "class") == "x y"
    assert attribute_value(element, "rel") == "noopener"


def test_class_list():
    assert class_list(parse_element('<p class=" a  b ">t</p>')) == ["a", "b"]
    assert class_list(BeautifulSoup('<p class="a b">t</p>', "html.parser").p) == ["a", "b"]
    assert class_list(parse_element("<p>t</p>")) == []


def test_local_name():
    assert local_name(parse_element("<Section></Section>")) == "section"


def test_first_child_includes_text():
    element = parse_element("<div>\n  <p>x</p></div>")

    assert first_child(element) == "\n  "
    assert first_child(parse_element("<div></div>")) is None


class TestToMarkup:
    def test_element(self):
        assert to_markup(parse_element('<a href="/">x</a>')) == '<a href="/">x</a>'

    def test_text_is_escaped(self):
        assert to_markup(parse_element("<p>a &amp; b</p>").contents[0]) == "a &amp; b"

    def test_comment(self):
        assert to_markup(parse_element("<p><!--note--></p>").contents[0]) == "<!--note-->"
