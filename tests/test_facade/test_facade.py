"""Tests for the stateless facade entry points."""

import pytest

import cssbuilder
from cssbuilder import facade as css
from cssbuilder.builder import SelectorBuilder
from cssbuilder.errors import DuplicateSingletonError, OrderViolationError
from cssbuilder.model.selector import CombinedSelector


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


class TestFactories:
    @pytest.mark.parametrize(
        "factory, value, expected",
        [
            (css.element, "div", "div"),
            (css.id, "main", "#main"),
            (css.class_, "box", ".box"),
            (css.attr, "href", "[href]"),
            (css.pseudo_class, "hover", ":hover"),
            (css.pseudo_element, "before", "::before"),
        ],
    )
    def test_factory_renders_fragment(self, factory, value, expected):
        builder = factory(value)
        assert isinstance(builder, SelectorBuilder)
        assert builder.stringify() == expected

    def test_each_call_returns_a_fresh_builder(self):
        first = css.element("div")
        second = css.element("span")
        assert first is not second
        assert first.stringify() == "div"
        assert second.stringify() == "span"

    def test_examples(self):
        assert (
            css.element("div").id("main").class_("container").class_("draggable").stringify()
            == "div#main.container.draggable"
        )
        assert css.id("main").class_("container").class_("editable").stringify() == (
            "#main.container.editable"
        )
        assert css.element("a").attr('href$=".png"').pseudo_class("focus").stringify() == (
            'a[href$=".png"]:focus'
        )

    def test_duplicate_id(self):
        with pytest.raises(DuplicateSingletonError):
            css.id("x").id("y")

    def test_id_after_class(self):
        with pytest.raises(OrderViolationError):
            css.class_("x").id("y")

    def test_package_reexports(self):
        assert cssbuilder.element("p").class_("lead").stringify() == "p.lead"


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_sibling_combinator(self):
        result = css.combine(css.element("table").id("data"), "~", css.element("tr"))
        assert isinstance(result, CombinedSelector)
        assert result.stringify() == "table#data ~ tr"

    def test_child_combinator(self):
        result = css.combine(css.element("ul"), ">", css.element("li"))
        assert result.stringify() == "ul > li"

    def test_descendant_combinator_is_padded(self):
        result = css.combine(css.element("p"), " ", css.element("a"))
        assert result.stringify() == "p   a"

    def test_combinator_not_validated(self):
        result = css.combine(css.element("a"), "||", css.element("b"))
        assert result.stringify() == "a || b"

    def test_nested_combine(self):
        inner = css.combine(css.element("table").id("data"), "~", css.element("tr"))
        outer = css.combine(inner, "+", css.element("td"))
        assert outer.stringify() == "table#data ~ tr + td"

    def test_right_nested_combine(self):
        inner = css.combine(css.element("b"), "+", css.element("c"))
        outer = css.combine(css.element("a"), ">", inner)
        assert outer.stringify() == "a > b + c"

    def test_deeply_nested_combine(self):
        result = css.combine(
            css.element("div").id("main").class_("container").class_("draggable"),
            "+",
            css.combine(
                css.element("table").id("data"),
                "~",
                css.combine(
                    css.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    css.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert result.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_combine_does_not_touch_inputs(self):
        left = css.element("a")
        right = css.class_("b")
        css.combine(left, ">", right)
        assert left.stringify() == "a"
        assert right.stringify() == ".b"

    def test_results_are_independent(self):
        first = css.combine(css.element("a"), "+", css.element("b"))
        second = css.combine(css.element("c"), "~", css.element("d"))
        assert first.stringify() == "a + b"
        assert second.stringify() == "c ~ d"

    def test_result_is_frozen(self):
        result = css.combine(css.element("a"), "+", css.element("b"))
        with pytest.raises(AttributeError):
            result.text = "changed"

    def test_combined_equality(self):
        assert css.combine(css.element("a"), "+", css.element("b")) == CombinedSelector("a + b")


# ---------------------------------------------------------------------------
# stringify
# ---------------------------------------------------------------------------


class TestStringify:
    def test_stringify_builder(self):
        assert css.stringify(css.element("nav").class_("top")) == "nav.top"

    def test_stringify_combined(self):
        result = css.combine(css.element("a"), ">", css.element("b"))
        assert css.stringify(result) == "a > b"

    def test_stringify_empty_builder(self):
        assert css.stringify(SelectorBuilder()) == ""
