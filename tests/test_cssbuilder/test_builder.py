"""Tests for SelectorBuilder and the facade functions."""

import pytest

from cssbuilder import (
    BuilderConfig,
    Category,
    Combinator,
    DuplicateError,
    OrderError,
    SelectorBuilder,
    StateError,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id,
    pseudo_class,
    pseudo_element,
)


# ---------------------------------------------------------------------------
# Rendering compound selectors
# ---------------------------------------------------------------------------


class TestRender:
    def test_element_attr_pseudo_class(self):
        selector = element("a").attr('href$=".png"').pseudo_class("focus")
        assert selector.render() == 'a[href$=".png"]:focus'

    def test_id_and_classes(self):
        selector = id("main").class_("container").class_("editable")
        assert selector.render() == "#main.container.editable"

    def test_all_categories(self):
        selector = (
            element("input")
            .id("name")
            .class_("wide")
            .attr("type=text")
            .attr("required")
            .pseudo_class("focus")
            .pseudo_class("hover")
            .pseudo_element("placeholder")
        )
        assert (
            selector.render()
            == "input#name.wide[type=text][required]:focus:hover::placeholder"
        )

    def test_each_facade_entry_point(self):
        assert element("div").render() == "div"
        assert id("nav").render() == "#nav"
        assert class_("btn").render() == ".btn"
        assert attr("disabled").render() == "[disabled]"
        assert pseudo_class("checked").render() == ":checked"
        assert pseudo_element("after").render() == "::after"

    def test_empty_builder_renders_empty_string(self):
        assert SelectorBuilder().render() == ""

    def test_str_delegates_to_render(self):
        assert str(element("li").class_("item")) == "li.item"

    def test_facade_returns_fresh_builders(self):
        first = element("div")
        second = element("span")
        assert first is not second
        assert first.render() == "div"

    def test_fragments_in_order(self):
        builder = element("p").class_("a").class_("b")
        frags = builder.fragments()
        assert [f.category for f in frags] == [Category.ELEMENT, Category.CLASS]
        assert frags[1].values == ("a", "b")


# ---------------------------------------------------------------------------
# Duplicates
# ---------------------------------------------------------------------------


class TestDuplicates:
    def test_element_twice(self):
        with pytest.raises(DuplicateError):
            element("div").element("span")

    def test_id_twice(self):
        with pytest.raises(DuplicateError):
            id("a").id("b")

    def test_pseudo_element_twice(self):
        with pytest.raises(DuplicateError):
            pseudo_element("before").pseudo_element("after")

    def test_repeatable_categories_accept_many(self):
        selector = class_("a").class_("b").attr("x").attr("y")
        assert selector.render() == ".a.b[x][y]"
        assert pseudo_class("a").pseudo_class("b").render() == ":a:b"

    def test_duplicate_message(self):
        with pytest.raises(DuplicateError, match="more then one time"):
            element("div").element("div")

    def test_failed_duplicate_keeps_state(self):
        builder = element("a")
        with pytest.raises(DuplicateError):
            builder.element("b")
        assert builder.render() == "a"

    def test_duplicate_reported_before_order(self):
        with pytest.raises(DuplicateError):
            element("div").class_("x").element("span")


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestOrder:
    def test_id_after_class(self):
        with pytest.raises(OrderError):
            class_("main").id("x")

    def test_element_after_id(self):
        with pytest.raises(OrderError):
            id("main").element("div")

    def test_class_after_attr(self):
        with pytest.raises(OrderError):
            attr("href").class_("x")

    def test_attr_after_pseudo_class(self):
        with pytest.raises(OrderError):
            pseudo_class("hover").attr("href")

    def test_pseudo_class_after_pseudo_element(self):
        with pytest.raises(OrderError):
            pseudo_element("after").pseudo_class("hover")

    def test_order_message(self):
        with pytest.raises(OrderError, match="should be arranged in the following order"):
            pseudo_element("after").element("div")

    def test_order_error_reports_categories(self):
        with pytest.raises(OrderError) as excinfo:
            element("a").class_("x").pseudo_class("hover").id("y")
        assert excinfo.value.category is Category.ID
        assert excinfo.value.conflicting is Category.PSEUDO_CLASS

    def test_pseudo_element_has_no_order_check(self):
        assert element("p").pseudo_element("first-line").render() == "p::first-line"

    def test_failed_call_keeps_state(self):
        builder = element("a").class_("link")
        with pytest.raises(OrderError):
            builder.id("x")
        builder.pseudo_class("visited")
        assert builder.render() == "a.link:visited"


# ---------------------------------------------------------------------------
# Combination
# ---------------------------------------------------------------------------


class TestCombine:
    def test_adjacent(self):
        selector = combine(element("div").id("main"), "+", element("span"))
        assert selector.render() == "div#main + span"

    def test_descendant_space(self):
        selector = combine(element("ul"), " ", element("li"))
        assert selector.render() == "ul   li"

    def test_enum_combinator(self):
        selector = combine(element("ul"), Combinator.CHILD, element("li"))
        assert selector.render() == "ul > li"

    def test_nested_combine(self):
        selector = combine(
            element("div").id("main").class_("container").class_("draggable"),
            "+",
            combine(
                element("table").id("data"),
                "~",
                combine(
                    element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert selector.render() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_multiple_combines_concatenate_without_separator(self):
        selector = (
            combine(element("a"), ">", element("b"))
            .combine(element("c"), "~", element("d"))
        )
        assert selector.render() == "a > bc ~ d"

    def test_operands_are_not_modified(self):
        left = element("div")
        right = class_("x")
        combine(left, "+", right)
        assert left.render() == "div"
        assert right.render() == ".x"
        assert not left.is_combined

    def test_combinator_passed_through_verbatim(self):
        assert combine(element("a"), "||", element("b")).render() == "a || b"

    def test_is_combined(self):
        assert combine(element("a"), "+", element("b")).is_combined
        assert not element("a").is_combined

    def test_object_style_namespace(self):
        builder = css_selector_builder
        selector = builder.combine(builder.element("h1"), "~", builder.class_("lead"))
        assert selector.render() == "h1 ~ .lead"


# ---------------------------------------------------------------------------
# Mixed mode
# ---------------------------------------------------------------------------


class TestMixedMode:
    def test_combine_after_fragments(self):
        with pytest.raises(StateError):
            element("div").combine(element("a"), "+", element("b"))

    def test_fragment_after_combine(self):
        selector = combine(element("a"), "+", element("b"))
        with pytest.raises(StateError):
            selector.class_("x")

    def test_state_error_keeps_state(self):
        selector = combine(element("a"), "+", element("b"))
        with pytest.raises(StateError):
            selector.element("p")
        assert selector.render() == "a + b"


# ---------------------------------------------------------------------------
# Strict combinators
# ---------------------------------------------------------------------------


class TestStrictCombinators:
    def test_rejects_unknown(self):
        builder = SelectorBuilder(BuilderConfig(strict_combinators=True))
        with pytest.raises(ValueError, match="Unknown combinator"):
            builder.combine(element("a"), "||", element("b"))
        assert builder.render() == ""

    def test_accepts_known(self):
        builder = SelectorBuilder(BuilderConfig(strict_combinators=True))
        for combinator in (" ", ">", "~", "+"):
            builder.combine(element("a"), combinator, element("b"))
        assert builder.render() == "a   ba > ba ~ ba + b"


# ---------------------------------------------------------------------------
# Package exports
# ---------------------------------------------------------------------------


class TestExports:
    def test_star_import_does_not_shadow_id(self):
        import cssbuilder

        assert "id" not in cssbuilder.__all__
        namespace: dict = {}
        exec("from cssbuilder import *", namespace)
        assert "id" not in namespace

    def test_id_reachable_by_name(self):
        import cssbuilder
        from cssbuilder import facade

        assert cssbuilder.id is facade.id
        assert cssbuilder.id("main").render() == "#main"
