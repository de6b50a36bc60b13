"""Tests for the content aggregator and embedded control values."""

from accname.core.contents import (
    TraversalBudget,
    could_have_alt_text,
    get_contents_of_child_nodes,
    get_element_contents,
    get_node_contents,
)
from accname.core.embedded import get_embedded_control_value, is_embedded_control
from accname.dom.soup_adapter import tree_from_html


def _contents(html, element_id="t", **kwargs):
    tree = tree_from_html(html)
    return get_element_contents(tree, tree.soup.find(id=element_id), **kwargs)


class TestElementContents:
    def test_text_is_joined_and_normalized(self):
        assert _contents('<div id="t">Hello <b>big</b>   world</div>') == "Hello big world"

    def test_empty_children_are_skipped(self):
        assert _contents('<div id="t"><span></span> a <i> </i> b </div>') == "a b"

    def test_comments_contribute_nothing(self):
        assert _contents('<div id="t">a<!-- hidden note -->b</div>') == "a b"

    def test_alt_text_replaces_children(self):
        assert _contents('<a id="t" href="#">Go <img alt=" home "></a>') == "Go home"

    def test_image_input_uses_alt(self):
        assert _contents('<div id="t"><input type="image" alt="Send" value="ignored"></div>') == "Send"

    def test_img_without_alt_contributes_nothing(self):
        assert _contents('<div id="t">Logo <img src="x.png"></div>') == "Logo"

    def test_no_children(self):
        assert _contents('<div id="t"></div>') == ""


class TestEmbeddedControls:
    def test_textbox_value(self):
        html = '<label id="t">Size <input type="text" value=" 10 "> px</label>'
        assert _contents(html) == "Size 10 px"

    def test_excluded_control_contributes_nothing(self):
        tree = tree_from_html('<label id="t">Size <input id="i" type="text" value="10"> px</label>')
        label = tree.soup.find(id="t")
        control = tree.soup.find(id="i")
        assert get_element_contents(tree, label, excluded=control) == "Size px"

    def test_live_value_is_read_from_the_adapter(self):
        tree = tree_from_html('<div id="t">Qty <input id="i" type="number" value="1"></div>')
        tree.set_value(tree.soup.find(id="i"), "5")
        assert get_element_contents(tree, tree.soup.find(id="t")) == "Qty 5"

    def test_textarea_value(self):
        assert _contents('<div id="t"><textarea>some  notes</textarea></div>') == "some notes"

    def test_combobox_value(self):
        assert _contents('<div id="t"><input type="search" list="l" value="cats"></div>') == "cats"

    def test_listbox_joins_selected_values(self):
        html = (
            '<div id="t"><select multiple>'
            '<option value="a" selected>A</option>'
            '<option value="b">B</option>'
            '<option value="c" selected>C</option>'
            '</select></div>'
        )
        assert _contents(html) == "a c"

    def test_slider_prefers_valuetext(self):
        html = '<div id="t"><input type="range" aria-valuetext="medium" aria-valuenow="5" value="5"></div>'
        assert _contents(html) == "medium"

    def test_spinbutton_valuenow_then_value(self):
        assert _contents('<div id="t"><input type="number" aria-valuenow="3" value="7"></div>') == "3"
        assert _contents('<div id="t"><input type="number" value="7"></div>') == "7"

    def test_explicit_role_on_non_form_element_has_no_value(self):
        tree = tree_from_html('<div id="t" role="textbox">typed</div>')
        node = tree.soup.find(id="t")
        assert is_embedded_control(tree, node) is True
        assert get_embedded_control_value(tree, node) == ""

    def test_checkbox_is_not_embedded(self):
        tree = tree_from_html('<input id="t" type="checkbox" value="on">')
        assert is_embedded_control(tree, tree.soup.find(id="t")) is False


class TestGeneratedContent:
    def test_before_and_after_wrap_contents(self):
        tree = tree_from_html('<div id="t"><span id="s">item</span></div>')
        tree.set_pseudo_content(tree.soup.find(id="s"), before="[", after="]")
        assert get_element_contents(tree, tree.soup.find(id="t")) == "[item]"

    def test_none_is_ignored(self):
        tree = tree_from_html('<div id="t">x</div>')
        node = tree.soup.find(id="t")
        tree.set_pseudo_content(node, before="none", after="none")
        assert get_element_contents(tree, node) == "x"

    def test_generated_content_on_alt_carrier(self):
        tree = tree_from_html('<div id="t"><img id="i" alt="star"></div>')
        tree.set_pseudo_content(tree.soup.find(id="i"), after="*")
        assert get_element_contents(tree, tree.soup.find(id="t")) == "star*"

    def test_outer_element_generated_content(self):
        tree = tree_from_html('<p id="t">Note</p>')
        node = tree.soup.find(id="t")
        tree.set_pseudo_content(node, before="Tip: ")
        assert get_element_contents(tree, node) == "Tip: Note"


class TestHelpers:
    def test_could_have_alt_text(self):
        tree = tree_from_html('<img id="a"><area id="b"><input id="c" type="image"><input id="d">')
        assert could_have_alt_text(tree, tree.soup.find(id="a"))
        assert could_have_alt_text(tree, tree.soup.find(id="b"))
        assert could_have_alt_text(tree, tree.soup.find(id="c"))
        assert not could_have_alt_text(tree, tree.soup.find(id="d"))

    def test_node_contents_of_text_node(self):
        tree = tree_from_html("<p>  spaced   out </p>")
        assert get_node_contents(tree, tree.soup.p.contents[0]) == "spaced out"

    def test_contents_of_child_nodes_with_predicate(self):
        tree = tree_from_html('<div id="t">a <b>bold</b> <i>skip</i> z</div>')
        node = tree.soup.find(id="t")
        text = get_contents_of_child_nodes(tree, node, lambda child: tree.tag_name(child) != "i")
        assert text == "a bold z"


class TestTraversalBudget:
    def test_deep_tree_is_truncated(self):
        html = '<div id="t">' + "<div>" * 10 + "deep" + "</div>" * 10 + "</div>"
        tree = tree_from_html(html)
        budget = TraversalBudget(max_depth=4)
        assert get_element_contents(tree, tree.soup.find(id="t"), budget=budget) == ""
        assert budget.truncated is True
        assert budget.depth == 0

    def test_shallow_tree_is_not_truncated(self):
        tree = tree_from_html('<div id="t"><span>ok</span></div>')
        budget = TraversalBudget(max_depth=4)
        assert get_element_contents(tree, tree.soup.find(id="t"), budget=budget) == "ok"
        assert budget.truncated is False

    def test_follow_rejects_node_on_active_chain(self):
        budget = TraversalBudget()
        node = object()
        with budget.follow(node) as first:
            assert first is True
            with budget.follow(node) as second:
                assert second is False
        assert budget.references == []

    def test_follow_respects_reference_depth(self):
        budget = TraversalBudget(max_reference_depth=1)
        with budget.follow(object()) as first:
            with budget.follow(object()) as second:
                assert first is True
                assert second is False
        assert budget.truncated is True

    def test_from_settings(self, settings):
        settings.max_tree_depth = 12
        settings.max_reference_depth = 3
        budget = TraversalBudget.from_settings(settings)
        assert budget.max_depth == 12
        assert budget.max_reference_depth == 3
