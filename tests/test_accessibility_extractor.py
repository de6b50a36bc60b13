"""Tests for the document-level extractor."""

from accname.browser.accessibility import AccessibilityExtractor
from accname.core.roles import Role

PAGE = """
<form>
  <button>Search</button>
  <a href="/">Home</a>
  <a href="/icon"><img src="icon.png"></a>
  <label for="q">Query</label>
  <input id="q" type="search" aria-describedby="hint">
  <p id="hint">Enter search terms</p>
  <button style="display:none">Hidden</button>
  <div aria-hidden="true"><a href="/skip">Skip</a></div>
</form>
"""


def _extractor(make_tree, settings, html=PAGE):
    return AccessibilityExtractor(make_tree(html), settings=settings)


class TestAccessibilityExtractor:
    def test_labeled_dom(self, make_tree, settings):
        listing = _extractor(make_tree, settings).get_labeled_dom()
        assert listing.splitlines() == [
            '[0] button: "Search"',
            '[1] link: "Home"',
            "[2] link (no name)",
            '[3] textbox: "Query" - Enter search terms',
        ]

    def test_hidden_elements_included_on_request(self, make_tree, settings):
        settings.include_hidden = True
        assert _extractor(make_tree, settings).get_element_count() == 6

    def test_unnamed_elements(self, make_tree, settings):
        unnamed = _extractor(make_tree, settings).get_unnamed_elements()
        assert len(unnamed) == 1
        assert unnamed[0].role is Role.LINK

    def test_roles_filter(self, make_tree, settings):
        links = _extractor(make_tree, settings).get_elements(roles=[Role.LINK], title="LINKS")
        assert [info.name.text if info.name else None for info in links] == ["Home", None]
        assert all(info.title == "LINKS" for info in links)

    def test_headings_carry_level(self, make_tree, settings):
        extractor = _extractor(make_tree, settings, "<h1>Title</h1><div><h3>Part</h3></div>")
        headings = extractor.get_elements(roles=[Role.HEADING])
        assert [(info.name.text, info.props) for info in headings] == [
            ("Title", "level 1"),
            ("Part", "level 3"),
        ]

    def test_tag_selection(self, make_tree, settings):
        extractor = _extractor(make_tree, settings, '<p title="Intro">x</p><span>y</span>')
        found = extractor.get_elements(roles=[], tags=["p"])
        assert len(found) == 1
        assert found[0].role is Role.NONE
        assert found[0].name.text == "Intro"

    def test_empty_document(self, make_tree, settings):
        extractor = _extractor(make_tree, settings, "")
        assert extractor.get_elements() == []
        assert extractor.get_labeled_dom() == ""

    def test_deeply_nested_document(self, make_tree, settings):
        html = "<div>" * 1200 + "<button>Go</button>" + "</div>" * 1200
        found = _extractor(make_tree, settings, html).get_elements()
        assert [(info.role, info.name.text) for info in found] == [(Role.BUTTON, "Go")]
