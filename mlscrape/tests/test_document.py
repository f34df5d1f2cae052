"""Tests for the Document query wrapper."""

from mlscrape.document import Document


class TestFirstMatchQueries:
    """Tests for text_of_first / attribute_of_first / html_of_first."""

    def test_text_of_first_returns_trimmed_text_of_first_match(self):
        doc = Document.from_html("<p class='a'>  first  </p><p class='a'>second</p>")

        assert doc.text_of_first("p.a") == "first"

    def test_text_of_first_absent_is_none(self):
        doc = Document.from_html("<p>text</p>")

        assert doc.text_of_first("h1") is None

    def test_text_of_first_empty_element_is_empty_string(self):
        """An element that exists but has no text is "", not None."""
        doc = Document.from_html("<h1 class='title'>   </h1>")

        assert doc.text_of_first("h1.title") == ""

    def test_attribute_of_first(self):
        doc = Document.from_html('<input name="item_id" value="MLA123"><input name="item_id" value="MLA999">')

        assert doc.attribute_of_first('input[name="item_id"]', "value") == "MLA123"

    def test_attribute_of_first_missing_attribute_is_none(self):
        doc = Document.from_html('<input name="item_id">')

        assert doc.attribute_of_first('input[name="item_id"]', "value") is None

    def test_attribute_of_first_empty_attribute_is_empty_string(self):
        doc = Document.from_html('<input name="item_id" value="">')

        assert doc.attribute_of_first('input[name="item_id"]', "value") == ""

    def test_attribute_of_first_missing_node_is_none(self):
        doc = Document.from_html("<div></div>")

        assert doc.attribute_of_first("input", "value") is None

    def test_multi_valued_attribute_is_joined(self):
        doc = Document.from_html('<img class="one two">')

        assert doc.attribute_of_first("img", "class") == "one two"

    def test_html_of_first_returns_inner_markup(self):
        doc = Document.from_html('<div class="d"><b>Bold</b> text</div>')

        assert doc.html_of_first("div.d") == "<b>Bold</b> text"

    def test_html_of_first_absent_is_none(self):
        doc = Document.from_html("<div></div>")

        assert doc.html_of_first("section") is None


class TestScopedQueries:
    """Tests for all_matching, children and first_string."""

    def test_all_matching_preserves_document_order(self):
        doc = Document.from_html("<ul><li>a</li><li>b</li><li>c</li></ul>")

        assert [li.text() for li in doc.all_matching("li")] == ["a", "b", "c"]

    def test_all_matching_no_match_is_empty_list(self):
        doc = Document.from_html("<ul></ul>")

        assert doc.all_matching("li") == []

    def test_sub_document_queries_are_scoped(self):
        """Queries on a sub-document only see that node's subtree."""
        doc = Document.from_html(
            '<div class="p"><a title="x"></a></div>'
            '<div class="p"><a title="y"></a><a title="z"></a></div>'
        )

        pickers = doc.all_matching("div.p")

        assert [a.attribute("title") for a in pickers[0].all_matching("a")] == ["x"]
        assert [a.attribute("title") for a in pickers[1].all_matching("a")] == ["y", "z"]

    def test_children_skips_text_nodes(self):
        doc = Document.from_html("<table><tbody>\n <tr><td>1</td></tr>\n <tr><td>2</td></tr>\n</tbody></table>")

        body = doc.all_matching("tbody")[0]

        assert [row.text() for row in body.children()] == ["1", "2"]

    def test_first_string_skips_nested_value(self):
        doc = Document.from_html("<p class='l'>Color: <span>Rojo</span></p>")

        assert doc.first_string("p.l") == "Color:"

    def test_first_string_on_self(self):
        doc = Document.from_html("<table><tr><th> Marca </th><td><span>Apple</span></td></tr></table>")

        row = doc.all_matching("tr")[0]

        assert row.first_string() == "Marca"

    def test_first_string_absent_or_blank_is_none(self):
        doc = Document.from_html("<p class='blank'>   </p>")

        assert doc.first_string("p.missing") is None
        assert doc.first_string("p.blank") is None

    def test_queries_do_not_modify_tree(self):
        html = '<div class="d"><b>Bold</b> text</div>'
        doc = Document.from_html(html)
        before = str(doc.node)

        doc.text_of_first("div.d")
        doc.html_of_first("div.d")
        doc.all_matching("b")
        doc.first_string("div.d")

        assert str(doc.node) == before
