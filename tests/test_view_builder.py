from xmlview.dialect import DOCUMENT_PREFIX
from xmlview.source_parser import parse_source_xml
from xmlview.view_builder import find_list_container, to_view
from xmlview.view_tree import ViewElement, ViewText, ViewWriter


def build(xml: str):
    fragment = to_view(parse_source_xml(xml))
    container = fragment.get_child(0)
    return container


# ─── container ───────────────────────────────────────────────────────────────

def test_container_carries_prefix_and_marker():
    container = build("<root><child>x</child></root>")
    assert container.name == "div"
    assert container.attrs == {"node": "container", "prefix": DOCUMENT_PREFIX}
    assert len(container.children) == 1


def test_custom_prefix():
    fragment = to_view(parse_source_xml("<root/>"), prefix="<?xml version=\"1.0\"?>")
    assert fragment.get_child(0).attrs["prefix"] == '<?xml version="1.0"?>'


def test_simple_element_lowering():
    container = build('<?xml version="1.0"?><root><child attr="v">hello</child></root>')
    root = container.children[0]
    assert isinstance(root, ViewElement)
    assert root.name == "div"
    assert root.attrs == {"node": "root"}

    child = root.children[0]
    assert child.name == "p"
    assert child.attrs == {"node": "child", "attr": "v"}
    assert len(child.children) == 1
    assert isinstance(child.children[0], ViewText)
    assert child.children[0].data == "hello"


def test_source_node_attribute_does_not_override_tag():
    container = build('<root node="other" id="1"><p>x</p></root>')
    root = container.children[0]
    assert root.attrs == {"node": "root", "id": "1"}


# ─── whitespace ──────────────────────────────────────────────────────────────

def test_whitespace_only_text_is_dropped():
    container = build("<root>\n  <p>One</p>\n  \n  <p>Two</p>\n</root>")
    root = container.children[0]
    assert [child.attrs["node"] for child in root.children] == ["p", "p"]
    assert all(isinstance(child, ViewElement) for child in root.children)


def test_text_is_trimmed():
    container = build("<root><p>\n   padded   \n</p></root>")
    p = container.children[0].children[0]
    assert p.children[0].data == "padded"


# ─── paragraph collapsing ────────────────────────────────────────────────────

def test_tag_wrapping_only_text_becomes_paragraph():
    container = build("<root><p>Hello</p></root>")
    p = container.children[0].children[0]
    assert p.name == "p"
    assert len(p.children) == 1
    assert p.children[0].data == "Hello"


def test_root_wrapping_only_text_is_a_paragraph():
    container = build("<note>Just text</note>")
    root = container.children[0]
    assert root.name == "p"
    assert root.attrs == {"node": "note"}


def test_mixed_content_stays_generic():
    container = build("<root><p>Hello <b>world</b></p></root>")
    p = container.children[0].children[0]
    assert p.name == "div"
    assert p.children[0].data == "Hello"
    assert p.children[1].name == "p"
    assert p.children[1].attrs == {"node": "b"}


# ─── list grouping ───────────────────────────────────────────────────────────

LIST_XML = """<root>
  <item><a:Num numero="7"/>First</item>
  <item><a:Num numero="7"/>Second</item>
  <item><a:Num numero="7"/>Third</item>
</root>"""


def test_numbered_siblings_share_one_list_container():
    container = build(LIST_XML)
    root = container.children[0]
    assert len(root.children) == 1

    ol = root.children[0]
    assert ol.name == "ol"
    assert ol.attrs == {"node": "root-ol"}
    assert [li.name for li in ol.children] == ["li", "li", "li"]
    assert [li.attrs["node"] for li in ol.children] == ["item", "item", "item"]
    assert [li.children[0].data for li in ol.children] == ["First", "Second", "Third"]


def test_numbering_marker_is_not_carried():
    container = build(LIST_XML)
    ol = container.children[0].children[0]
    for li in ol.children:
        assert len(li.children) == 1
        assert isinstance(li.children[0], ViewText)


def test_list_items_across_other_siblings_join_the_same_container():
    container = build(
        "<root>"
        "<item><a:Num/>A</item>"
        "<note>between</note>"
        "<item><a:Num/>B</item>"
        "</root>"
    )
    root = container.children[0]
    assert [child.name for child in root.children] == ["ol", "p"]
    ol = root.children[0]
    assert [li.children[0].data for li in ol.children] == ["A", "B"]


def test_list_item_keeps_attributes_and_nested_children():
    container = build(
        '<root><sec level="2"><a:Num numero="1"/><title>T</title><body>B</body></sec></root>'
    )
    li = container.children[0].children[0].children[0]
    assert li.attrs == {"node": "sec", "level": "2"}
    assert [child.attrs["node"] for child in li.children] == ["title", "body"]


def test_nested_lists_get_their_own_container():
    container = build(
        "<root><sec><a:Num/><sub><a:Num/>x</sub><sub><a:Num/>y</sub></sec></root>"
    )
    outer = container.children[0].children[0]
    li = outer.children[0]
    inner = li.children[0]
    assert inner.name == "ol"
    assert inner.attrs == {"node": "sec-ol"}
    assert len(inner.children) == 2


def test_find_list_container_scans_all_children():
    writer = ViewWriter()
    parent = writer.create_element("div", {"node": "root"})
    writer.append_child(writer.create_element("p", {"node": "a"}), parent)
    ol = writer.create_element("ol", {"node": "root-ol"})
    writer.append_child(ol, parent)
    writer.append_child(writer.create_element("p", {"node": "b"}), parent)
    assert find_list_container(writer, parent) is ol


# ─── malformed input ─────────────────────────────────────────────────────────

def test_malformed_input_gives_empty_container():
    for text in ("", "not xml at all", "<root><open></root>"):
        container = build(text)
        assert container.attrs["node"] == "container"
        assert container.children == []


def test_to_view_of_none():
    fragment = to_view(None)
    assert fragment.get_child(0).children == []


def test_source_tree_is_not_modified():
    document = parse_source_xml(LIST_XML)
    before = repr(document)
    to_view(document)
    assert repr(document) == before
