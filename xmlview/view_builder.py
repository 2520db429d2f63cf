from typing import Dict, List, Optional

from .dialect import (
    CONTAINER_NODE,
    CONTAINER_TAG,
    DOCUMENT_PREFIX,
    LIST_ITEM_TAG,
    LIST_SUFFIX,
    LIST_TAG,
    NODE_ATTR,
    NUMBERING_TAG,
    PARAGRAPH_TAG,
    PREFIX_ATTR,
)
from .source_parser import Node, document_root
from .view_tree import ViewElement, ViewFragment, ViewWriter


def _is_blank_text(node: Node) -> bool:
    return node.kind == "text" and not node.text.strip()


def _significant_children(node: Node) -> List[Node]:
    return [
        child
        for child in node.children
        if child.kind in ("element", "text") and not _is_blank_text(child)
    ]


def _view_attributes(node: Node) -> Dict[str, str]:
    attrs = {NODE_ATTR: node.tag or ""}
    for key, value in node.attrs.items():
        if key != NODE_ATTR:
            attrs[key] = value
    return attrs


def find_list_container(
    writer: ViewWriter, parent: ViewElement
) -> Optional[ViewElement]:
    """
    Scan all current children of `parent` for a list container.
    Every list item under the same parent shares it, even when other
    siblings sit between the items.
    """
    for child in writer.get_children(parent):
        if isinstance(child, ViewElement) and child.name == LIST_TAG:
            return child
    return None


def _append_list_item(
    writer: ViewWriter, node: Node, children: List[Node], parent: ViewElement
) -> None:
    li = writer.create_element(LIST_ITEM_TAG, _view_attributes(node))

    ol = find_list_container(writer, parent)
    if ol is None:
        parent_node = writer.get_attribute(parent, NODE_ATTR) or ""
        ol = writer.create_element(LIST_TAG, {NODE_ATTR: parent_node + LIST_SUFFIX})
        writer.append_child(ol, parent)

    writer.append_child(li, ol)
    for child in children:
        _build_node(writer, child, li)


def _build_node(writer: ViewWriter, node: Optional[Node], parent: ViewElement) -> None:
    if node is None or node.tag == NUMBERING_TAG:
        return

    if node.kind == "text":
        text = node.text.strip()
        if text:
            writer.append_child(writer.create_text(text), parent)
        return

    if node.kind != "element":
        return

    children = _significant_children(node)

    # a tag wrapping only text becomes a paragraph
    if len(children) == 1 and children[0].kind == "text":
        p = writer.create_element(PARAGRAPH_TAG, _view_attributes(node))
        writer.append_child(p, parent)
        _build_node(writer, children[0], p)
        return

    if any(child.tag == NUMBERING_TAG for child in children):
        _append_list_item(writer, node, children, parent)
        return

    div = writer.create_element(CONTAINER_TAG, _view_attributes(node))
    writer.append_child(div, parent)
    for child in children:
        _build_node(writer, child, div)


def to_view(
    document: Optional[Node],
    prefix: str = DOCUMENT_PREFIX,
    writer: Optional[ViewWriter] = None,
) -> ViewFragment:
    """
    Lower a parsed source document into a view tree:
    fragment -> container (carrying `prefix`) -> root element.
    The source tree is not modified.
    """
    writer = writer or ViewWriter()
    container = writer.create_element(
        CONTAINER_TAG, {NODE_ATTR: CONTAINER_NODE, PREFIX_ATTR: prefix}
    )
    fragment = writer.create_document_fragment([container])

    _build_node(writer, document_root(document), container)

    return fragment
