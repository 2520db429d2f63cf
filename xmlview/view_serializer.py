from typing import Optional, Union
from xml.sax.saxutils import escape

from .dialect import (
    CONTAINER_NODE,
    FALLBACK_DOCUMENT,
    LIST_SUFFIX,
    NODE_ATTR,
    NUMBERING_ATTR,
    NUMBERING_TAG,
    PREFIX_ATTR,
)
from .formatter import format_xml
from .view_tree import ViewElement, ViewFragment, ViewNode, ViewText


def _escape_text(text: str) -> str:
    return escape(text)


def _escape_attr(value: str) -> str:
    return escape(value, {'"': "&quot;"})


def _render_attributes(element: ViewElement) -> str:
    return " ".join(
        f'{key}="{_escape_attr(str(value))}"'
        for key, value in element.attrs.items()
        if key != NODE_ATTR
    )


def _open_tag(node_name: str, attributes: str) -> str:
    if attributes:
        return f"<{node_name} {attributes}>"
    return f"<{node_name}>"


def serialize_view_node(node: Optional[ViewNode]) -> str:
    if isinstance(node, ViewText):
        return _escape_text(node.data)

    if not isinstance(node, ViewElement):
        return ""

    node_name = node.node_name
    if not node_name:
        return ""

    content = "".join(serialize_view_node(child) for child in node.children)

    if node_name == CONTAINER_NODE:
        return (node.attrs.get(PREFIX_ATTR) or "") + content

    attributes = _render_attributes(node)

    if node.is_list_item:
        # numbering always comes from the current position
        numero = (node.index or 0) + 1
        marker = f'<{NUMBERING_TAG} {NUMBERING_ATTR}="{numero}"/>'
        return f"{_open_tag(node_name, attributes)}{marker}{content}</{node_name}>"

    if node_name.endswith(LIST_SUFFIX):
        return content

    return f"{_open_tag(node_name, attributes)}{content}</{node_name}>"


def serialize_view(view: Union[ViewFragment, ViewElement, None]) -> str:
    """
    Serialize the document held by a view tree without formatting.
    Returns an empty string when there is no document to write.
    """
    root = view.get_child(0) if isinstance(view, ViewFragment) else view
    if not isinstance(root, ViewElement):
        return ""
    # a container without a root element holds only the prefix
    if root.node_name == CONTAINER_NODE and not root.children:
        return ""
    return serialize_view_node(root)


def to_data(view: Union[ViewFragment, ViewElement, None]) -> str:
    """Lift a view tree back into pretty-printed XML text."""
    raw = serialize_view(view) or FALLBACK_DOCUMENT
    return format_xml(raw)
