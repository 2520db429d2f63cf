from .source_parser import Node, document_root, parse_source_xml
from .view_builder import find_list_container, to_view
from .view_renderer_md import view_to_html, view_to_markdown
from .view_serializer import serialize_view, serialize_view_node, to_data
from .formatter import format_xml
from .view_tree import ViewElement, ViewFragment, ViewText, ViewWriter

__all__ = [
    "Node",
    "document_root",
    "parse_source_xml",
    "find_list_container",
    "to_view",
    "view_to_html",
    "view_to_markdown",
    "serialize_view",
    "serialize_view_node",
    "to_data",
    "format_xml",
    "ViewElement",
    "ViewFragment",
    "ViewText",
    "ViewWriter",
]
