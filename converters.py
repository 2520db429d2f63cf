from xmlview import parse_source_xml, to_data, to_view, view_to_html, view_to_markdown
from xmlview.dialect import DOCUMENT_PREFIX
from xmlview.view_tree import ViewFragment, ViewWriter


def xml_to_view(
    xml: str, writer: ViewWriter | None = None, prefix: str = DOCUMENT_PREFIX
) -> ViewFragment:
    """
    Load hook: raw XML text -> view tree for the editing surface.
    """
    return to_view(parse_source_xml(xml), prefix=prefix, writer=writer)


def view_to_xml(view: ViewFragment) -> str:
    """
    Save hook: view tree -> pretty-printed XML text.
    """
    return to_data(view)


def normalize_xml(xml: str) -> str:
    """
    Run a document through a load and a save, as the editor does
    when nothing is changed in between.
    """
    return view_to_xml(xml_to_view(xml))


def xml_to_html(xml: str) -> str:
    return view_to_html(xml_to_view(xml))


def xml_to_markdown(xml: str) -> str:
    return view_to_markdown(xml_to_view(xml))
