import html
import json
import re
from typing import List, Optional, Union

import pypandoc

from .dialect import (
    CONTAINER_NODE,
    LIST_ITEM_TAG,
    LIST_TAG,
    NODE_ATTR,
    PARAGRAPH_TAG,
    PREFIX_ATTR,
)
from .view_tree import ViewElement, ViewFragment, ViewNode, ViewText


def _render_children(children: List[ViewNode]) -> str:
    return "".join(_render_node(child) for child in children)


def _render_attributes(element: ViewElement) -> str:
    parts: List[str] = []
    for key, value in element.attrs.items():
        if key == PREFIX_ATTR:
            continue
        name = "data-node" if key == NODE_ATTR else key
        parts.append(f'{name}="{html.escape(str(value), quote=True)}"')
    return (" " + " ".join(parts)) if parts else ""


def _render_node(node: ViewNode) -> str:
    if isinstance(node, ViewText):
        return html.escape(node.data)

    if node.node_name == CONTAINER_NODE:
        return _render_children(node.children)

    inner = _render_children(node.children)

    if node.name in (PARAGRAPH_TAG, LIST_TAG, LIST_ITEM_TAG):
        return f"<{node.name}{_render_attributes(node)}>{inner}</{node.name}>"

    return f"<div{_render_attributes(node)}>{inner}</div>"


def view_to_html(view: Union[ViewFragment, ViewElement, None]) -> str:
    """
    Render a view tree the way the editing surface shows it.
    Source tags are kept in `data-node`; the document prefix is dropped.
    """
    if view is None:
        return ""
    if isinstance(view, ViewFragment):
        return _render_children(view.children)
    return _render_node(view)


def _html_to_markdown_via_ast(html_text: str) -> str:
    ast_json = pypandoc.convert_text(
        html_text,
        "json",
        format="html",
        extra_args=["--wrap=none"],
    )
    ast = json.loads(ast_json)

    md = pypandoc.convert_text(
        json.dumps(ast),
        "md",
        format="json",
        extra_args=["--wrap=none"],
    )
    return md.strip()


def _post_process_markdown(md: Optional[str]) -> str:
    """
    Clean pandoc output:
      - drop empty HTML comment placeholders
      - drop fenced div markers (::: {data-node="..."})
      - squeeze runs of blank lines
    """
    md = md or ""
    if not md.strip():
        return ""

    cleaned_lines: List[str] = []
    for line in md.splitlines():
        stripped = line.strip()
        if stripped == "<!-- -->":
            continue
        if re.match(r"^:{3,}", stripped):
            continue
        cleaned_lines.append(line.rstrip())

    md = "\n".join(cleaned_lines)
    md = re.sub(r"\n{3,}", "\n\n", md)
    return md.strip()


def view_to_markdown(view: Union[ViewFragment, ViewElement, None]) -> str:
    """
    Export preview: the editor HTML converted to Markdown with pandoc.
    Not part of the editing surface itself.
    """
    html_text = view_to_html(view)
    if not html_text.strip():
        return ""
    md = _html_to_markdown_via_ast(html_text)
    return _post_process_markdown(md)
