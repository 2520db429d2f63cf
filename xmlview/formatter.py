import re
from typing import List, Tuple

from lxml import etree

# declaration and processing instructions ahead of the root element
_PROLOG_ITEM_RE = re.compile(r"\s*(<\?.*?\?>)", re.DOTALL)


def _split_prolog(xml: str) -> Tuple[List[str], str]:
    items: List[str] = []
    pos = 0
    while True:
        match = _PROLOG_ITEM_RE.match(xml, pos)
        if not match:
            break
        items.append(match.group(1))
        pos = match.end()
    return items, xml[pos:]


def format_xml(xml: str, indent: str = "    ") -> str:
    """
    Pretty-print serialized XML.
    The prolog is replayed verbatim, one item per line; lxml indents the
    body. Literal prefixes such as "a:Num" need no namespace declaration
    because the parser runs in recover mode.
    """
    lines, body = _split_prolog(xml or "")
    body = body.strip()
    if not body:
        return "\n".join(lines)

    parser = etree.XMLParser(recover=True, remove_blank_text=True)
    try:
        root = etree.fromstring(body, parser)
    except etree.XMLSyntaxError:
        root = None

    if root is None:
        lines.append(body)
    else:
        etree.indent(root, space=indent)
        lines.append(etree.tostring(root, encoding="unicode"))

    return "\n".join(lines)
