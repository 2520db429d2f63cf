from dataclasses import dataclass, field
from typing import Dict, List, Optional
from xml.parsers import expat


@dataclass
class Node:
    """
    Ordered node of the parsed source XML.
    `kind` is one of "document", "element", "text" or "pi".
    Tag names are kept literally, prefixes included (e.g. "a:Num").
    """

    kind: str
    tag: Optional[str] = None
    attrs: Dict[str, str] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)
    text: str = ""
    error: str = ""


class _TreeBuilder:
    def __init__(self) -> None:
        self.document = Node(kind="document")
        self._stack: List[Node] = [self.document]

    def start(self, tag: str, attrs: Dict[str, str]) -> None:
        node = Node(kind="element", tag=tag, attrs=dict(attrs))
        self._stack[-1].children.append(node)
        self._stack.append(node)

    def end(self, tag: str) -> None:
        self._stack.pop()

    def data(self, text: str) -> None:
        parent = self._stack[-1]
        # whitespace of the prolog/epilog is not content
        if parent.kind == "document":
            return
        if parent.children and parent.children[-1].kind == "text":
            parent.children[-1].text += text
        else:
            parent.children.append(Node(kind="text", text=text))

    def pi(self, target: str, data: str) -> None:
        self._stack[-1].children.append(Node(kind="pi", tag=target, text=data))


def parse_source_xml(xml: str) -> Node:
    """
    Parse raw XML text into a document Node.
    Malformed input never raises: the returned document is empty and
    carries the parser message in `error`.
    """
    builder = _TreeBuilder()
    # no namespace separator: "a:Num" stays a literal tag name
    parser = expat.ParserCreate()
    parser.buffer_text = True
    parser.StartElementHandler = builder.start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.data
    parser.ProcessingInstructionHandler = builder.pi

    try:
        parser.Parse(xml or "", True)
    except expat.ExpatError as e:
        print(f"XML parse failed: {e}")
        return Node(kind="document", error=str(e))

    return builder.document


def document_root(document: Optional[Node]) -> Optional[Node]:
    """Return the single top-level element of a parsed document, if any."""
    if document is None:
        return None
    if document.kind == "element":
        return document
    for child in document.children:
        if child.kind == "element":
            return child
    return None
