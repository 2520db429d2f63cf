from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .dialect import LIST_TAG, NODE_ATTR


@dataclass(eq=False)
class ViewText:
    data: str
    parent: Optional["ViewElement"] = field(default=None, repr=False)


@dataclass(eq=False)
class ViewElement:
    """
    Attributed element of the view tree.
    `name` is the tag displayed by the editing surface (div, p, ol, li);
    the original source tag lives in the reserved "node" attribute.
    """

    name: str
    attrs: Dict[str, str] = field(default_factory=dict)
    children: List["ViewNode"] = field(default_factory=list)
    parent: Optional["ViewElement"] = field(default=None, repr=False)

    @property
    def index(self) -> Optional[int]:
        return _index_in(self.parent, self)

    @property
    def node_name(self) -> Optional[str]:
        return self.attrs.get(NODE_ATTR)

    @property
    def is_list_container(self) -> bool:
        # only the "ol" created for grouped list items; a source tag ending
        # in "-ol" is an ordinary element
        return self.name == LIST_TAG

    @property
    def is_list_item(self) -> bool:
        return self.parent is not None and self.parent.is_list_container


ViewNode = Union[ViewElement, ViewText]


@dataclass(eq=False)
class ViewFragment:
    children: List[ViewNode] = field(default_factory=list)

    def get_child(self, index: int) -> Optional[ViewNode]:
        if 0 <= index < len(self.children):
            return self.children[index]
        return None


def _index_in(parent: Optional[ViewElement], node: ViewNode) -> Optional[int]:
    if parent is None:
        return None
    for idx, child in enumerate(parent.children):
        if child is node:
            return idx
    return None


class ViewWriter:
    """
    Tree-construction API of the editing surface.
    The converter builds and reads view trees only through these calls.
    """

    def create_element(
        self, name: str, attrs: Optional[Dict[str, str]] = None
    ) -> ViewElement:
        return ViewElement(name=name, attrs=dict(attrs or {}))

    def create_text(self, data: str) -> ViewText:
        return ViewText(data=data)

    def create_document_fragment(
        self, roots: Iterable[ViewNode] = ()
    ) -> ViewFragment:
        fragment = ViewFragment()
        for root in roots:
            root.parent = None
            fragment.children.append(root)
        return fragment

    def append_child(self, node: ViewNode, parent: ViewElement) -> None:
        if node.parent is not None:
            node.parent.children.remove(node)
        node.parent = parent
        parent.children.append(node)

    def get_children(self, node: Union[ViewElement, ViewFragment]) -> List[ViewNode]:
        return list(node.children)

    def get_attribute(self, node: ViewElement, key: str) -> Optional[str]:
        return node.attrs.get(key)

    def get_attributes(self, node: ViewElement) -> List[Tuple[str, str]]:
        return list(node.attrs.items())
