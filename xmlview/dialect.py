# reserved view attributes
NODE_ATTR = "node"
PREFIX_ATTR = "prefix"
CONTAINER_NODE = "container"

LIST_SUFFIX = "-ol"
NUMBERING_TAG = "a:Num"
NUMBERING_ATTR = "numero"

# tags shown by the editing surface
CONTAINER_TAG = "div"
PARAGRAPH_TAG = "p"
LIST_TAG = "ol"
LIST_ITEM_TAG = "li"

DOCUMENT_PREFIX = (
    '<?xml version="1.0" ?>'
    '<?xml-stylesheet href="bgt-typo.style" type="text/x-styler" '
    'media="editor" alternate="yes"?>'
)

FALLBACK_DOCUMENT = "<tag>content</tag>"
