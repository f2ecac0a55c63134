"""
Element Kinds

The closed set of element kinds a page may declare.
"""

from enum import Enum
from typing import Union

from ..errors import InvalidDeclaration


class ElementKind(str, Enum):
    TEXT_FIELD = "text_field"
    SELECT_LIST = "select_list"
    CHECKBOX = "checkbox"
    RADIO_BUTTON = "radio_button"
    BUTTON = "button"
    LINK = "link"
    TABLE = "table"
    ROW = "row"
    CELL = "cell"
    DIV = "div"
    SPAN = "span"
    PARAGRAPH = "p"
    LIST_ITEM = "li"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    DEFINITION_LIST = "dl"
    TERM = "dt"
    DATA = "dd"
    FORM = "form"
    FRAME = "frame"
    IMAGE = "image"


# Kinds whose only value accessor returns the element's text
TEXT_KINDS = frozenset({
    ElementKind.DIV,
    ElementKind.SPAN,
    ElementKind.PARAGRAPH,
    ElementKind.LIST_ITEM,
    ElementKind.H1,
    ElementKind.H2,
    ElementKind.H3,
    ElementKind.H4,
    ElementKind.H5,
    ElementKind.H6,
    ElementKind.DEFINITION_LIST,
    ElementKind.TERM,
    ElementKind.DATA,
    ElementKind.FORM,
    ElementKind.FRAME,
})


def coerce_kind(kind: Union[str, ElementKind]) -> ElementKind:
    """Accept either an ElementKind or its string value ("text_field", "h1", ...)."""
    if isinstance(kind, ElementKind):
        return kind
    try:
        return ElementKind(kind)
    except ValueError:
        raise InvalidDeclaration(f"Unknown element kind: {kind!r}") from None
