"""
Generation Rule Table

Maps every element kind to the accessor templates it produces. A template
knows how to name its accessor for a declaration and how to build the
function; the registry runs the templates once per declaration when a page
class is created.

The functions built here never hold an element handle. Each call asks the
page to resolve the declaration by name, so every accessor reflects the live
DOM.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from .declarations import ElementDeclaration
from .kinds import ElementKind, TEXT_KINDS

_UNSET = object()


@dataclass(frozen=True)
class AccessorTemplate:
    """One accessor a kind generates, e.g. "check_{name}"."""
    pattern: str
    role: str
    build: Callable[[ElementDeclaration], Callable]

    def operation_name(self, declaration: ElementDeclaration) -> str:
        return self.pattern.format(name=declaration.name)


@dataclass(frozen=True)
class Accessor:
    """A generated accessor, as recorded in a page definition."""
    name: str
    role: str
    declaration: ElementDeclaration
    function: Callable


def _finish(function: Callable, operation: str) -> Callable:
    function.__name__ = function.__qualname__ = operation
    return function


# ==================== Accessor Builders ====================

def _handle(declaration: ElementDeclaration) -> Callable:
    name = declaration.name

    def accessor(self):
        return self.element(name)

    accessor.__doc__ = f"Return the live {declaration.kind.value} element '{name}'."
    return accessor


def _field_value(declaration: ElementDeclaration) -> Callable:
    name = declaration.name

    def accessor(self, value=_UNSET):
        handle = self.element(name)
        if value is _UNSET:
            return handle.get_value()
        handle.set_value(value)

    accessor.__doc__ = f"Get the value of text field '{name}', or set it when a value is given."
    return accessor


def _selection(declaration: ElementDeclaration) -> Callable:
    name = declaration.name

    def accessor(self, value=_UNSET):
        handle = self.element(name)
        if value is _UNSET:
            return handle.get_value()
        handle.select(value)

    accessor.__doc__ = f"Get the selected value of select list '{name}', or select a value."
    return accessor


def _option_selected(declaration: ElementDeclaration) -> Callable:
    name = declaration.name

    def accessor(self, value) -> bool:
        return self.element(name).is_selected(value)

    accessor.__doc__ = f"Whether value is currently selected in select list '{name}'."
    return accessor


def _check(declaration: ElementDeclaration) -> Callable:
    name = declaration.name

    def accessor(self):
        self.element(name).set_checked()

    accessor.__doc__ = f"Check checkbox '{name}'."
    return accessor


def _uncheck(declaration: ElementDeclaration) -> Callable:
    name = declaration.name

    def accessor(self):
        self.element(name).clear_checked()

    accessor.__doc__ = f"Uncheck checkbox '{name}'."
    return accessor


def _checked(declaration: ElementDeclaration) -> Callable:
    name = declaration.name

    def accessor(self) -> bool:
        return self.element(name).is_checked()

    accessor.__doc__ = f"Whether checkbox '{name}' is checked."
    return accessor


def _select_radio(declaration: ElementDeclaration) -> Callable:
    name = declaration.name

    def accessor(self):
        self.element(name).select()

    accessor.__doc__ = f"Select radio button '{name}'."
    return accessor


def _radio_selected(declaration: ElementDeclaration) -> Callable:
    name = declaration.name

    def accessor(self) -> bool:
        return self.element(name).is_selected()

    accessor.__doc__ = f"Whether radio button '{name}' is selected."
    return accessor


def _click(declaration: ElementDeclaration) -> Callable:
    name = declaration.name

    def accessor(self):
        self.element(name).click()

    accessor.__doc__ = f"Click {declaration.kind.value} '{name}'."
    return accessor


def _text(declaration: ElementDeclaration) -> Callable:
    name = declaration.name

    def accessor(self) -> str:
        return self.element(name).text()

    accessor.__doc__ = f"Return the text of {declaration.kind.value} '{name}'."
    return accessor


# ==================== Rule Table ====================

_HANDLE = AccessorTemplate("{name}_handle", "handle", _handle)

ACCESSOR_RULES: Dict[ElementKind, Tuple[AccessorTemplate, ...]] = {
    ElementKind.TEXT_FIELD: (
        AccessorTemplate("{name}", "value", _field_value),
        _HANDLE,
    ),
    ElementKind.SELECT_LIST: (
        AccessorTemplate("{name}", "value", _selection),
        AccessorTemplate("{name}_selected", "query", _option_selected),
        _HANDLE,
    ),
    ElementKind.CHECKBOX: (
        AccessorTemplate("check_{name}", "action", _check),
        AccessorTemplate("uncheck_{name}", "action", _uncheck),
        AccessorTemplate("{name}_checked", "query", _checked),
        _HANDLE,
    ),
    ElementKind.RADIO_BUTTON: (
        AccessorTemplate("select_{name}", "action", _select_radio),
        AccessorTemplate("{name}_selected", "query", _radio_selected),
        _HANDLE,
    ),
    ElementKind.BUTTON: (
        AccessorTemplate("{name}", "action", _click),
        _HANDLE,
    ),
    ElementKind.LINK: (
        AccessorTemplate("{name}", "action", _click),
        _HANDLE,
    ),
    # Tables are structural containers: no implicit text
    ElementKind.TABLE: (
        AccessorTemplate("{name}", "handle", _handle),
        _HANDLE,
    ),
    ElementKind.ROW: (
        AccessorTemplate("{name}", "text", _text),
        AccessorTemplate("{name}_row", "handle", _handle),
    ),
    ElementKind.CELL: (
        AccessorTemplate("{name}", "text", _text),
        AccessorTemplate("{name}_cell", "handle", _handle),
    ),
    ElementKind.IMAGE: (
        _HANDLE,
    ),
}

for _kind in TEXT_KINDS:
    ACCESSOR_RULES[_kind] = (
        AccessorTemplate("{name}", "text", _text),
        _HANDLE,
    )


def generate_accessors(declaration: ElementDeclaration) -> Dict[str, Accessor]:
    """Run the templates for one named declaration."""
    accessors = {}
    for template in ACCESSOR_RULES[declaration.kind]:
        operation = template.operation_name(declaration)
        function = _finish(template.build(declaration), operation)
        accessors[operation] = Accessor(
            name=operation,
            role=template.role,
            declaration=declaration,
            function=function,
        )
    return accessors
