"""
Identifier Resolver

Turns a declaration into a live element handle. Identifiers are passed to the
driver untouched; resolver functions are called with the lookup context and
trusted to return a handle of a compatible kind. Nothing is cached.
"""

import logging
from typing import Any, Mapping

from ..errors import InvalidDeclaration
from .declarations import ElementDeclaration

logger = logging.getLogger(__name__)


def resolve(context, declaration: ElementDeclaration) -> Any:
    """
    Resolve one declaration against a context.

    Args:
        context: The page's BrowserDriver, or the handle of a parent element
        declaration: What to find

    Returns:
        The element handle produced by the driver or the resolver function
    """
    if declaration.uses_resolver:
        return declaration.locator(context)
    return context.find_element(declaration.kind, declaration.locator)


def resolve_in_scope(
    driver,
    declarations: Mapping[str, ElementDeclaration],
    name: str
) -> Any:
    """
    Resolve a declaration by name, resolving its parent chain first.

    Parents are looked up by name in the page's declaration index on every
    call, so a row scoped to a table sees the table as it is now.
    """
    declaration = declarations.get(name)
    if declaration is None:
        raise InvalidDeclaration(f"No element declared as '{name}'")

    if declaration.parent is None:
        context = driver
    else:
        context = resolve_in_scope(driver, declarations, declaration.parent)

    logger.debug(f"Resolving {name}: {declaration.describe()}")
    return resolve(context, declaration)
