"""
Core Module

Declarations, the generation rule table, the registry that turns a page
class body into a PageDefinition, and the BasePage initialization protocol.
"""

from .kinds import ElementKind
from .declarations import ElementDeclaration, LiteralTitle, PatternTitle
from .registry import PageDefinition, build_definition
from .rules import ACCESSOR_RULES, Accessor, generate_accessors
from .page import BasePage

__all__ = [
    "ElementKind",
    "ElementDeclaration",
    "LiteralTitle",
    "PatternTitle",
    "PageDefinition",
    "build_definition",
    "ACCESSOR_RULES",
    "Accessor",
    "generate_accessors",
    "BasePage"
]
