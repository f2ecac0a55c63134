"""
Declaration Registry

Collects the declarations and page rules of a page class body into an
immutable PageDefinition, runs the generation rule table over them and
rejects any accessor name that is already taken. All checks happen when the
class is created, never when an accessor is called.
"""

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from ..errors import DefinitionConflict, InvalidDeclaration
from .declarations import (
    DirectUrl,
    ElementDeclaration,
    LiteralTitle,
    PatternTitle,
    PresenceGate,
    TitleRule,
)
from .rules import Accessor, generate_accessors

logger = logging.getLogger(__name__)

# Page members backing each rule, used to report duplicate rules
_RULE_MEMBERS = {
    DirectUrl: "goto",
    LiteralTitle: "has_expected_title",
    PatternTitle: "has_expected_title",
    PresenceGate: "await_expected_element",
}


@dataclass(frozen=True)
class PageDefinition:
    """Everything declared for one page class. Shared by all its instances."""
    page_name: str
    url: Optional[str] = None
    title_rule: Optional[TitleRule] = None
    presence: Optional[ElementDeclaration] = None
    declarations: Tuple[ElementDeclaration, ...] = ()
    accessors: Mapping[str, Accessor] = field(default_factory=lambda: MappingProxyType({}))
    by_name: Mapping[str, ElementDeclaration] = field(default_factory=lambda: MappingProxyType({}))

    def operations(self) -> List[str]:
        """Names of every generated accessor, in declaration order."""
        return list(self.accessors)

    def declaration(self, name: str) -> ElementDeclaration:
        try:
            return self.by_name[name]
        except KeyError:
            raise InvalidDeclaration(f"{self.page_name} declares no element named '{name}'") from None

    def describe(self) -> Dict[str, Any]:
        """Plain summary of the definition, handy for debugging page classes."""
        return {
            "page": self.page_name,
            "url": self.url,
            "expected_title": self.title_rule.describe() if self.title_rule else None,
            "expected_element": self.presence.describe() if self.presence else None,
            "elements": {
                declaration.name: declaration.describe() for declaration in self.declarations
            },
            "operations": self.operations(),
        }


def is_declaration(value: Any) -> bool:
    """Whether a class attribute is something the registry consumes."""
    return isinstance(value, (ElementDeclaration, DirectUrl, LiteralTitle, PatternTitle, PresenceGate))


def build_definition(
    page_name: str,
    items: Iterable[Tuple[str, Any]],
    base: Optional[PageDefinition] = None,
    taken: Optional[Set[str]] = None
) -> PageDefinition:
    """
    Build the definition for one page class.

    Args:
        page_name: Class name, used in error messages
        items: (attribute name, declaration) pairs in class body order
        base: Definition inherited from the parent page class
        taken: Member names already defined on the class (methods, BasePage API)

    Returns:
        PageDefinition

    Raises:
        DefinitionConflict: Two declarations generate the same accessor name,
            or a declaration shadows an existing member
        InvalidDeclaration: A declaration references an undeclared parent
    """
    base = base or PageDefinition(page_name=page_name)
    taken = taken or set()

    url = base.url
    title_rule = base.title_rule
    presence = base.presence
    seen_rules: Dict[str, str] = {}

    declarations: List[ElementDeclaration] = list(base.declarations)
    by_name: Dict[str, ElementDeclaration] = dict(base.by_name)
    accessors: Dict[str, Accessor] = dict(base.accessors)

    for attribute, value in items:
        rule_member = _RULE_MEMBERS.get(type(value))
        if rule_member is not None:
            if rule_member in seen_rules:
                raise DefinitionConflict(page_name, rule_member, seen_rules[rule_member], attribute)
            seen_rules[rule_member] = attribute

            if isinstance(value, DirectUrl):
                url = value.url
            elif isinstance(value, PresenceGate):
                presence = value.declaration
            else:
                title_rule = value
            continue

        declaration = value if value.name == attribute else value.named(attribute)
        if declaration.parent is not None and declaration.parent not in by_name:
            raise InvalidDeclaration(
                f"{page_name}.{attribute}: parent '{declaration.parent}' must be declared before it"
            )

        for operation, accessor in generate_accessors(declaration).items():
            if operation in accessors:
                owner = accessors[operation].declaration
                raise DefinitionConflict(
                    page_name, operation,
                    f"{owner.kind.value} '{owner.name}'",
                    f"{declaration.kind.value} '{attribute}'"
                )
            if operation in taken:
                raise DefinitionConflict(
                    page_name, operation,
                    "an existing page member",
                    f"{declaration.kind.value} '{attribute}'"
                )
            accessors[operation] = accessor

        declarations.append(declaration)
        by_name[attribute] = declaration

    definition = PageDefinition(
        page_name=page_name,
        url=url,
        title_rule=title_rule,
        presence=presence,
        declarations=tuple(declarations),
        accessors=MappingProxyType(accessors),
        by_name=MappingProxyType(by_name),
    )
    logger.debug(
        f"Registered page {page_name}: {len(declarations)} elements, {len(accessors)} accessors"
    )
    return definition


def _merge_rule(page_name: str, member: str, first: PageDefinition, second: PageDefinition, attribute: str):
    mine = getattr(first, attribute)
    theirs = getattr(second, attribute)
    if theirs is None or theirs is mine:
        return mine
    if mine is None:
        return theirs
    if mine != theirs:
        raise DefinitionConflict(page_name, member, f"base page {first.page_name}", f"base page {second.page_name}")
    return mine


def merge_definitions(page_name: str, bases: Sequence[PageDefinition]) -> PageDefinition:
    """
    Combine the definitions of every base page class, in base order.

    Declarations shared through a common ancestor are taken once; anything
    else the bases declare goes through build_definition, so two bases
    generating the same accessor name raise DefinitionConflict.

    Args:
        page_name: Class name of the page being defined
        bases: Definitions of its BasePage bases

    Returns:
        PageDefinition to extend with the class's own declarations
    """
    if not bases:
        return PageDefinition(page_name=page_name)

    merged = bases[0]
    for other in bases[1:]:
        rules = replace(
            merged,
            url=_merge_rule(page_name, "goto", merged, other, "url"),
            title_rule=_merge_rule(page_name, "has_expected_title", merged, other, "title_rule"),
            presence=_merge_rule(page_name, "await_expected_element", merged, other, "presence"),
        )
        items = [
            (declaration.name, declaration)
            for declaration in other.declarations
            if merged.by_name.get(declaration.name) is not declaration
        ]
        merged = build_definition(page_name, items, base=rules)
    return merged
