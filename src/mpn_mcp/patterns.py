"""Pattern registry: per-owner component type patterns.

Patterns are stored per (owner, component type). Two kinds of query exist and must
not be confused:

- matches_any(mpn, type): some owner registered a matching pattern for the type
- matches_owner(owner, mpn, type): the given owner's own registration matches

A handler deciding whether *its* manufacturer makes a part must use matches_owner,
otherwise a pattern registered by another manufacturer for the same generic type
would make it claim the part.

Patterns are compiled case-insensitive and must match the whole (upper-cased) MPN.
The registry is populated once while the catalog is built and frozen afterwards;
after freeze() it is safe for unsynchronized concurrent reads.
"""

import re
from types import MappingProxyType

from .mpn import canonical
from .taxonomy import ComponentType


class RegistryFrozenError(RuntimeError):
    """A pattern was registered after the registry was frozen."""


class PatternRegistry:
    """Per-owner (component type -> compiled patterns) mapping."""

    def __init__(self):
        # owner -> {type -> [patterns]}; insertion order is kept everywhere
        self._patterns: dict[str, dict[ComponentType, list[re.Pattern[str]]]] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, owner: str, component_type: ComponentType, pattern: str | re.Pattern[str]) -> None:
        """Register a pattern for owner/type.

        Raises:
            RegistryFrozenError: if called after freeze().
            re.error: if the pattern does not compile.
        """
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register {component_type.name} for {owner}: registry is frozen")
        if isinstance(pattern, re.Pattern):
            compiled = re.compile(pattern.pattern, pattern.flags | re.IGNORECASE)
        else:
            compiled = re.compile(pattern, re.IGNORECASE)
        by_type = self._patterns.setdefault(owner, {})
        existing = by_type.setdefault(component_type, [])
        if any(p.pattern == compiled.pattern for p in existing):
            return
        existing.append(compiled)

    def freeze(self) -> None:
        """Make the registry read-only."""
        if self._frozen:
            return
        self._patterns = MappingProxyType({
            owner: MappingProxyType({t: tuple(pats) for t, pats in by_type.items()})
            for owner, by_type in self._patterns.items()
        })
        self._frozen = True

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def matches_owner(self, owner: str, mpn: str, component_type: ComponentType) -> bool:
        """True only if `owner`'s own registration for the type matches."""
        value = canonical(mpn)
        if not value:
            return False
        patterns = self._patterns.get(owner, {}).get(component_type, ())
        return any(p.fullmatch(value) for p in patterns)

    def matches_any(self, mpn: str, component_type: ComponentType) -> bool:
        """True if any owner's registration for the type matches."""
        return any(self.matches_owner(owner, mpn, component_type) for owner in self._patterns)

    def owners_matching(self, mpn: str, component_type: ComponentType) -> list[str]:
        """Owners whose registration for the type matches, in registration order."""
        return [owner for owner in self._patterns if self.matches_owner(owner, mpn, component_type)]

    def patterns_for(self, owner: str, component_type: ComponentType) -> tuple[re.Pattern[str], ...]:
        return tuple(self._patterns.get(owner, {}).get(component_type, ()))

    def has_pattern(self, owner: str, component_type: ComponentType) -> bool:
        return bool(self._patterns.get(owner, {}).get(component_type))

    def owners(self) -> list[str]:
        return list(self._patterns)

    def supported_types(self, owner: str) -> list[ComponentType]:
        """Types the owner registered patterns for, in registration order."""
        return list(self._patterns.get(owner, {}))

    def pattern_count(self) -> int:
        return sum(len(pats) for by_type in self._patterns.values() for pats in by_type.values())
