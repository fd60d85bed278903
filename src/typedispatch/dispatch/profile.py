"""Dispatch profiles: named, duplicate-free sets of tag -> representation bindings.

A profile answers "which scalar types does this kernel support". The base
profiles mirror the usual kernel families (floating, integral, all, complex,
and their combinations). Call sites that need a few more types extend a base
profile with up to three extra tags:

    >>> FLOATING_TYPES.extend(ScalarType.Half)

Extension tags must not already be in the profile. That check runs when the
profile is built, so a bad profile fails at its definition rather than on
the first unlucky dispatch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple

from typedispatch.dispatch.errors import ProfileBuildError
from typedispatch.types import Representation, ScalarType, representation_of

logger = logging.getLogger(__name__)

MAX_EXTRA_TAGS = 3


class Binding(NamedTuple):
    """A scalar type together with the representation a body is bound to."""

    tag: ScalarType
    representation: Representation


def bind(tag: ScalarType) -> Binding:
    """Bind a tag to its registry representation."""
    tag = ScalarType(tag)
    return Binding(tag, representation_of(tag))


@dataclass(frozen=True, slots=True)
class DispatchProfile:
    """Ordered set of bindings with O(1) lookup by tag ordinal.

    Attributes:
        name: Profile name, used in diagnostics and logs.
        bindings: Bindings in declaration order.
        extra_count: Number of tags added on top of the base set.

    Invariants:
        - No tag appears twice.
        - Profiles are immutable; `extend` returns a new profile.
    """

    name: str
    bindings: tuple[Binding, ...]
    extra_count: int = 0
    _table: tuple[Binding | None, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        table: list[Binding | None] = [None] * len(ScalarType)
        for binding in self.bindings:
            if table[binding.tag] is not None:
                raise ProfileBuildError(
                    f"{binding.tag.name} appears more than once in profile {self.name!r}"
                )
            table[binding.tag] = binding
        object.__setattr__(self, "_table", tuple(table))

    def lookup(self, tag: ScalarType) -> Binding | None:
        """Return the binding for `tag`, or None if the profile excludes it."""
        return self._table[tag]

    def argument(self, binding: Binding) -> object:
        """What a generic body receives for `binding`."""
        return binding.representation

    def extend(self, *tags: ScalarType) -> DispatchProfile:
        """Return a copy of this profile that also accepts `tags`.

        Raises:
            ProfileBuildError: If a tag is already present (in the base set or
                earlier in `tags`), or if more than MAX_EXTRA_TAGS tags would
                be added in total.
        """
        if not tags:
            return self
        if self.extra_count + len(tags) > MAX_EXTRA_TAGS:
            raise ProfileBuildError(
                f"profile {self.name!r} accepts at most {MAX_EXTRA_TAGS} extra tags, "
                f"got {self.extra_count + len(tags)}"
            )

        bindings = list(self.bindings)
        present = {b.tag for b in bindings}
        for tag in tags:
            tag = ScalarType(tag)
            if tag in present:
                raise ProfileBuildError(
                    f"cannot extend profile {self.name!r} with {tag.name}: already present"
                )
            present.add(tag)
            bindings.append(bind(tag))

        name = "+".join([self.name, *(ScalarType(t).name for t in tags)])
        profile = DispatchProfile(name=name, bindings=tuple(bindings), extra_count=self.extra_count + len(tags))
        logger.debug("built profile %s (%d bindings)", profile.name, len(profile))
        return profile

    @property
    def tags(self) -> tuple[ScalarType, ...]:
        return tuple(b.tag for b in self.bindings)

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, int) and 0 <= tag < len(self._table) and self._table[tag] is not None

    def __iter__(self) -> Iterator[Binding]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)


def _base(name: str, *tags: ScalarType) -> DispatchProfile:
    return DispatchProfile(name=name, bindings=tuple(bind(t) for t in tags))


_S = ScalarType

FLOATING_TYPES = _base("floating", _S.Double, _S.Float)
FLOATING_TYPES_AND_HALF = _base("floating+half", _S.Double, _S.Float, _S.Half)
INTEGRAL_TYPES = _base("integral", _S.Byte, _S.Char, _S.Int, _S.Long, _S.Short)
ALL_TYPES = _base("all", _S.Byte, _S.Char, _S.Double, _S.Float, _S.Int, _S.Long, _S.Short)
COMPLEX_TYPES = _base("complex", _S.ComplexFloat, _S.ComplexDouble)
FLOATING_AND_COMPLEX_TYPES = _base(
    "floating+complex", _S.Double, _S.Float, _S.ComplexDouble, _S.ComplexFloat
)
ALL_TYPES_AND_COMPLEX = _base(
    "all+complex",
    _S.Byte, _S.Char, _S.Double, _S.Float, _S.Int, _S.Long, _S.Short,
    _S.ComplexFloat, _S.ComplexDouble,
)

BASE_PROFILES: dict[str, DispatchProfile] = {
    p.name: p
    for p in (
        FLOATING_TYPES,
        FLOATING_TYPES_AND_HALF,
        INTEGRAL_TYPES,
        ALL_TYPES,
        COMPLEX_TYPES,
        FLOATING_AND_COMPLEX_TYPES,
        ALL_TYPES_AND_COMPLEX,
    )
}


def build_profile(name: str, *extra_tags: ScalarType) -> DispatchProfile:
    """Build the named base profile extended with `extra_tags`.

    Legacy names are still resolved, with a DeprecationWarning.

    Raises:
        ProfileBuildError: Unknown name, duplicate tag, or too many extras.
    """
    base = BASE_PROFILES.get(name)
    if base is None:
        from typedispatch.dispatch.deprecated import LEGACY_PROFILES, resolve_legacy

        if name not in LEGACY_PROFILES:
            raise ProfileBuildError(
                f"unknown dispatch profile {name!r}. Available: {sorted(BASE_PROFILES)}"
            )
        base = resolve_legacy(name, stacklevel=3)
    return base.extend(*extra_tags)
