"""Names configuration - default templates per category and override rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterable

from .tag import Tag
from .template import NameTemplate, parse_templates

if TYPE_CHECKING:
    from ..state.types import AudioObject
    from .resolver import ObjectLookup


class OverrideType(str, Enum):
    """Categories of nameable objects."""
    DEVICE = "device"
    ENDPOINT = "endpoint"   # sink or source node
    STREAM = "stream"       # any other node (application playback/capture)


DEFAULT_STREAM_TEMPLATES = ("{node:node.name}: {node:media.name}",)
DEFAULT_ENDPOINT_TEMPLATES = ("{device:device.nick}", "{node:node.description}")
DEFAULT_DEVICE_TEMPLATES = ("{device:device.nick}", "{device:device.description}")


@dataclass(frozen=True, slots=True)
class NameOverride:
    """
    Replaces the default templates for objects with one exact property value.

    Applies only to objects whose category is in ``types`` and whose value
    for ``property`` equals ``value`` exactly. Once matched, ``templates``
    replaces the defaults entirely; an empty tuple means "use the fallback".
    """
    types: frozenset[OverrideType]
    property: Tag
    value: str
    templates: tuple[NameTemplate, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", frozenset(OverrideType(t) for t in self.types))
        object.__setattr__(self, "templates", tuple(self.templates))

    def matches(self, category: OverrideType, resolve: Callable[[Tag], str | None]) -> bool:
        """Check whether this override applies to an object of ``category``."""
        return category in self.types and resolve(self.property) == self.value


@dataclass(frozen=True, slots=True)
class Names:
    """
    Name templates for every category plus the ordered override rules.

    Order is precedence: the first template that renders wins, and the
    first override that matches wins.
    """
    stream: tuple[NameTemplate, ...] = field(default_factory=lambda: Names.default_stream())
    endpoint: tuple[NameTemplate, ...] = field(default_factory=lambda: Names.default_endpoint())
    device: tuple[NameTemplate, ...] = field(default_factory=lambda: Names.default_device())
    overrides: tuple[NameOverride, ...] = ()

    def __post_init__(self) -> None:
        for name in ("stream", "endpoint", "device", "overrides"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @staticmethod
    def default_stream() -> tuple[NameTemplate, ...]:
        return parse_templates(DEFAULT_STREAM_TEMPLATES)

    @staticmethod
    def default_endpoint() -> tuple[NameTemplate, ...]:
        return parse_templates(DEFAULT_ENDPOINT_TEMPLATES)

    @staticmethod
    def default_device() -> tuple[NameTemplate, ...]:
        return parse_templates(DEFAULT_DEVICE_TEMPLATES)

    def templates_for(self, category: OverrideType) -> tuple[NameTemplate, ...]:
        """Default templates for a category."""
        if category == OverrideType.DEVICE:
            return self.device
        if category == OverrideType.ENDPOINT:
            return self.endpoint
        return self.stream

    def with_overrides(self, overrides: Iterable[NameOverride]) -> Names:
        """Create a copy with a different override list."""
        return Names(
            stream=self.stream,
            endpoint=self.endpoint,
            device=self.device,
            overrides=tuple(overrides),
        )

    def resolve(self, lookup: ObjectLookup, obj: AudioObject) -> str | None:
        """
        Resolve an object's display name.

        Precedence is:

        1. Overrides
        2. Stream/endpoint/device default templates
        3. Fallback (the object's own name)
        """
        from .resolver import resolve
        return resolve(self, lookup, obj)
