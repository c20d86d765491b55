"""Name resolution - tag lookup per object kind and the override/template/fallback scan.

Only nodes forward tag queries: a node can describe itself with properties
of its device or client, but a device or client never reaches back to the
nodes using it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from ..state.types import AudioObject, Client, Device, Node, ObjectId
from .names import NameOverride, Names, OverrideType
from .tag import ClientTag, DeviceTag, NodeTag, Tag
from .template import NameTemplate


logger = logging.getLogger(__name__)


class ObjectLookup(Protocol):
    """Anything that finds objects by id - an ObjectRegistry or a plain dict."""

    def get(self, object_id: ObjectId, /) -> AudioObject | None: ...


_DEVICE_FIELDS: dict[Tag, str] = {
    DeviceTag.NAME: "name",
    DeviceTag.NICK: "nick",
    DeviceTag.DESCRIPTION: "description",
}

_NODE_FIELDS: dict[Tag, str] = {
    NodeTag.NAME: "name",
    NodeTag.NICK: "nick",
    NodeTag.DESCRIPTION: "description",
    NodeTag.MEDIA_NAME: "media_name",
}

_CLIENT_FIELDS: dict[Tag, str] = {
    ClientTag.APPLICATION_NAME: "application_name",
    ClientTag.APPLICATION_PROCESS_BINARY: "application_process_binary",
}


class NameSource(str, Enum):
    """Where a resolved name came from."""
    OVERRIDE = "override"
    TEMPLATE = "template"
    FALLBACK = "fallback"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Result of resolving a name, with enough detail to explain it."""
    name: str | None
    category: OverrideType
    source: NameSource
    template: NameTemplate | None = None
    override_index: int | None = None


def _own_field(obj: AudioObject, table: dict[Tag, str], tag: Tag) -> str | None:
    attr = table.get(tag)
    return getattr(obj, attr) if attr is not None else None


def _linked(lookup: ObjectLookup, object_id: ObjectId | None, kind: type) -> AudioObject | None:
    """Follow a node's back-reference. A dangling link is just absence."""
    if object_id is None:
        return None
    obj = lookup.get(object_id)
    return obj if isinstance(obj, kind) else None


def resolve_tag(lookup: ObjectLookup, obj: AudioObject, tag: Tag) -> str | None:
    """
    Resolve a tag as seen from ``obj``.

    Devices and clients answer only their own tags. Nodes answer node tags
    themselves and forward device/client tags to the linked object.

    Returns None if the tag does not apply, was never observed, or the
    linked object is missing.
    """
    if isinstance(obj, Device):
        return _own_field(obj, _DEVICE_FIELDS, tag)

    if isinstance(obj, Client):
        return _own_field(obj, _CLIENT_FIELDS, tag)

    if isinstance(obj, Node):
        if isinstance(tag, NodeTag):
            return _own_field(obj, _NODE_FIELDS, tag)
        if isinstance(tag, DeviceTag):
            device = _linked(lookup, obj.device_id, Device)
            return resolve_tag(lookup, device, tag) if device is not None else None
        if isinstance(tag, ClientTag):
            client = _linked(lookup, obj.client_id, Client)
            return resolve_tag(lookup, client, tag) if client is not None else None
        return None

    raise TypeError(f"Cannot resolve tags on {type(obj).__name__}")


def category(obj: AudioObject) -> OverrideType:
    """
    Category of an object, recomputed from its current state.

    Raises:
        TypeError: For clients, which are never named directly
    """
    if isinstance(obj, Device):
        return OverrideType.DEVICE
    if isinstance(obj, Node):
        return OverrideType.ENDPOINT if obj.is_endpoint else OverrideType.STREAM
    raise TypeError(f"{type(obj).__name__} objects are not nameable")


def fallback(obj: AudioObject) -> str | None:
    """The object's own name, used when no template renders."""
    if isinstance(obj, (Device, Node)):
        return obj.name
    raise TypeError(f"{type(obj).__name__} objects are not nameable")


def find_override(
    lookup: ObjectLookup,
    obj: AudioObject,
    overrides: tuple[NameOverride, ...] | list[NameOverride],
    override_type: OverrideType,
) -> tuple[int, NameOverride] | None:
    """First override (and its position) that applies to ``obj``."""
    for index, name_override in enumerate(overrides):
        if name_override.matches(override_type, lambda tag: resolve_tag(lookup, obj, tag)):
            return index, name_override
    return None


def name_override(
    lookup: ObjectLookup,
    obj: AudioObject,
    overrides: tuple[NameOverride, ...] | list[NameOverride],
    override_type: OverrideType,
) -> tuple[NameTemplate, ...] | None:
    """Templates of the first matching override, or None if nothing matches."""
    found = find_override(lookup, obj, overrides, override_type)
    return found[1].templates if found is not None else None


def templates(lookup: ObjectLookup, obj: AudioObject, names: Names) -> tuple[NameTemplate, ...]:
    """Templates to try for ``obj``: a matching override's, else its category defaults."""
    override_type = category(obj)
    matched = name_override(lookup, obj, names.overrides, override_type)
    return matched if matched is not None else names.templates_for(override_type)


def explain(names: Names, lookup: ObjectLookup, obj: AudioObject) -> Resolution:
    """
    Resolve an object's name and report which rule produced it.

    Overrides are checked before a template list is chosen; within the chosen
    list the first template that renders wins; otherwise the object's own
    name is used.
    """
    override_type = category(obj)
    found = find_override(lookup, obj, names.overrides, override_type)

    if found is not None:
        override_index, matched = found
        candidates = matched.templates
        source = NameSource.OVERRIDE
        logger.debug(f"Object {obj.id}: override #{override_index} matched ({matched.property}={matched.value!r})")
    else:
        override_index = None
        candidates = names.templates_for(override_type)
        source = NameSource.TEMPLATE

    def resolve_fn(tag: Tag) -> str | None:
        return resolve_tag(lookup, obj, tag)

    for template in candidates:
        rendered = template.render(resolve_fn)
        if rendered is not None:
            logger.debug(f"Object {obj.id}: rendered '{template}' as {rendered!r}")
            return Resolution(
                name=rendered,
                category=override_type,
                source=source,
                template=template,
                override_index=override_index,
            )

    name = fallback(obj)
    logger.debug(f"Object {obj.id}: no template rendered, fallback {name!r}")
    return Resolution(
        name=name,
        category=override_type,
        source=NameSource.FALLBACK if name is not None else NameSource.NONE,
        override_index=override_index,
    )


def resolve(names: Names, lookup: ObjectLookup, obj: AudioObject) -> str | None:
    """
    Resolve an object's display name.

    Precedence is:

    1. Overrides
    2. Stream/endpoint/device default templates
    3. Fallback

    Returns None only if nothing rendered and the object has no name.
    """
    return explain(names, lookup, obj).name
