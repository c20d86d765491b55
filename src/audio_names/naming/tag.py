"""Tags - identifiers for one property of one kind of object.

A tag's value is its textual form, ``<kind>:<property.path>``, the same text
that appears inside a template placeholder. Tags of all three kinds are
ordered by that text.
"""

from __future__ import annotations

from enum import Enum

from ..state.types import ObjectKind


class UnknownTagError(ValueError):
    """Raised when a tag kind or property name is not recognised."""

    def __init__(self, message: str, kind: str, path: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.path = path


class DeviceTag(str, Enum):
    """Properties of a device."""
    NAME = "device:device.name"
    NICK = "device:device.nick"
    DESCRIPTION = "device:device.description"

    @property
    def kind(self) -> ObjectKind:
        return ObjectKind.DEVICE

    @property
    def path(self) -> str:
        return self.value.split(":", 1)[1]

    def __str__(self) -> str:
        return self.value


class NodeTag(str, Enum):
    """Properties of a node."""
    NAME = "node:node.name"
    NICK = "node:node.nick"
    DESCRIPTION = "node:node.description"
    MEDIA_NAME = "node:media.name"

    @property
    def kind(self) -> ObjectKind:
        return ObjectKind.NODE

    @property
    def path(self) -> str:
        return self.value.split(":", 1)[1]

    def __str__(self) -> str:
        return self.value


class ClientTag(str, Enum):
    """Properties of a client application."""
    APPLICATION_NAME = "client:application.name"
    APPLICATION_PROCESS_BINARY = "client:application.process.binary"

    @property
    def kind(self) -> ObjectKind:
        return ObjectKind.CLIENT

    @property
    def path(self) -> str:
        return self.value.split(":", 1)[1]

    def __str__(self) -> str:
        return self.value


Tag = DeviceTag | NodeTag | ClientTag

TAG_TYPES: dict[ObjectKind, type[Enum]] = {
    ObjectKind.DEVICE: DeviceTag,
    ObjectKind.NODE: NodeTag,
    ObjectKind.CLIENT: ClientTag,
}

# kind -> property path -> tag
_TAG_TABLE: dict[ObjectKind, dict[str, Tag]] = {
    kind: {member.path: member for member in tag_type}
    for kind, tag_type in TAG_TYPES.items()
}


def is_tag(value: object) -> bool:
    """Whether a value is a tag (tags are str enums, so isinstance(str) is not enough)."""
    return isinstance(value, (DeviceTag, NodeTag, ClientTag))


def all_tags() -> list[Tag]:
    """Every known tag, ordered by textual form."""
    return sorted(tag for table in _TAG_TABLE.values() for tag in table.values())


def parse_tag(text: str, path: str | None = None) -> Tag:
    """
    Look up a tag by its textual form.

    Accepts either the full form or the kind and property path separately:
        parse_tag("node:media.name")
        parse_tag("node", "media.name")

    Raises:
        UnknownTagError: If the kind or property path is not recognised
    """
    if path is None:
        if ":" not in text:
            raise UnknownTagError(
                f"Invalid tag '{text}'. Expected '<kind>:<property>'.",
                kind=text,
            )
        kind_str, path = text.split(":", 1)
    else:
        kind_str = text

    try:
        kind = ObjectKind(kind_str)
    except ValueError:
        valid = ", ".join(k.value for k in ObjectKind)
        raise UnknownTagError(
            f"Unknown tag kind '{kind_str}'. Expected one of: {valid}.",
            kind=kind_str,
            path=path,
        ) from None

    tag = _TAG_TABLE[kind].get(path)
    if tag is None:
        valid = ", ".join(sorted(_TAG_TABLE[kind]))
        raise UnknownTagError(
            f"Unknown {kind.value} property '{path}'. Expected one of: {valid}.",
            kind=kind_str,
            path=path,
        )
    return tag
