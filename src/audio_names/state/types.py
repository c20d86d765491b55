"""Object record types - devices, nodes and clients observed in the audio graph."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union


ObjectId = int


class ObjectKind(str, Enum):
    """Kinds of objects that carry nameable properties."""
    DEVICE = "device"
    NODE = "node"
    CLIENT = "client"


@dataclass(frozen=True, slots=True)
class MediaClass:
    """
    A PipeWire media class such as ``Audio/Sink`` or ``Stream/Output/Audio``.

    Sinks, sources and duplex nodes are endpoints; everything else
    (application playback and capture streams) is a stream.

    Examples:
        Audio/Sink            -> sink
        Audio/Source/Virtual  -> source
        Audio/Duplex          -> sink and source
        Stream/Output/Audio   -> neither
    """
    value: str

    def __str__(self) -> str:
        return self.value

    @property
    def components(self) -> tuple[str, ...]:
        return tuple(part for part in self.value.split("/") if part)

    @property
    def is_sink(self) -> bool:
        parts = self.components
        return "Sink" in parts or "Duplex" in parts

    @property
    def is_source(self) -> bool:
        parts = self.components
        return "Source" in parts or "Duplex" in parts

    @property
    def is_endpoint(self) -> bool:
        return self.is_sink or self.is_source


@dataclass(slots=True)
class Device:
    """A device (sound card, bluetooth headset, ...)."""
    kind: ClassVar[ObjectKind] = ObjectKind.DEVICE

    id: ObjectId
    name: str | None = None
    nick: str | None = None
    description: str | None = None


@dataclass(slots=True)
class Node:
    """
    A processing node - either an endpoint (sink/source) or an application stream.

    ``device_id`` and ``client_id`` are back-references resolved through the
    object registry; the linked objects may not exist (yet).
    """
    kind: ClassVar[ObjectKind] = ObjectKind.NODE

    id: ObjectId
    name: str | None = None
    nick: str | None = None
    description: str | None = None
    media_name: str | None = None
    media_class: MediaClass | None = None
    device_id: ObjectId | None = None
    client_id: ObjectId | None = None

    def __post_init__(self) -> None:
        if isinstance(self.media_class, str):
            self.media_class = MediaClass(self.media_class)

    @property
    def is_endpoint(self) -> bool:
        """Whether the node currently looks like a sink or source."""
        media_class = self.media_class
        if media_class is None:
            return False
        if isinstance(media_class, str):
            media_class = MediaClass(media_class)
        return media_class.is_endpoint


@dataclass(slots=True)
class Client:
    """A client application connected to the audio server."""
    kind: ClassVar[ObjectKind] = ObjectKind.CLIENT

    id: ObjectId
    application_name: str | None = None
    application_process_binary: str | None = None


AudioObject = Union[Device, Node, Client]

RECORD_TYPES: dict[ObjectKind, type] = {
    ObjectKind.DEVICE: Device,
    ObjectKind.NODE: Node,
    ObjectKind.CLIENT: Client,
}
