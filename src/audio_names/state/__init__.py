"""Audio object records and the registry that holds them."""

from .types import AudioObject, Client, Device, MediaClass, Node, ObjectId, ObjectKind
from .registry import ObjectRegistry
from .loader import SnapshotError, SnapshotLoader, load_snapshot

__all__ = [
    "AudioObject",
    "Client",
    "Device",
    "MediaClass",
    "Node",
    "ObjectId",
    "ObjectKind",
    "ObjectRegistry",
    "SnapshotError",
    "SnapshotLoader",
    "load_snapshot",
]
