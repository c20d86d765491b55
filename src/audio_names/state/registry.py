"""Object registry - in-memory store of the devices, nodes and clients currently known."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field, fields
from typing import Iterable, Iterator

from .types import AudioObject, Client, Device, MediaClass, Node, ObjectId

logger = logging.getLogger(__name__)


@dataclass
class ObjectRegistry:
    """
    Thread-safe registry of audio objects keyed by object id.

    Supports:
    - Lookup by id (the only capability name resolution needs)
    - Upsert and removal as objects appear and disappear
    - Partial property updates
    - Atomic replacement (for snapshot reload)

    Hold ``locked()`` across a resolve call to see one consistent view.
    """
    _objects: dict[ObjectId, AudioObject] = field(default_factory=dict)
    _lock: threading.RLock = field(default_factory=threading.RLock)

    def register(self, obj: AudioObject) -> None:
        """Register an object, replacing any existing object with the same id."""
        with self._lock:
            previous = self._objects.get(obj.id)
            if previous is not None and type(previous) is not type(obj):
                logger.debug(
                    f"Object {obj.id} replaced: {previous.kind.value} -> {obj.kind.value}"
                )
            self._objects[obj.id] = obj

    def register_many(self, objects: Iterable[AudioObject]) -> None:
        """Register multiple objects atomically."""
        with self._lock:
            for obj in objects:
                self.register(obj)

    def get(self, object_id: ObjectId) -> AudioObject | None:
        """Get an object by id."""
        with self._lock:
            return self._objects.get(object_id)

    def exists(self, object_id: ObjectId) -> bool:
        with self._lock:
            return object_id in self._objects

    def __contains__(self, object_id: object) -> bool:
        with self._lock:
            return object_id in self._objects

    def __len__(self) -> int:
        with self._lock:
            return len(self._objects)

    def remove(self, object_id: ObjectId) -> AudioObject | None:
        """Remove an object. Returns the removed object, or None if unknown."""
        with self._lock:
            return self._objects.pop(object_id, None)

    def update(self, object_id: ObjectId, **properties: object) -> AudioObject:
        """
        Set properties on an existing object.

        Raises:
            KeyError: If no object has this id
            AttributeError: If a property does not exist on the object's kind
        """
        with self._lock:
            obj = self._objects.get(object_id)
            if obj is None:
                raise KeyError(f"Unknown object id: {object_id}")

            known = {f.name for f in fields(obj)} - {"id"}
            for key in properties:
                if key not in known:
                    raise AttributeError(
                        f"{obj.kind.value} has no property '{key}'"
                    )

            for key, value in properties.items():
                setattr(obj, key, value)
            if isinstance(obj, Node) and isinstance(obj.media_class, str):
                obj.media_class = MediaClass(obj.media_class)
            return obj

    def devices(self) -> list[Device]:
        with self._lock:
            return [o for o in self._objects.values() if isinstance(o, Device)]

    def nodes(self) -> list[Node]:
        with self._lock:
            return [o for o in self._objects.values() if isinstance(o, Node)]

    def clients(self) -> list[Client]:
        with self._lock:
            return [o for o in self._objects.values() if isinstance(o, Client)]

    def all_ids(self) -> list[ObjectId]:
        """All registered ids in ascending order."""
        with self._lock:
            return sorted(self._objects)

    def clear(self) -> None:
        with self._lock:
            self._objects.clear()

    def atomic_replace(self, objects: Iterable[AudioObject]) -> None:
        """Replace every object in one step (used when a snapshot is reloaded)."""
        new_objects = {obj.id: obj for obj in objects}
        with self._lock:
            self._objects = new_objects
        logger.info(f"Object registry replaced ({len(new_objects)} objects)")

    @contextmanager
    def locked(self) -> Iterator[ObjectRegistry]:
        """Hold the registry lock so a caller sees one consistent view."""
        with self._lock:
            yield self
