"""Naming service - resolves display names for objects held in a registry.

Flow:
1. Config supplies the name templates and overrides
2. The registry supplies the current objects (and the links between them)
3. The service resolves under the registry lock so one call sees one view
4. Callers decide what to show when no name is available
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import Config
from .naming.resolver import NameSource, Resolution, explain
from .state.registry import ObjectRegistry
from .state.types import AudioObject, Client, ObjectId


logger = logging.getLogger(__name__)


class NamingError(Exception):
    """Raised when a name cannot be requested for an object."""
    pass


class ObjectNotFoundError(NamingError, KeyError):
    """Raised when an object id is not in the registry."""
    pass


class NotNameableError(NamingError):
    """Raised for objects that have no name of their own (clients)."""
    pass


@dataclass(frozen=True)
class ResolvedName:
    """A resolved name together with the object it belongs to."""
    object_id: ObjectId
    kind: str
    resolution: Resolution

    @property
    def name(self) -> str | None:
        return self.resolution.name

    @property
    def category(self) -> str:
        return self.resolution.category.value

    @property
    def source(self) -> NameSource:
        return self.resolution.source

    def to_dict(self) -> dict:
        template = self.resolution.template
        return {
            "id": self.object_id,
            "kind": self.kind,
            "category": self.category,
            "name": self.name,
            "source": self.source.value,
            "template": str(template) if template is not None else None,
            "override_index": self.resolution.override_index,
        }


class NamingService:
    """Resolves display names for devices and nodes."""

    def __init__(self, config: Config | None = None, registry: ObjectRegistry | None = None):
        self._config = config or Config()
        self._registry = registry if registry is not None else ObjectRegistry()

    @property
    def config(self) -> Config:
        return self._config

    @property
    def registry(self) -> ObjectRegistry:
        return self._registry

    def _describe_locked(self, obj: AudioObject) -> ResolvedName:
        if isinstance(obj, Client):
            raise NotNameableError(f"Client {obj.id} has no display name of its own")
        resolution = explain(self._config.names, self._registry, obj)
        return ResolvedName(object_id=obj.id, kind=obj.kind.value, resolution=resolution)

    def describe(self, object_id: ObjectId) -> ResolvedName:
        """
        Resolve one object and explain where its name came from.

        Raises:
            ObjectNotFoundError: If the id is unknown
            NotNameableError: If the object is a client
        """
        with self._registry.locked():
            obj = self._registry.get(object_id)
            if obj is None:
                raise ObjectNotFoundError(f"Unknown object id: {object_id}")
            return self._describe_locked(obj)

    def display_name(self, object_id: ObjectId) -> str | None:
        """Resolve one object's display name; None if nothing is known about it."""
        return self.describe(object_id).name

    def describe_all(self) -> list[ResolvedName]:
        """Resolve every device and node, ordered by id."""
        with self._registry.locked():
            results = [
                self._describe_locked(obj)
                for obj in (self._registry.get(i) for i in self._registry.all_ids())
                if obj is not None and not isinstance(obj, Client)
            ]
        unnamed = sum(1 for r in results if r.name is None)
        if unnamed:
            logger.debug(f"{unnamed} of {len(results)} objects have no name")
        return results

    def display_names(self) -> dict[ObjectId, str | None]:
        """Display names of every device and node, keyed by id."""
        return {r.object_id: r.name for r in self.describe_all()}
