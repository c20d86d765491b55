"""Snapshot loader - builds an object registry from YAML/JSON snapshot files."""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from .registry import ObjectRegistry
from .types import AudioObject, ObjectKind, RECORD_TYPES


logger = logging.getLogger(__name__)

# Snapshot section -> object kind
SECTIONS: dict[str, ObjectKind] = {
    "devices": ObjectKind.DEVICE,
    "nodes": ObjectKind.NODE,
    "clients": ObjectKind.CLIENT,
}


class SnapshotError(ValueError):
    """Raised when a snapshot file cannot be turned into objects."""
    pass


class SnapshotLoader:
    """
    Loads a point-in-time view of the audio object graph.

    File format:
    ```yaml
    devices:
      - id: 40
        name: alsa_card.pci-0000_00_1f.3
        nick: HDA Intel PCH
        description: Built-in Audio
    nodes:
      - id: 51
        name: alsa_output.pci-0000_00_1f.3.analog-stereo
        media_class: Audio/Sink
        device_id: 40
      - id: 88
        name: Firefox
        media_name: AudioStream
        media_class: Stream/Output/Audio
        client_id: 70
    clients:
      - id: 70
        application_name: Firefox
        application_process_binary: firefox
    ```

    Properties that were never observed are simply left out.
    """

    def load_file(self, path: str | Path) -> ObjectRegistry:
        """Load a snapshot from a YAML or JSON file."""
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Snapshot file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                if path.suffix in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
            except (yaml.YAMLError, json.JSONDecodeError) as e:
                raise SnapshotError(f"Failed to parse snapshot {path}: {e}") from e

        logger.info(f"Loading snapshot file: {path}")
        return self.load_dict(data or {})

    def load_dict(self, data: dict[str, Any]) -> ObjectRegistry:
        """Load a snapshot from a dictionary."""
        if not isinstance(data, dict):
            raise SnapshotError("Snapshot must be a mapping of sections")

        objects: dict[int, AudioObject] = {}
        for section, kind in SECTIONS.items():
            records = data.get(section) or []
            if not isinstance(records, list):
                raise SnapshotError(f"Snapshot section '{section}' must be a list")

            for index, record in enumerate(records):
                obj = self._parse_record(kind, record, f"{section}[{index}]")
                if obj.id in objects:
                    raise SnapshotError(f"Duplicate object id {obj.id} at {section}[{index}]")
                objects[obj.id] = obj

        for section in data:
            if section not in SECTIONS:
                logger.warning(f"Ignoring unknown snapshot section '{section}'")

        registry = ObjectRegistry()
        registry.register_many(objects.values())
        logger.info(f"Loaded {len(registry)} objects")
        return registry

    def _parse_record(self, kind: ObjectKind, data: Any, location: str) -> AudioObject:
        """Parse a single object record from a dictionary."""
        if not isinstance(data, dict):
            raise SnapshotError(f"{location}: record must be a mapping")

        object_id = data.get("id")
        if isinstance(object_id, bool) or not isinstance(object_id, int):
            raise SnapshotError(f"{location}: 'id' must be an integer, got {object_id!r}")

        record_type = RECORD_TYPES[kind]
        known = {f.name for f in fields(record_type)}

        values: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"{location}: ignoring unknown {kind.value} property '{key}'")
                continue
            if key != "id" and value is not None and not isinstance(value, (str, int)):
                raise SnapshotError(f"{location}: '{key}' must be a scalar, got {value!r}")
            values[key] = value

        # Ids link objects; every other property is a string
        for key, value in values.items():
            if key in ("id", "device_id", "client_id"):
                if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                    raise SnapshotError(f"{location}: '{key}' must be an integer")
            elif value is not None:
                values[key] = str(value)

        return record_type(**values)


def load_snapshot(path: str | Path) -> ObjectRegistry:
    """Convenience function to load a snapshot file."""
    return SnapshotLoader().load_file(path)
